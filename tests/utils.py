from typing import List

from filebug.errors import InputFailure
from filebug.io.base import FilebugIO


class FakeIO(FilebugIO):
    """Scripted IO: prompts are answered from queued responses, output is recorded."""

    def __init__(self) -> None:
        self._user_responses: List[str] = []
        self.prompts: List[str] = []
        self._sys_messages: List[str] = []
        self._warnings: List[str] = []

    def add_user_responses(self, *responses: str) -> None:
        self._user_responses.extend(responses)

    async def prompt_user(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._user_responses:
            raise InputFailure(f"No scripted response for prompt: {prompt}")
        return self._user_responses.pop(0)

    def sys_message(self, message: str) -> None:
        self._sys_messages.append(message)

    def warning(self, message: str) -> None:
        self._warnings.append(message)

    def get_sys_messages(self) -> List[str]:
        return self._sys_messages

    def get_warnings(self) -> List[str]:
        return self._warnings
