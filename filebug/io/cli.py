from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.lexers import PygmentsLexer
from prompt_toolkit.styles import Style
from pygments.lexers.special import TextLexer
from rich.console import Console
from rich.text import Text

from ..errors import InputFailure
from .base import FilebugIO


class CliIO(FilebugIO):
    def __init__(
        self,
        system_message_color: str,
        user_input_color: str,
        warning_color: str,
    ) -> None:
        self.console = Console()
        self.system_message_color = system_message_color
        self.user_input_color = user_input_color
        self.warning_color = warning_color

        self.style = Style.from_dict(
            {
                "prompt": "bold",
                "user-input": user_input_color + " bold",
                "": user_input_color,
            }
        )
        self.prompt_session = PromptSession(
            history=InMemoryHistory(),
            style=self.style,
            lexer=PygmentsLexer(TextLexer),
        )

    async def prompt_user(self, prompt: str) -> str:
        try:
            return await self.prompt_session.prompt_async(HTML("<b>{}: </b>").format(prompt), style=self.style)
        except (EOFError, KeyboardInterrupt) as e:
            raise InputFailure(f"Prompt cancelled: {prompt}") from e

    def sys_message(self, message: str) -> None:
        # soft_wrap keeps long URLs on one line so they can be copied
        self.console.print(Text(message, style=self.system_message_color), soft_wrap=True)

    def warning(self, message: str) -> None:
        self.console.print(Text(message, style=self.warning_color), soft_wrap=True)
