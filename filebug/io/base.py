import sys
from abc import ABC, abstractmethod

from ..errors import InputFailure


class FilebugIO(ABC):
    @abstractmethod
    async def prompt_user(self, prompt: str) -> str:
        """
        Ask the user for a single line of text.

        Raises:
            InputFailure: if no line could be read.
        """
        raise NotImplementedError

    @abstractmethod
    def sys_message(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def warning(self, message: str) -> None:
        raise NotImplementedError


class StdIO(FilebugIO):
    """IO for non-interactive use, e.g. when input is piped in."""

    async def prompt_user(self, prompt: str) -> str:
        sys.stdout.write(f"{prompt}: ")
        sys.stdout.flush()
        try:
            line = sys.stdin.readline()
        except (UnicodeDecodeError, OSError) as e:
            raise InputFailure(f"Could not read input for prompt: {prompt}: {e}") from e
        if not line:
            raise InputFailure(f"No input available for prompt: {prompt}")
        return line.rstrip("\r\n")

    def sys_message(self, message: str) -> None:
        print(message)

    def warning(self, message: str) -> None:
        print(message, file=sys.stderr)
