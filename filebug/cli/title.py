from typing import List, Optional

from ..config.constants import ISSUE_TITLE_PROMPT
from ..core.logging import get_logger
from ..io.base import FilebugIO

logger = get_logger()


def join_description(description: Optional[List[str]]) -> str:
    return " ".join(description or [])


async def resolve_title(candidate: str, io: FilebugIO) -> str:
    """
    Decide the issue title.

    Uses the trimmed candidate if it is not empty. Otherwise asks the user once, and returns their
    answer as entered. InputFailure from the prompt propagates to the caller.
    """
    title = candidate.strip()
    if title:
        logger.info("Using issue title from command line")
        return title

    logger.info("No issue title given, prompting user")
    return await io.prompt_user(ISSUE_TITLE_PROMPT)
