import os
import webbrowser

from ..config.constants import SSH_ENV_VARS
from ..core.logging import get_logger
from ..errors import LaunchFailure
from ..io.base import FilebugIO

logger = get_logger()


def is_remote_session() -> bool:
    return any(os.environ.get(var) for var in SSH_ENV_VARS)


def open_url(url: str) -> None:
    try:
        opened = webbrowser.open(url)
    except (webbrowser.Error, OSError) as e:
        raise LaunchFailure(f"Could not open browser: {e}") from e

    if not opened:
        raise LaunchFailure("No runnable browser found")


def launch_issue_url(io: FilebugIO, url: str, open_browser: bool = True) -> bool:
    """
    Best-effort hand off of the issue URL to the user's browser.

    Failures are logged and never raised. Whenever the browser may not have shown the page, the URL
    is printed so the user can open it themselves.

    Returns:
        True if a browser reported opening the URL
    """
    logger.info(f"Issue URL: {url}")

    if not open_browser:
        io.sys_message(f"Open this link to file the issue: {url}")
        return False

    try:
        open_url(url)
    except LaunchFailure as e:
        logger.warning(f"Browser launch failed: {e}")
        io.sys_message(f"Could not open a browser. Open this link to file the issue: {url}")
        return False

    if is_remote_session():
        io.sys_message(f"Here's the link: {url}")
    return True
