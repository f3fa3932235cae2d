import platform
from typing import Dict, Optional

from .. import __version__


def get_environment_info() -> Dict[str, str]:
    return {
        "os": f"{platform.system()} {platform.release()}",
        "arch": platform.machine(),
        "python_version": platform.python_version(),
        "filebug_version": __version__,
    }


def collect_environment() -> str:
    return "\n".join(f"{key}: {value}" for key, value in get_environment_info().items())


def merge_environment(user_supplied: Optional[str], include_collected: bool) -> Optional[str]:
    """Combine user-supplied environment details with collected ones. Returns None if neither is present."""
    if not include_collected:
        return user_supplied
    elif user_supplied is None:
        return collect_environment()
    else:
        return f"{user_supplied}\n\n{collect_environment()}"
