from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

APP_NAME = "filebug"
APP_AUTHOR = "filebug"


def get_default_config_path() -> Path:
    """Location of the user's config file. Not created if missing.

    - Linux: ~/.config/filebug/config.yml
    - macOS: ~/Library/Application Support/filebug/config.yml
    """
    return Path(user_config_dir(APP_NAME, APP_AUTHOR)) / "config.yml"


def get_default_log_file_path() -> Path:
    return Path(user_log_dir(APP_NAME, APP_AUTHOR)) / "filebug.log"
