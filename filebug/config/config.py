from importlib.resources import files
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ValidationError
from toolz import merge, valfilter

from .paths import APP_NAME, get_default_log_file_path

with files(APP_NAME).joinpath("defaults.yml").open("r") as f:
    DEFAULTS_CONFIG: Dict[str, Any] = yaml.safe_load(f)


class FilebugConfig(BaseModel):
    """Resolved configuration for a single invocation."""

    tracker_url: str
    open_browser: bool = True
    include_environment: bool = False
    log_file_path: str
    debug: bool = False
    system_message_color: str
    user_input_color: str
    warning_color: str


def get_config(**kwargs: Any) -> FilebugConfig:
    """
    Build the config from explicitly resolved values, falling back to packaged defaults.

    Values of None are treated as unset. Raises ValueError if the merged values are invalid.
    """
    params = merge(DEFAULTS_CONFIG, valfilter(lambda v: v is not None, kwargs))

    if not params.get("log_file_path"):
        params["log_file_path"] = str(get_default_log_file_path())

    try:
        return FilebugConfig(**params)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
