from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml
from toolz import merge, valfilter
from typer import Option

from ..config.config import DEFAULTS_CONFIG
from ..config.paths import get_default_config_path
from ..core.logging import get_logger

logger = get_logger()


def get_config_params(config_path: Optional[str], cli_params: Dict[str, Any]) -> Dict:
    """
    Resolve option values, highest priority first:
    1. CLI provided value, or FILEBUG_<KEY> environment variable (both handled by typer)
    2. User config file value
    3. defaults.yml value

    Options left unset on the command line arrive as None.
    """
    user_config_path = config_path or str(get_default_config_path())

    return merge(
        DEFAULTS_CONFIG,
        load_config_if_exists(user_config_path),
        valfilter(lambda v: v is not None, cli_params),
    )


def CliOption(yaml_key: str, *param_decls: str, envvar: Optional[str] = None, **kwargs: Any):
    """
    Creates a typer Option that defaults to None, so that config file and defaults.yml values can be
    filled in by get_config_params.
    """

    return Option(
        None,
        *param_decls,
        envvar=envvar or f"FILEBUG_{yaml_key.upper()}",
        show_default=str(DEFAULTS_CONFIG.get(yaml_key)),
        **kwargs,
    )


@lru_cache
def load_config_if_exists(user_config_path: Optional[str]) -> dict:
    """
    Load the user's config file. A missing file is not an error, one that can't be parsed is.
    """

    if not user_config_path:
        return {}

    if not Path(user_config_path).exists():
        logger.info(f"User config file {user_config_path} not found")
        return {}
    elif not Path(user_config_path).is_file():
        raise typer.BadParameter(f"User config path {user_config_path} is not a file")

    try:
        with open(user_config_path, "r") as user_config_file:
            loaded = yaml.safe_load(user_config_file)
    except (OSError, yaml.YAMLError) as e:
        raise typer.BadParameter(f"Failed to load user config file {user_config_path}: {e}") from e

    if loaded is None:
        return {}
    elif not isinstance(loaded, dict):
        raise typer.BadParameter(f"User config file {user_config_path} must contain a mapping of option names to values")
    else:
        return loaded
