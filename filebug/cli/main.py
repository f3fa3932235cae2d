import asyncio
import sys
from typing import List, Optional

import typer

from ..config.config import FilebugConfig, get_config
from ..config.constants import (
    BASIC_CONFIG_PANEL,
    BEHAVIOR_CONFIG_PANEL,
    REPORT_CONFIG_PANEL,
)
from ..config.logging import setup_logging
from ..core.logging import get_logger
from ..errors import InputFailure
from ..io.base import FilebugIO, StdIO
from ..io.cli import CliIO
from ..report.report import IssueReport
from ..report.url import TrackerTemplate, build_issue_url
from ..utils.environment import merge_environment
from .info import handle_version_check
from .launch import launch_issue_url
from .options import CliOption, get_config_params
from .title import join_description, resolve_title

logger = get_logger()

app = typer.Typer(
    help="File a bug or feature report by opening a pre-filled issue form in your browser.",
    context_settings={"obj": {}},
    add_completion=False,
)


def get_io(config: FilebugConfig) -> FilebugIO:
    if sys.stdin.isatty():
        return CliIO(
            config.system_message_color,
            config.user_input_color,
            config.warning_color,
        )
    else:
        return StdIO()


@app.command()
def issue(
    description: Optional[List[str]] = typer.Argument(
        None,
        help="Issue title. If omitted, you will be prompted for one.",
        show_default=False,
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Force issue creation.",
    ),
    # Report fields
    expected: Optional[str] = typer.Option(
        None,
        "--expected",
        help="What you expected to happen.",
        rich_help_panel=REPORT_CONFIG_PANEL,
    ),
    actual: Optional[str] = typer.Option(
        None,
        "--actual",
        help="What actually happened.",
        rich_help_panel=REPORT_CONFIG_PANEL,
    ),
    steps: Optional[str] = typer.Option(
        None,
        "--steps",
        help="Steps to reproduce the problem.",
        rich_help_panel=REPORT_CONFIG_PANEL,
    ),
    environment: Optional[str] = typer.Option(
        None,
        "--environment",
        help="Additional environment details.",
        rich_help_panel=REPORT_CONFIG_PANEL,
    ),
    include_environment: Optional[bool] = CliOption(
        "include_environment",
        "--include-environment/--no-include-environment",
        help="Append OS, Python and filebug version details to the report.",
        rich_help_panel=REPORT_CONFIG_PANEL,
    ),
    # Behavior
    tracker_url: Optional[str] = CliOption(
        "tracker_url",
        "--tracker-url",
        help="URL of the issue tracker's new issue form.",
        rich_help_panel=BEHAVIOR_CONFIG_PANEL,
    ),
    open_browser: Optional[bool] = CliOption(
        "open_browser",
        "--browser/--no-browser",
        help="Whether to open the issue form in a browser. If not, the link is printed.",
        rich_help_panel=BEHAVIOR_CONFIG_PANEL,
    ),
    # Basic Configuration
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        envvar="FILEBUG_CONFIG",
        help="Path to YAML configuration file. Values override defaults but are overridden by explicit flags or environment variables.",
        rich_help_panel=BASIC_CONFIG_PANEL,
    ),
    log_file_path: Optional[str] = CliOption(
        "log_file_path",
        "--log-file-path",
        help="Where to write logs.",
        rich_help_panel=BASIC_CONFIG_PANEL,
    ),
    debug: Optional[bool] = CliOption(
        "debug",
        "--debug/--no-debug",
        help="Emit more verbose logging.",
        rich_help_panel=BASIC_CONFIG_PANEL,
    ),
    system_message_color: Optional[str] = CliOption(
        "system_message_color",
        help="Color for system messages.",
        rich_help_panel=BASIC_CONFIG_PANEL,
    ),
    user_input_color: Optional[str] = CliOption(
        "user_input_color",
        help="Color for user input.",
        rich_help_panel=BASIC_CONFIG_PANEL,
    ),
    warning_color: Optional[str] = CliOption(
        "warning_color",
        help="Color for warning messages.",
        rich_help_panel=BASIC_CONFIG_PANEL,
    ),
    show_config: bool = typer.Option(
        False,
        "--show-config",
        help="Shows current configuration and exits.",
        rich_help_panel=BASIC_CONFIG_PANEL,
    ),
    version: bool = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=handle_version_check,
        is_eager=True,
    ),
):
    """File an issue. Words given on the command line become the issue title."""
    try:
        config = get_config(
            **get_config_params(
                config_file,
                {
                    "tracker_url": tracker_url,
                    "open_browser": open_browser,
                    "include_environment": include_environment,
                    "log_file_path": log_file_path,
                    "debug": debug,
                    "system_message_color": system_message_color,
                    "user_input_color": user_input_color,
                    "warning_color": warning_color,
                },
            )
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if show_config:
        for key, value in config.model_dump().items():
            print(f"{key}={value}")
        raise typer.Exit()

    setup_logging(config.log_file_path, config.debug)

    if force:
        logger.debug("--force given, report is built the same way")

    io = get_io(config)

    try:
        title = asyncio.run(resolve_title(join_description(description), io))
    except InputFailure as e:
        logger.error(f"Could not get issue title: {e}")
        io.warning(f"Could not get an issue title: {e}")
        raise typer.Exit(1)

    report = IssueReport(
        title=title,
        expected_behavior=expected,
        actual_behavior=actual,
        steps_to_reproduce=steps,
        additional_environment=merge_environment(environment, config.include_environment),
    )

    url = build_issue_url(report, TrackerTemplate(config.tracker_url))
    launch_issue_url(io, url, open_browser=config.open_browser)


def main():
    app()


if __name__ == "__main__":
    main()
