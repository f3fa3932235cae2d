import typer

from .. import __version__


def handle_version_check(value: bool):
    if not value:
        return
    typer.echo(f"filebug version: {__version__}")
    raise typer.Exit()
