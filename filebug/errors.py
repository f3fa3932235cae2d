class FilebugError(Exception):
    pass


class InputFailure(FilebugError):
    """The user could not be asked for input, e.g. stdin was closed or the prompt was cancelled."""


class LaunchFailure(FilebugError):
    """The browser could not be opened. Never surfaced to the caller of the command."""
