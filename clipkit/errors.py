"""Exceptions raised by the clipkit engine."""


class ClipKitError(Exception):
    """Base class for every error the CLI reports to the user."""


class UnknownCommand(ClipKitError):
    def __init__(self, name: str):
        super().__init__(f"Unknown command: {name!r}")
        self.name = name


class InputUnavailable(ClipKitError):
    """The clipboard could not be read."""


class OutputUnavailable(ClipKitError):
    """The clipboard could not be written."""


class InvalidEncoding(ClipKitError):
    """A binary-decode token is not an 8-bit base-2 number."""


class InvalidJson(ClipKitError):
    pass


class InvalidUrl(ClipKitError):
    pass


class NetworkError(ClipKitError):
    pass


class TransformationFailed(ClipKitError):
    """Wraps the error raised by a transform, keeping it as ``cause``."""

    def __init__(self, command: str, cause: BaseException):
        super().__init__(f"{command} failed: {cause}")
        self.command = command
        self.cause = cause


class ConfigError(ClipKitError):
    """clipkit.ini could not be parsed."""
