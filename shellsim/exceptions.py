"""
Custom exceptions for shellsim.

This module defines all custom exceptions used by the ``cat`` and ``ls``
simulations. Usage errors stop an invocation; resource errors are reported
and processing continues with the next input.
"""


class ShellSimException(Exception):
    """Base exception for all shellsim errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown shellsim error occurred."


class UsageError(ShellSimException):
    """Raised when the command line cannot be turned into a configuration."""

    @property
    def default_message(self) -> str:
        return "Invalid usage."


class MissingOutputFileError(UsageError):
    """Raised when ``>`` or ``>>`` is the last token on the command line."""

    @property
    def default_message(self) -> str:
        return "Error: No output file specified"


class InvalidOptionError(UsageError):
    """Raised when an option is not one of the recognized ``ls`` options."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Invalid option: {option}")


class SourceReadError(ShellSimException):
    """Raised when an input file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading file: {reason}")


class OutputWriteError(ShellSimException):
    """Raised when redirected output cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error writing to file: {reason}")
