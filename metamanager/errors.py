"""Exceptions raised by metamanager and the messages shown alongside them."""

from __future__ import annotations


class MetaManagerError(Exception):
    """Base class for every error metamanager reports."""

    default_message = "Something went wrong. Please try again."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidPathError(MetaManagerError):
    """The given path does not exist or cannot be used."""

    default_message = "Provided path is invalid"


class AlreadyInitializedError(MetaManagerError):
    """A .mm directory already exists where a new one was requested."""

    default_message = (
        "A .mm directory already exist. Cannot reinitialize the tree path."
    )


class UninitializedRootError(MetaManagerError):
    """No .mm directory was found for the current location."""

    default_message = "Current root is uninitialized"


class SomethingWentWrongError(MetaManagerError):
    """A generic failure with no more specific cause."""

    default_message = "Something went wrong. Please try again."


class ActionForbiddenError(MetaManagerError):
    """The requested action is not allowed."""

    default_message = "This action is forbidden"


class InvalidNumberOfArgumentsError(MetaManagerError):
    """A command received the wrong number of arguments."""

    default_message = "Invalid number of arguments"


class InvalidOperationError(MetaManagerError):
    """The operation cannot be carried out on the current state."""

    default_message = "Invalid operation"


class UnexpectedError(MetaManagerError):
    """An internal invariant did not hold."""

    default_message = "something unexpected happened. try again. or report"


class NodeNotFoundError(MetaManagerError):
    """No tracked node matches the requested path or id."""

    default_message = "node not found"


def error_occurred_message() -> str:
    """Prefix printed before an error that stopped a command."""
    return "Error occurred while running the command: "


def force_command_message() -> str:
    """Hint telling the user how to force re-initialisation."""
    return "Use -f or --force to force initialize."