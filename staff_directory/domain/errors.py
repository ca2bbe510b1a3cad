"""
Directory Errors
================

Error taxonomy shared by repositories, services and the HTTP layer.
"""


class DirectoryError(Exception):
    """Base class for all directory errors."""

    message = "Directory error"

    def __str__(self) -> str:
        return self.message


class InternalError(DirectoryError):
    """
    Store connectivity, execution or decode failure.

    Carries no driver detail; the cause is kept as ``__cause__``.
    """

    message = "Internal Server Error"


class NotFound(DirectoryError):
    """
    No data to show.

    Raised for an absent record, a malformed identifier and a
    list query with zero matches alike.
    """

    message = "Not Found"


class BadRequest(DirectoryError):
    """Caller input failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
