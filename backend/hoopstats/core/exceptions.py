# Errors raised by the query/command layer. The api layer maps them to
# status codes, everything else about a failure is just its message.


class RosterError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailure(RosterError):
    """A required field is missing or blank."""


class NotFound(RosterError):
    """The record targeted by an update does not exist."""

    status_code = 404


class StoreFailure(RosterError):
    """The underlying statement failed."""
