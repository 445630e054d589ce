"""
Error taxonomy shared by the stages and the HTTP layer.
Each error carries the HTTP status it is rendered with.
"""


class TrackerError(Exception):
    """Base class for errors reported to API callers as {"error": message}."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(TrackerError):
    """Missing or malformed request fields."""

    status_code = 400


class InsufficientData(TrackerError):
    """Linking attempted with an empty adjustment or evidence set."""

    status_code = 400


class NotFound(TrackerError):
    status_code = 404


class Forbidden(TrackerError):
    status_code = 403


class UnexpectedError(TrackerError):
    """Any other failure; the caller only sees a generic message."""

    status_code = 500
