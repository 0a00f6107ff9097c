"""Custom exceptions for the TuneLoop API."""


class TuneLoopError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        super().__init__(message)


class ValidationError(TuneLoopError):
    """Malformed or missing request input."""

    status_code = 400


class NotFoundError(TuneLoopError):
    """Referenced profile, song or playlist does not exist."""

    status_code = 404


class ForbiddenError(TuneLoopError):
    """Acting profile is not allowed to perform the action."""

    status_code = 403

    def __init__(self, message: str = 'Forbidden: not playlist owner'):
        super().__init__(message)


class ConflictError(TuneLoopError):
    """Uniqueness violation on create."""

    status_code = 409


class InternalError(TuneLoopError):
    """Unexpected failure, surfaced without internals."""

    status_code = 500

    def __init__(self, message: str = 'Internal server error'):
        super().__init__(message)
