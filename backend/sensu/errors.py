from typing import Optional


class SensuHandlerError(Exception):
    """Base class for everything the silence handler can fail with."""


class HandlerConfigError(SensuHandlerError):
    pass


class SilencedValidationError(SensuHandlerError):
    pass


class SensuAPIError(SensuHandlerError):
    def __init__(self, message: str, status_code: Optional[int] = None, payload: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class SilenceConflictError(SensuAPIError):
    """409 from the backend: the silencing entry already exists."""
