"""Exceptions raised by the storage backends and the report workflow."""


class ReportNaviError(Exception):
    """Base class for the errors of the core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ReportNaviError):
    """The submitted data is incomplete or malformed."""


class AuthorizationError(ReportNaviError):
    """The acting user may not perform the operation on this report."""


class InvalidTransitionError(ReportNaviError):
    """The requested status is not reachable from the current one."""


class InvalidStateError(ReportNaviError):
    """The operation is not permitted in the current state."""


class BackendError(ReportNaviError):
    """The persistence backend failed. The original exception is kept as `cause`."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class ConflictError(BackendError):
    """A record with the same key is already stored."""
