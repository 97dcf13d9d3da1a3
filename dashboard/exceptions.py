class DashboardError(Exception):
    """Base class for every error raised by the dashboard client"""


class ValidationFailure(DashboardError):
    """Input rejected locally, before any request was issued"""

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


class SubmissionFailure(DashboardError):
    """
    The server (or the transport) rejected a request. The server's message
    is kept verbatim in ``message``.
    """

    def __init__(self, message, status_code=None, details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class Conflict(SubmissionFailure):
    """Entity still referenced elsewhere, or a duplicate"""


class Invalid(SubmissionFailure):
    """Missing or malformed field, including a missing scope parameter"""


class NotFound(SubmissionFailure):
    """Stale or unknown id"""


STATUS_ERRORS = {
    400: Invalid,
    404: NotFound,
    409: Conflict,
}


def error_for_status(status_code):
    return STATUS_ERRORS.get(status_code, SubmissionFailure)
