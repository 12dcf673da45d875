"""
Typed failures raised by the services.

Each carries a client-safe ``message`` and the HTTP status the API layer
renders it with. ``detail`` is for the logs only; store error codes, parser
output and tracebacks never reach the client.
"""


class ExamServerError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str = None, detail: str = None):
        if message is not None:
            self.message = message
        self.detail = detail
        super().__init__(detail or self.message)


class DuplicateSubmission(ExamServerError):
    """A response for this roll number is already recorded."""
    status_code = 400
    message = "Roll number already submitted"


class CorruptRecord(ExamServerError):
    """A stored value no longer decodes into its expected shape."""
    message = "Stored data is corrupted"


class StorageFailure(ExamServerError):
    """Any other persistence error, including lost connectivity."""
    message = "Database operation failed"
