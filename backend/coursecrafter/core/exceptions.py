class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class SchedulerError(AppError):
    """Raised when the scheduler cannot honour a request."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)

class ScheduleGenerationError(SchedulerError):
    """Raised at the HTTP boundary when a cart yields a typed generation failure."""
    def __init__(self, kind: str, message: str, details: dict = None):
        self.kind = kind
        super().__init__(message, details={"kind": kind, **(details or {})})
