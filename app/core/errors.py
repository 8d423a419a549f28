# errors.py
# Application error taxonomy. Each error maps onto one HTTP status code via
# the exception handlers registered in app.main.


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str = "Something went wrong"):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, resource: str, identifier=None):
        message = f"{resource} not found"
        super().__init__(message)
        self.resource = resource
        self.identifier = identifier


class ConflictError(AppError):
    status_code = 409


class UpstreamError(AppError):
    """An external collaborator (recipe generator, geocoder) failed."""

    status_code = 502

    def __init__(self, service: str, reason: str):
        super().__init__(f"{service} failed: {reason}")
        self.service = service
        self.reason = reason


class PersistenceError(AppError):
    status_code = 500

    def __init__(self, operation: str, reason: str = ""):
        super().__init__(f"Database error during {operation}")
        self.operation = operation
        self.reason = reason
