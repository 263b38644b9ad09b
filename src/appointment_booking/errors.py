"""Error kinds raised by the stores and turned into JSON responses by the app."""


class AppError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(AppError):
    """Missing or invalid input. Raised before storage is touched."""

    status_code = 400
    message = "Invalid request"


class UnauthorizedError(AppError):
    status_code = 401
    message = "Invalid credentials"


class NotFoundError(AppError):
    status_code = 404
    message = "Not found"


class StorageError(AppError):
    """Connectivity or query failure. The message sent to the client stays generic."""

    status_code = 500
    message = "Database error"
