# payroll_app/errors.py
from fastapi import status


class PayrollAppError(Exception):
    """Base for every error the API turns into a ``{"message": ...}`` body."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(PayrollAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "No token provided"


class InvalidToken(PayrollAppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class Forbidden(PayrollAppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied. Insufficient permissions."


class NotFound(PayrollAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(PayrollAppError):
    # overlap and still-referenced both answer 400
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Conflict"


class ValidationError(PayrollAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ServerError(PayrollAppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"
