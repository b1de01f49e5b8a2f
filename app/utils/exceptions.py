# app/utils/exceptions.py
from fastapi import status


class EmployeeManagementError(Exception):
    """Base class for errors raised by the service layer"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class UnauthorizedError(EmployeeManagementError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(EmployeeManagementError):
    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(EmployeeManagementError):
    """Raised when a write would break a uniqueness rule or touches a fired user"""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(EmployeeManagementError):
    status_code = status.HTTP_404_NOT_FOUND
