from typing import Optional

from fastapi import status


class TaskApiError(Exception):
    """Base error carrying the HTTP status and client-safe message"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class UsernameTaken(TaskApiError):
    status_code = status.HTTP_409_CONFLICT
    code = "USERNAME_TAKEN"
    message = "Username already exists"


class InvalidCredentials(TaskApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "INVALID_CREDENTIALS"
    message = "Please check your login credentials"


class Unauthenticated(TaskApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHENTICATED"
    message = "Not authenticated"


class NotFound(TaskApiError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Task not found"


class StorageUnavailable(TaskApiError):
    code = "STORAGE_UNAVAILABLE"
    message = "Internal server error"
