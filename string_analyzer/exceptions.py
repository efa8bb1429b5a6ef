from typing import Optional
from fastapi import status


class StringAnalyzerError(Exception):
    """Base error rendered to clients as {"error": message}"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(StringAnalyzerError):
    """Missing or wrongly typed input"""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(StringAnalyzerError):
    """The string is already stored"""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(StringAnalyzerError):
    """Unexpected failure in the persistence layer"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
