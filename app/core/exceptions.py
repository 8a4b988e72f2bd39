from typing import Any, Dict, Optional
from fastapi import status


class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the service.
    Keeps the error payload returned to clients in one format.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. COMMON ERRORS
# =========================================================

class BadRequestException(BaseAPIException):
    """400: the request is well-formed JSON but cannot be acted on"""
    def __init__(self, message: str = "Bad Request", details: dict = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class NotFoundException(BaseAPIException):
    """404: no document matches the identifier"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )

# =========================================================
# 2. STORAGE ERRORS
# =========================================================

class InvalidIdentifierException(BaseAPIException):
    """
    400: the path identifier is not a valid MongoDB ObjectId
    (24 hex characters).
    """
    def __init__(self, identifier: Any):
        super().__init__(
            message=f"Invalid identifier: {identifier!r}",
            code="INVALID_IDENTIFIER",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"id": str(identifier)}
        )

class StorageUnavailableException(BaseAPIException):
    """
    503: the MongoDB connection or operation failed
    (network, server error, malformed query).
    """
    def __init__(self, message: str):
        super().__init__(
            message=f"Storage Error: {message}",
            code="STORAGE_UNAVAILABLE",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )
