"""Custom exception classes for the marketplace."""

from typing import Optional

from fastapi import HTTPException, status


class MarketplaceError(Exception):
    """Base exception for the marketplace."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class AuthenticationError(MarketplaceError):
    """Raised when authentication fails."""
    pass


class AuthorizationError(MarketplaceError):
    """Raised when user lacks permission."""
    pass


class ResourceNotFoundError(MarketplaceError):
    """Raised when a requested resource is not found."""
    pass


class ResourceConflictError(MarketplaceError):
    """Raised when a resource already exists."""
    pass


class ValidationError(MarketplaceError):
    """Raised when input validation fails."""

    def __init__(self, message: str = "Validation failed", field: Optional[str] = None):
        self.field = field
        super().__init__(message)


# HTTP exception shortcuts
def not_found(detail: str = "Resource not found") -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def forbidden(detail: str = "Insufficient permissions") -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def unauthorized(detail: str = "Not authenticated") -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
