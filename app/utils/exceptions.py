"""Custom exception classes and error handling utilities."""
from typing import Any, Dict, Optional
from fastapi import HTTPException, status
from loguru import logger


class StudyTrackerException(Exception):
    """Base exception for the application."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DatabaseError(StudyTrackerException):
    """Database operation errors."""
    pass


class NotFoundError(StudyTrackerException):
    """Requested resource does not exist or belongs to another user."""
    pass


class StatsRetrievalError(DatabaseError):
    """One of the dashboard statistics reads failed."""
    pass


class EmailAlreadyExistsError(StudyTrackerException):
    """Registration with an email that is already taken."""
    pass


class InvalidCredentialsError(StudyTrackerException):
    """Unknown email, wrong password or inactive account."""
    pass


class UploadError(StudyTrackerException):
    """File upload could not be stored."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ):
        super().__init__(message, details)
        self.status_code = status_code


def handle_database_error(error: Exception, detail: str = "Database operation failed. Please try again later.") -> HTTPException:
    """Handle database errors and return appropriate HTTP response."""
    logger.error(f"Database error: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )


def handle_not_found(error: NotFoundError) -> HTTPException:
    """Map a missing or foreign resource to 404."""
    logger.info(f"Not found: {error.message}")
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=error.message,
    )


def handle_stats_error(error: StatsRetrievalError) -> HTTPException:
    """Handle dashboard statistics failures with a generic message."""
    logger.error(f"Error fetching dashboard stats: {error.message} {error.details}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Failed to fetch statistics",
    )


def handle_upload_error(error: UploadError) -> HTTPException:
    """Handle upload errors."""
    logger.warning(f"Upload error: {error.message}")
    return HTTPException(
        status_code=error.status_code,
        detail=error.message,
    )


def handle_email_exists(error: EmailAlreadyExistsError) -> HTTPException:
    """Reject a duplicate registration."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=error.message,
    )


def handle_invalid_credentials(error: InvalidCredentialsError) -> HTTPException:
    """Reject a failed sign-in without saying which part was wrong."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=error.message,
        headers={"WWW-Authenticate": "Bearer"},
    )
