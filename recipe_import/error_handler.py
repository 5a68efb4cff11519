"""
Error handling utilities for the recipe import API.
Provides standardized error logging and response formatting.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException

logger = logging.getLogger(__name__)


class APIError:
    """Standardized API error handler."""

    @staticmethod
    def handle_fetch_error(
        url: str,
        error: Exception,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> HTTPException:
        """
        Handle a failed page download.

        Args:
            url: The page that could not be fetched
            error: The exception that occurred
            extra_context: Additional context to log

        Returns:
            HTTPException with 502 status
        """
        context = {"url": url, **(extra_context or {})}
        logger.warning(f"Fetch failed for {url}: {str(error)}", extra=context)
        return HTTPException(
            status_code=502,
            detail="Could not fetch the recipe page",
        )

    @staticmethod
    def handle_no_recipe_error(
        source: str,
        error: Exception,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> HTTPException:
        """
        Handle input that held no usable recipe data.

        Args:
            source: Where the input came from (e.g., a URL or 'html')
            error: The exception that occurred
            extra_context: Additional context to log

        Returns:
            HTTPException with 422 status
        """
        context = {"source": source, **(extra_context or {})}
        logger.info(f"No recipe found in {source}: {str(error)}", extra=context)
        return HTTPException(
            status_code=422,
            detail="No recipe found",
        )

    @staticmethod
    def handle_validation_error(
        operation: str,
        error: Exception,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> HTTPException:
        """
        Handle validation errors with detailed logging.

        Args:
            operation: Description of the operation
            error: The validation error
            extra_context: Additional context to log

        Returns:
            HTTPException with validation error details
        """
        context = {"operation": operation, **(extra_context or {})}
        logger.warning(
            f"Validation error during {operation}: {str(error)}",
            extra=context,
        )
        return HTTPException(
            status_code=400,
            detail=f"Validation error: {str(error)}",
        )

    @staticmethod
    def handle_generic_error(
        operation: str,
        error: Exception,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> HTTPException:
        """
        Handle generic/unexpected errors with detailed logging.

        Args:
            operation: Description of the operation
            error: The exception that occurred
            extra_context: Additional context to log

        Returns:
            HTTPException with generic error message
        """
        context = {"operation": operation, **(extra_context or {})}
        logger.exception(
            f"Unexpected error during {operation}: {str(error)}",
            extra=context,
        )
        return HTTPException(
            status_code=500,
            detail="An unexpected error occurred",
        )

    @staticmethod
    def log_operation_success(
        operation: str,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log successful operation completion."""
        context = {"operation": operation, **(extra_context or {})}
        logger.info(f"Operation successful: {operation}", extra=context)
