"""
Custom Exceptions Module

This module defines custom exceptions for error handling throughout the
discovery application: service wiring, configuration, authentication,
search and the web layer.
"""

from typing import Optional


class AppError(Exception):
    """Base exception class for all application errors"""

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: Optional[int] = None,
    ) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for JSON response"""
        return {"success": False, "error": self.message}


class ResourceNotFoundError(AppError):
    """Exception raised when a requested resource is not found"""

    status_code = 404

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, self.status_code)


class ValidationError(AppError):
    """Exception raised when input validation fails"""

    status_code = 400

    def __init__(self, message: str = "Invalid input data") -> None:
        super().__init__(message, self.status_code)


class ConfigurationError(AppError):
    """Exception raised when a mandatory configuration value is missing"""

    status_code = 500

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, self.status_code)


class ResolutionError(AppError):
    """Exception raised when a service cannot be resolved from a registry"""

    status_code = 500

    def __init__(self, message: str = "Service could not be resolved") -> None:
        super().__init__(message, self.status_code)


class CacheError(AppError):
    """Exception raised when a cache cannot be provided"""

    status_code = 500

    def __init__(self, message: str = "Cache unavailable") -> None:
        super().__init__(message, self.status_code)


class AuthError(AppError):
    """Exception raised when authentication fails"""

    status_code = 401

    def __init__(self, message: str = "authentication_error_denied") -> None:
        super().__init__(message, self.status_code)


class BackendError(AppError):
    """Exception raised when no search backend can serve a request"""

    status_code = 404

    def __init__(self, message: str = "Search backend not available") -> None:
        super().__init__(message, self.status_code)


class BadMethodCallError(AppError):
    """Exception raised when an object does not offer the requested capability"""

    status_code = 500

    def __init__(self, message: str = "Method not available") -> None:
        super().__init__(message, self.status_code)


class ILSError(AppError):
    """Exception raised when the integrated library system cannot serve a request"""

    status_code = 503

    def __init__(self, message: str = "Catalog unavailable") -> None:
        super().__init__(message, self.status_code)
