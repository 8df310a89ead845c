"""
Custom exceptions for partnerad.

This module defines all custom exceptions used throughout the application.
"""


class PartnerAdError(Exception):
    """Base exception for all partnerad errors."""

    pass


class InvalidInputError(PartnerAdError):
    """Raised when a required input is missing or unusable for the selected mode."""

    def __init__(self, message: str, field: str = "") -> None:
        """
        Initialize invalid input error.

        Args:
            message: Error message
            field: Name of the field that failed validation (optional)
        """
        self.field = field
        super().__init__(message)


class ConfigurationError(PartnerAdError):
    """Raised when there is a configuration problem."""

    pass


class MissingCredentialError(ConfigurationError):
    """Raised when no API credential is available at request time."""

    pass


class ImageProcessingError(PartnerAdError):
    """Raised when an uploaded image cannot be decoded."""

    def __init__(self, message: str, image_path: str = "") -> None:
        """
        Initialize image processing error.

        Args:
            message: Error message
            image_path: Path to the image that caused the error
        """
        self.image_path = image_path
        super().__init__(message)


class NoImageGeneratedError(PartnerAdError):
    """Raised when the service responds without any inline image data."""

    def __init__(self, message: str, response: str = "") -> None:
        self.response = response
        super().__init__(message)


class TransportError(PartnerAdError):
    """Base for network and service failures during the generation call."""

    pass


class APIError(TransportError):
    """Raised when an API call fails."""

    def __init__(self, message: str, status_code: int = 0, response: str = "") -> None:
        """
        Initialize API error.

        Args:
            message: Error message
            status_code: HTTP status code (if applicable)
            response: Raw API response (if available)
        """
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class NetworkError(TransportError):
    """Raised when a network operation fails."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """
        Initialize network error.

        Args:
            message: Error message
            original_error: The underlying exception that caused this error
        """
        self.original_error = original_error
        super().__init__(message)


class RequestTimeoutError(TransportError):
    """Raised when the generation request times out."""

    pass
