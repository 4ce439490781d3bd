"""Custom exceptions for the CV Copilot package."""

from typing import Optional, Any, Dict


class CVCopilotError(Exception):
    """Base exception for all CV Copilot errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Error message
            error_code: Optional error code for categorization
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(CVCopilotError):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize the configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that caused the error
            details: Optional additional error details
        """
        super().__init__(message, "CONFIG_ERROR", details)
        self.config_key = config_key


class ExtractionError(CVCopilotError):
    """Base exception for failures of the text extraction stage.

    Only the extraction stage can fail; field heuristics always degrade to
    empty values instead of raising.
    """

    def __init__(self, message: str, error_code: str = "EXTRACTION_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class UnsupportedFormatError(ExtractionError):
    """Raised when the declared media type is neither PDF nor a word-processing document."""

    def __init__(self, message: str, media_type: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize the unsupported format error.

        Args:
            message: Error message
            media_type: The media type that was rejected
            details: Optional additional error details
        """
        super().__init__(message, "UNSUPPORTED_FORMAT", details)
        self.media_type = media_type


class InsufficientTextError(ExtractionError):
    """Raised when extraction produced too little text to analyze."""

    def __init__(self, message: str, text_length: int = 0, details: Optional[Dict[str, Any]] = None):
        """Initialize the insufficient text error.

        Args:
            message: Error message
            text_length: Length of the text that was extracted
            details: Optional additional error details
        """
        super().__init__(message, "INSUFFICIENT_TEXT", details)
        self.text_length = text_length


class ExtractionFailureError(ExtractionError):
    """Raised when the document could not be decoded at all."""

    def __init__(self, message: str, file_name: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize the extraction failure error.

        Args:
            message: Error message
            file_name: Optional name of the file that failed to decode
            details: Optional additional error details
        """
        super().__init__(message, "EXTRACTION_FAILURE", details)
        self.file_name = file_name
