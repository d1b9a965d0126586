"""
Custom exception hierarchy for geoconv.

The conversion functions themselves never raise for finite input; these
exceptions are used by the validation layer, the text parsers and the
configuration loader.
"""

from typing import Any, Dict, List, Optional


class GeoconvException(Exception):
    """
    Base exception for all geoconv-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeoconvException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class InvalidCoordinateRangeError(GeoconvException):
    """
    Raised when a coordinate component lies outside its valid range.

    Used by the validation layer before a conversion is attempted.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize InvalidCoordinateRangeError.

        Args:
            message: User-friendly error message
            field: Name of the coordinate component that failed validation
            value: The offending value
            details: Technical details about the validation failure
            suggestions: List of suggestions for fixing the coordinate
        """
        error_details = details or {}
        if field:
            error_details["field"] = field
        if value is not None:
            error_details["value"] = value

        super().__init__(
            message=message,
            error_code="INVALID_COORDINATE_RANGE",
            details=error_details,
            suggestions=suggestions or ["Check the coordinate values and try again"],
        )


class CoordinateParseError(GeoconvException):
    """
    Raised when an MGRS, USNG or UTM string cannot be parsed.
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        notation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize CoordinateParseError.

        Args:
            message: User-friendly error message
            text: The input string that failed to parse
            notation: Notation being parsed (e.g., 'MGRS', 'UTM')
            details: Technical details about the parsing failure
            suggestions: List of suggestions for fixing the input
        """
        error_details = details or {}
        if text is not None:
            error_details["text"] = text
        if notation:
            error_details["notation"] = notation

        default_suggestions = [
            "Use the form '12SWC9156392016' for MGRS",
            "Use the form '12S 591563 3792016' for UTM",
        ]

        super().__init__(
            message=message,
            error_code="PARSE_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class GridLetterError(GeoconvException):
    """
    Raised when a 100 km grid letter cannot be resolved.

    The row-letter lookup falls back to the 'Z' sentinel when its computed
    index is out of range; strict conversions surface that as this error.
    """

    def __init__(
        self,
        message: str,
        letter: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GridLetterError.

        Args:
            message: User-friendly error message
            letter: The grid letter involved, if any
            details: Technical details about the lookup
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if letter:
            error_details["letter"] = letter

        super().__init__(
            message=message,
            error_code="GRID_LETTER_ERROR",
            details=error_details,
            suggestions=suggestions or ["Verify the northing is inside the UTM envelope"],
        )


class ConfigurationError(GeoconvException):
    """
    Raised when library configuration is invalid.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check GEOCONV_* environment variables are set correctly",
            "Verify .env file syntax",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
