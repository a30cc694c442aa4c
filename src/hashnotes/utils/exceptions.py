"""
Custom exception hierarchy for HashNotes.

Provides structured error types for better error handling and debugging.
All exceptions inherit from HashNotesError for easy catching.
"""


class HashNotesError(Exception):
    """
    Base exception for all HashNotes errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize HashNotes error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class StorageError(HashNotesError):
    """
    Persistence backend errors.
    Raised by key-value backends when a read or write fails.
    """

    pass


class ValidationError(HashNotesError):
    """
    Validation errors.
    Raised when input validation fails or data is invalid.
    """

    pass


class ImportFormatError(ValidationError):
    """
    Import payload is not a JSON array of notes.
    The only error the note store lets reach its caller.
    """

    pass


class NotFoundError(HashNotesError):
    """
    Resource not found errors.
    Raised by explicit lookups when a note doesn't exist.
    """

    pass


class ConfigurationError(HashNotesError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class ImageError(HashNotesError):
    """
    Image conversion errors.
    Raised when an image file can't be validated or read.
    """

    pass
