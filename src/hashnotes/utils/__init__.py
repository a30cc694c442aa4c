"""Utility modules for HashNotes."""

from hashnotes.utils.exceptions import (
    ConfigurationError,
    HashNotesError,
    ImageError,
    ImportFormatError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from hashnotes.utils.id_generator import generate_image_id, generate_note_id
from hashnotes.utils.logger import get_logger, setup_logging, setup_logging_from_config

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
    # ID Generators
    "generate_note_id",
    "generate_image_id",
    # Exceptions
    "HashNotesError",
    "StorageError",
    "ValidationError",
    "ImportFormatError",
    "NotFoundError",
    "ConfigurationError",
    "ImageError",
]
