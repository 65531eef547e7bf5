"""
DICOM-specific validators for controllers.

Validates UIDs and query levels taken from requests.
"""
from typing import Optional, Tuple

from .dicom_constants import QueryRetrieveLevel


class DICOMUIDValidator:
    """Validates DICOM UIDs (Unique Identifiers) used in storage paths."""

    @classmethod
    def is_path_safe(cls, value: str) -> bool:
        """Check that a value can be used as a single path component."""
        if not value or value in ('.', '..'):
            return False
        return '/' not in value and '\\' not in value and '\x00' not in value


class QueryLevelValidator:
    """
    Validates DICOM Query/Retrieve levels.

    Valid levels: STUDY, SERIES, IMAGE
    """

    VALID_LEVELS = {level.value for level in QueryRetrieveLevel}

    @classmethod
    def validate(cls, level: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a query/retrieve level.

        Args:
            level: Query level string

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not level:
            return False, "Query level is required"

        if not isinstance(level, str):
            return False, "Query level must be a string"

        level = level.strip().upper()

        if level not in cls.VALID_LEVELS:
            return False, f"Invalid query level '{level}'. Must be one of: {', '.join(sorted(cls.VALID_LEVELS))}"

        return True, None

    @classmethod
    def coerce(cls, level) -> QueryRetrieveLevel:
        """
        Convert a level string to QueryRetrieveLevel.

        Raises:
            ValueError: If the level is not valid
        """
        if isinstance(level, QueryRetrieveLevel):
            return level

        is_valid, error = cls.validate(level)
        if not is_valid:
            raise ValueError(error)
        return QueryRetrieveLevel(level.strip().upper())
