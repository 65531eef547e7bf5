"""
Parameter checks for archive commands.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


class Validator(ABC):
    """Checks one command parameter."""

    def __init__(self, field_name: str):
        self.field_name = field_name

    @abstractmethod
    def check(self, value: Any) -> Optional[str]:
        """Return an error message, or None if the value is acceptable."""

    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        error = self.check(value)
        return error is None, error


class RequiredFieldValidator(Validator):
    def check(self, value: Any) -> Optional[str]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return f"{self.field_name} is required"
        return None


class DirectoryValidator(Validator):
    """The value names an existing directory, such as an import source."""

    def check(self, value: Any) -> Optional[str]:
        path = Path(value)
        if not path.exists():
            return f"{self.field_name} does not exist: {path}"
        if not path.is_dir():
            return f"{self.field_name} must be a directory: {path}"
        return None


class WorkerCountValidator(Validator):
    """The value is a usable ingest worker count."""

    def __init__(self, field_name: str = 'workers', maximum: int = 64):
        super().__init__(field_name)
        self.maximum = maximum

    def check(self, value: Any) -> Optional[str]:
        if isinstance(value, bool) or not isinstance(value, int):
            return f"{self.field_name} must be an integer, got: {type(value).__name__}"
        if not 1 <= value <= self.maximum:
            return f"{self.field_name} must be between 1 and {self.maximum}, got: {value}"
        return None


def validate_all(validations: Dict[str, Tuple[Any, List[Validator]]]) -> Tuple[bool, Optional[str]]:
    """
    Run validators field by field, stopping at the first error.

    Returns:
        tuple: (all_valid, first_error_message)
    """
    for value, validators in validations.values():
        for validator in validators:
            is_valid, error = validator.validate(value)
            if not is_valid:
                return False, error

    return True, None
