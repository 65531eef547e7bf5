"""
Base class for archive commands.
"""
from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, List, Optional, Tuple

from .result import CommandResult
from .validators import Validator, validate_all


class Command(ABC):
    """
    One archive operation, validated and then run.

    Subclasses declare their parameter checks in ``validations()`` and do the
    work in ``run()``. ``execute()`` never raises: validation errors and
    unexpected failures both come back as a failed CommandResult.
    """

    def __init__(self):
        self.logger = logging.getLogger(f'archive.commands.{self.__class__.__name__}')
        self.validation_error: Optional[str] = None

    def validations(self) -> Dict[str, Tuple[Any, List[Validator]]]:
        """Field name -> (value, validators) checked before ``run()``."""
        return {}

    def validate(self) -> bool:
        is_valid, error = validate_all(self.validations())
        if not is_valid:
            self.logger.error(f"{self}: {error}")
            self.validation_error = error
        return is_valid

    @abstractmethod
    def run(self) -> CommandResult:
        """Do the work once parameters are known to be valid."""

    def execute(self) -> CommandResult:
        if not self.validate():
            return CommandResult.failure(self.validation_error)

        try:
            return self.run()
        except Exception as e:
            self.logger.error(f"{self} failed: {e}", exc_info=True)
            return CommandResult.failure(str(e))

    def __str__(self) -> str:
        return self.__class__.__name__
