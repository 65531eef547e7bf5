"""
Base command pattern components.
"""
from .command import Command
from .result import CommandResult
from .validators import (
    Validator,
    RequiredFieldValidator,
    DirectoryValidator,
    WorkerCountValidator,
    validate_all,
)

__all__ = [
    'Command',
    'CommandResult',
    'Validator',
    'RequiredFieldValidator',
    'DirectoryValidator',
    'WorkerCountValidator',
    'validate_all',
]
