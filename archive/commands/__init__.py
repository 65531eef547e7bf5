"""
Command Pattern Implementation for archive operations.

Structure:
- base/: Core command pattern components
- import_commands: Batch import of DICOM files

This module provides command classes that follow the Command Pattern,
allowing operations to be encapsulated, validated, and composed.
"""
# Base components
from .base import Command, CommandResult

# Import commands
from .import_commands import ImportDirectoryCommand

__all__ = [
    # Base
    'Command',
    'CommandResult',

    # Import Commands
    'ImportDirectoryCommand',
]
