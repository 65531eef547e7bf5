"""
Storage module for DICOM objects.

This module provides services for:
- Content-addressed file placement (FileManager)
- The searchable document index (IndexStore)
"""
from .file_manager import FileManager
from .index_store import IndexStore

__all__ = [
    'FileManager',
    'IndexStore',
]
