"""
Archive runtime context.

Holds the handles every component needs (logger, index store, storage root).
Built once by the DI container and passed to components by reference.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archive.controllers.storage import IndexStore


@dataclass
class ArchiveContext:
    """
    Shared handles for archive components.

    Attributes:
        store: Index store backing queries and ingest
        storage_root: Root directory of content-addressed stored objects
        logger: Root archive logger; components derive child loggers from it
    """
    store: 'IndexStore'
    storage_root: Path
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger('archive'))

    def __post_init__(self):
        self.storage_root = Path(self.storage_root)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a child logger, e.g. 'ingest' -> 'archive.ingest'."""
        return self.logger.getChild(name)
