"""
File Manager for DICOM storage operations.

Places objects under a content-addressed layout:
``storage_root/{StudyInstanceUID}/{SOPInstanceUID}``.
"""
import logging
import os
import shutil
from pathlib import Path
from typing import Iterator, Optional

from archive.controllers.base import DICOMUIDValidator
from archive.exceptions import InvalidIdentifier, NotFound

logger = logging.getLogger(__name__)


class FileManager:
    """
    Manages file system operations for DICOM storage.

    Responsibilities:
    - Path generation and validation
    - Directory creation
    - Byte-for-byte object copies
    - Source file discovery
    """

    def __init__(self, storage_dir: Path):
        """
        Initialize file manager.

        Args:
            storage_dir: Base directory for stored objects
        """
        self.storage_dir = Path(storage_dir)

    def _component(self, value: str) -> str:
        """Validate a UID used as a single path component."""
        if not DICOMUIDValidator.is_path_safe(value):
            logger.warning(f"Suspicious identifier rejected: {value!r}")
            raise InvalidIdentifier(value)
        return value

    def get_study_path(self, study_uid: str, root: Optional[Path] = None) -> Path:
        """
        Get storage path for a study.

        Args:
            study_uid: Study Instance UID
            root: Storage root (defaults to the configured storage directory)

        Returns:
            Path to study directory
        """
        return Path(root or self.storage_dir) / self._component(study_uid)

    def get_object_path(self, study_uid: str, sop_uid: str, root: Optional[Path] = None) -> Path:
        """
        Get storage path for an object.

        Args:
            study_uid: Study Instance UID
            sop_uid: SOP Instance UID
            root: Storage root (defaults to the configured storage directory)

        Returns:
            Path to the stored object
        """
        return self.get_study_path(study_uid, root) / self._component(sop_uid)

    def ensure_directory_exists(self, path: Path) -> Path:
        """Create a directory and its parents if absent."""
        path.mkdir(parents=True, exist_ok=True)
        return path

    def store_copy(self, source: Path, study_uid: str, sop_uid: str, root: Optional[Path] = None) -> Path:
        """
        Copy a source file into the storage layout.

        An existing object at the destination is overwritten.

        Args:
            source: File to copy
            study_uid: Study Instance UID
            sop_uid: SOP Instance UID
            root: Storage root (defaults to the configured storage directory)

        Returns:
            Path of the stored object
        """
        destination = self.get_object_path(study_uid, sop_uid, root)
        self.ensure_directory_exists(destination.parent)

        if destination.exists():
            logger.debug(f"Overwriting stored object: {destination}")

        shutil.copyfile(source, destination)
        return destination

    def read_object(self, study_uid: str, sop_uid: str) -> bytes:
        """
        Read a stored object.

        Raises:
            NotFound: If the object does not exist or the identifiers are not path safe
        """
        try:
            path = self.get_object_path(study_uid, sop_uid)
        except InvalidIdentifier:
            raise NotFound(f"{study_uid}/{sop_uid}")

        if not self.file_exists(path):
            raise NotFound(str(path))

        return path.read_bytes()

    def iter_files(self, directory: Path) -> Iterator[Path]:
        """
        Recursively yield every regular file under a directory.

        Args:
            directory: Directory to scan

        Yields:
            File paths, sorted within each directory
        """
        for dirpath, dirnames, filenames in os.walk(directory):
            dirnames.sort()
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if path.is_file():
                    yield path

    def file_exists(self, file_path: Path) -> bool:
        """
        Check if a file exists.

        Args:
            file_path: Path to check

        Returns:
            True if file exists
        """
        return file_path.exists() and file_path.is_file()
