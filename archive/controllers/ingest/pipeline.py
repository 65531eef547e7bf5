"""
Ingest Pipeline.

Discovers files under a source directory, decodes each one, copies it into
the content-addressed storage layout and indexes its document. Items are
independent: a failure is logged and skipped, never fatal to the batch.
"""
import concurrent.futures
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from django.db import connection

from archive.context import ArchiveContext
from archive.controllers.dicom import DicomDecoder
from archive.controllers.storage import FileManager
from archive.exceptions import (
    ArchiveError,
    DecodeFailure,
    DuplicateObject,
    MissingRequiredIdentifier,
)


class ItemOutcome(str, Enum):
    IMPORTED = 'imported'
    DUPLICATE = 'duplicate'
    FAILED = 'failed'


@dataclass
class IngestReport:
    """
    Summary of an ingest run.

    Attributes:
        scanned: Number of files found under the source directory
        imported: Files copied and newly indexed
        duplicates: Files whose SOP Instance UID was already indexed
        failed: (path, reason) for every file that was skipped
    """
    scanned: int = 0
    imported: int = 0
    duplicates: int = 0
    failed: List[Tuple[str, str]] = field(default_factory=list)

    def record(self, path: Path, outcome: ItemOutcome, reason: str = ''):
        if outcome is ItemOutcome.IMPORTED:
            self.imported += 1
        elif outcome is ItemOutcome.DUPLICATE:
            self.duplicates += 1
        else:
            self.failed.append((str(path), reason))

    def to_dict(self) -> dict:
        return {
            'scanned': self.scanned,
            'imported': self.imported,
            'duplicates': self.duplicates,
            'failed': [{'path': path, 'reason': reason} for path, reason in self.failed],
        }


class IngestPipeline:
    """
    Batch importer of DICOM files.

    Per item: decode -> derive identifiers -> copy -> index.
    """

    def __init__(
        self,
        context: ArchiveContext,
        decoder: DicomDecoder,
        file_manager: FileManager,
        workers: int = 1
    ):
        """
        Initialize the pipeline.

        Args:
            context: Archive context (index store, storage root, logger)
            decoder: DICOM decoder
            file_manager: Storage file manager
            workers: Number of items processed concurrently
        """
        self.context = context
        self.decoder = decoder
        self.file_manager = file_manager
        self.workers = max(1, int(workers))
        self.logger = context.get_logger('ingest')

    def ingest(self, source: Union[str, Path], target: Optional[Union[str, Path]] = None) -> int:
        """
        Import every file under ``source`` into ``target``.

        Returns:
            Number of objects copied and newly indexed
        """
        return self.run(source, target).imported

    def run(self, source: Union[str, Path], target: Optional[Union[str, Path]] = None) -> IngestReport:
        """
        Import every file under ``source`` and report per-item outcomes.

        Args:
            source: Directory scanned recursively
            target: Storage root (defaults to the context storage root)

        Returns:
            IngestReport
        """
        source = Path(source)
        target = Path(target) if target is not None else self.context.storage_root
        report = IngestReport()

        if not source.is_dir():
            self.logger.warning(f"Import directory does not exist: {source}")
            return report

        paths = list(self.file_manager.iter_files(source))
        report.scanned = len(paths)
        self.logger.info(f"Importing {len(paths)} files from {source} into {target}")

        if self.workers == 1:
            for path in paths:
                outcome, reason = self._process(path, target)
                report.record(path, outcome, reason)
        else:
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = {executor.submit(self._process_in_worker, path, target): path for path in paths}

                for future in concurrent.futures.as_completed(futures):
                    path = futures[future]
                    try:
                        outcome, reason = future.result()
                    except Exception as e:
                        self.logger.error(f"FAILED: {path}: {e}")
                        outcome, reason = ItemOutcome.FAILED, str(e)
                    report.record(path, outcome, reason)

        self.logger.info(
            f"Import completed: {report.imported} imported, {report.duplicates} already present, "
            f"{len(report.failed)} failed ({report.scanned} scanned)"
        )
        return report

    def _process_in_worker(self, path: Path, target: Path) -> Tuple[ItemOutcome, str]:
        try:
            return self._process(path, target)
        finally:
            connection.close()

    def _process(self, path: Path, target: Path) -> Tuple[ItemOutcome, str]:
        """Run one item, containing its per-item failures."""
        extra = {'source': str(path), 'outcome': ItemOutcome.FAILED.value}
        try:
            self._ingest_file(path, target)
        except DuplicateObject as e:
            extra.update(outcome=ItemOutcome.DUPLICATE.value, sop_instance_uid=e.sop_instance_uid)
            self.logger.info(f"Already present, skipping {path}: {e.sop_instance_uid}", extra=extra)
            return ItemOutcome.DUPLICATE, ''
        except DecodeFailure as e:
            self.logger.error(f"Cannot decode {path}: {e.reason}", extra=dict(extra, reason=e.reason))
            return ItemOutcome.FAILED, str(e)
        except MissingRequiredIdentifier as e:
            self.logger.error(f"Skipping {path}: {e}", extra=dict(extra, reason=str(e)))
            return ItemOutcome.FAILED, str(e)
        except (ArchiveError, OSError) as e:
            self.logger.error(f"Failed to import {path}: {e}", extra=dict(extra, reason=str(e)))
            return ItemOutcome.FAILED, str(e)
        except Exception as e:
            self.logger.error(f"Unexpected error importing {path}: {e}", exc_info=True, extra=extra)
            return ItemOutcome.FAILED, str(e)

        return ItemOutcome.IMPORTED, ''

    def _ingest_file(self, path: Path, target: Path):
        decoded = self.decoder.decode_file(path)

        study_uid = decoded.identifier('StudyInstanceUID')
        if not study_uid:
            raise MissingRequiredIdentifier('StudyInstanceUID', str(path))

        sop_uid = decoded.identifier('SOPInstanceUID')
        if not sop_uid:
            raise MissingRequiredIdentifier('SOPInstanceUID', str(path))

        document = self.decoder.to_document(decoded)

        # Copy before indexing so an index record never lacks its file
        stored = self.file_manager.store_copy(path, study_uid, sop_uid, root=target)
        self.context.store.insert(document, source_path=str(path))

        self.logger.debug(f"Imported {path} -> {stored}")
