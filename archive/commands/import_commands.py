"""
Commands for importing DICOM files into the archive.
"""
from pathlib import Path
from typing import Optional, Union

from archive.controllers.ingest import IngestPipeline
from .base import (
    Command,
    CommandResult,
    DirectoryValidator,
    RequiredFieldValidator,
    WorkerCountValidator,
)


class ImportDirectoryCommand(Command):
    """
    Import every DICOM file under a directory.

    Example:
        command = ImportDirectoryCommand(source='/data/import', workers=4)
        result = command.execute()
        if result:
            print(result.data['imported'])
    """

    def __init__(
        self,
        source: Union[str, Path],
        target: Optional[Union[str, Path]] = None,
        workers: Optional[int] = None,
        pipeline: Optional[IngestPipeline] = None
    ):
        """
        Initialize command.

        Args:
            source: Directory scanned recursively for DICOM files
            target: Storage root (defaults to the configured storage directory)
            workers: Concurrent items (defaults to the configured worker count)
            pipeline: Ingest pipeline (defaults to the container's)
        """
        super().__init__()
        self.source = source
        self.target = target
        self.workers = workers
        self.pipeline = pipeline

    def validations(self):
        validations = {
            'source': (self.source, [
                RequiredFieldValidator('source'),
                DirectoryValidator('source'),
            ]),
        }
        if self.workers is not None:
            validations['workers'] = (self.workers, [WorkerCountValidator('workers')])
        return validations

    def _get_pipeline(self) -> IngestPipeline:
        pipeline = self.pipeline
        if pipeline is None:
            from archive.containers import container
            pipeline = container.ingest_pipeline()

        if self.workers is not None and self.workers != pipeline.workers:
            pipeline = IngestPipeline(
                context=pipeline.context,
                decoder=pipeline.decoder,
                file_manager=pipeline.file_manager,
                workers=self.workers,
            )
        return pipeline

    def run(self) -> CommandResult:
        """Run the ingest pipeline over the source directory."""
        pipeline = self._get_pipeline()
        report = pipeline.run(self.source, self.target)

        self.logger.info(
            f"Imported {report.imported} of {report.scanned} files from {self.source}"
        )

        return CommandResult(
            success=True,
            data=report.to_dict(),
            metadata={
                'source': str(self.source),
                'target': str(self.target or pipeline.context.storage_root),
                'workers': pipeline.workers,
            }
        )
