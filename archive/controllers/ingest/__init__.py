"""
Ingest module: batch import of DICOM files into storage and the index.
"""
from .pipeline import IngestPipeline, IngestReport, ItemOutcome

__all__ = [
    'IngestPipeline',
    'IngestReport',
    'ItemOutcome',
]
