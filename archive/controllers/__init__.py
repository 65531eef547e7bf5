# Controllers package

# Attribute dictionary
from .dictionary import AttributeDictionary

# Query
from .query import QueryService, QueryTranslator, ResultFinalizer

# Storage
from .storage import FileManager, IndexStore

# DICOM
from .dicom import DicomDecoder, FrameExtractor

# Ingest
from .ingest import IngestPipeline, IngestReport

__all__ = [
    'AttributeDictionary',
    # Query
    'QueryService',
    'QueryTranslator',
    'ResultFinalizer',
    # Storage
    'FileManager',
    'IndexStore',
    # DICOM
    'DicomDecoder',
    'FrameExtractor',
    # Ingest
    'IngestPipeline',
    'IngestReport',
]
