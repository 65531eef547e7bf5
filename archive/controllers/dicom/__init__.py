# DICOM module
from .decoder import DicomDecoder, DecodedObject
from .frame_extractor import FrameExtractor, MultipartEnvelope

__all__ = [
    'DicomDecoder',
    'DecodedObject',
    'FrameExtractor',
    'MultipartEnvelope',
]
