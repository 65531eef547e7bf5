"""
DICOM decoder adapter.

Wraps pydicom behind a synchronous pull API: one call returns a fully
materialized Dataset together with the byte buffer it was read from.
"""
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydicom import dcmread
from pydicom.dataelem import DataElement as PydicomDataElement
from pydicom.dataset import Dataset
from pydicom.errors import InvalidDicomError

from archive.controllers.base import Tags
from archive.exceptions import DecodeFailure

PIXEL_DATA_TAG = int(Tags.PIXEL_DATA, 16)
UNDEFINED_LENGTH = 0xFFFFFFFF


@dataclass
class DecodedObject:
    """
    A decoded DICOM object.

    Attributes:
        dataset: Decoded pydicom Dataset
        buffer: Bytes the dataset was decoded from
        source: File path or label, for diagnostics
        pixel_range: (offset, length) of the raw Pixel Data value in ``buffer``
    """
    dataset: Dataset
    buffer: bytes
    source: str = ''
    pixel_range: Optional[Tuple[int, int]] = None

    def pixel_data_range(self) -> Tuple[int, int]:
        """
        Locate the raw Pixel Data value inside the buffer.

        Returns:
            Tuple of (offset, length)

        Raises:
            DecodeFailure: If the object has no Pixel Data element
        """
        if self.pixel_range is None:
            raise DecodeFailure(self.source, "no Pixel Data element")
        return self.pixel_range

    def pixel_data(self) -> memoryview:
        """Zero-copy view of the raw Pixel Data value."""
        offset, length = self.pixel_data_range()
        return memoryview(self.buffer)[offset:offset + length]

    def identifier(self, keyword: str) -> Optional[str]:
        """Return a UID attribute as a string, or None if absent or empty."""
        value = self.dataset.get(keyword)
        if value is None or str(value).strip() == '':
            return None
        return str(value).strip()


class DicomDecoder:
    """
    Decodes DICOM files and buffers with pydicom.

    Handles:
    - Reading files and in-memory buffers
    - Locating the raw Pixel Data value
    - Converting datasets to DICOM JSON documents for indexing
    """

    def __init__(self, force: bool = False, bulk_data_threshold: int = 1024):
        """
        Initialize decoder.

        Args:
            force: Read files without a DICOM preamble/prefix
            bulk_data_threshold: Binary values larger than this become BulkDataURIs
        """
        self.force = force
        self.bulk_data_threshold = bulk_data_threshold

    def decode_file(self, path: Union[str, Path]) -> DecodedObject:
        """
        Decode a file.

        Raises:
            DecodeFailure: If the file cannot be read or decoded
        """
        try:
            buffer = Path(path).read_bytes()
        except OSError as e:
            raise DecodeFailure(str(path), str(e))
        return self.decode_bytes(buffer, source=str(path))

    def decode_bytes(self, buffer: bytes, source: str = '<buffer>') -> DecodedObject:
        """
        Decode an in-memory DICOM object.

        Raises:
            DecodeFailure: If the buffer is not a decodable DICOM object
        """
        try:
            dataset = dcmread(BytesIO(buffer), force=self.force)
            # Must run before any element access converts the raw Pixel Data element
            pixel_range = self._locate_pixel_data(dataset)
            # Walk the dataset so malformed elements fail here rather than later
            for _ in dataset:
                pass
        except InvalidDicomError as e:
            raise DecodeFailure(source, f"not a DICOM file ({e})")
        except Exception as e:
            raise DecodeFailure(source, str(e))

        if pixel_range is not None and pixel_range[0] + pixel_range[1] > len(buffer):
            raise DecodeFailure(source, "Pixel Data extends past end of buffer")

        return DecodedObject(dataset=dataset, buffer=buffer, source=source, pixel_range=pixel_range)

    def to_document(self, decoded: DecodedObject) -> Dict[str, Any]:
        """
        Convert a decoded object to a DICOM JSON model document.

        Raises:
            DecodeFailure: If an element cannot be converted
        """
        try:
            return decoded.dataset.to_json_dict(
                bulk_data_threshold=self.bulk_data_threshold,
                bulk_data_element_handler=self._bulk_data_uri,
                suppress_invalid_tags=True,
            )
        except Exception as e:
            raise DecodeFailure(decoded.source, f"cannot convert to DICOM JSON ({e})")

    @staticmethod
    def _locate_pixel_data(dataset: Dataset) -> Optional[Tuple[int, int]]:
        if PIXEL_DATA_TAG not in dataset:
            return None

        raw = dataset.get_item(PIXEL_DATA_TAG)
        offset = getattr(raw, 'value_tell', None)
        if offset is None:
            return None

        length = raw.length
        if length == UNDEFINED_LENGTH:
            # Encapsulated data: the raw value holds the items up to the sequence delimiter
            length = len(raw.value or b'')
        return offset, length

    @staticmethod
    def _bulk_data_uri(element: PydicomDataElement) -> str:
        return f"bulkdata/{element.tag:08X}"
