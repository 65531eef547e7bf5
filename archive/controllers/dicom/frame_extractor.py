"""
Frame Extractor.

Returns the raw Pixel Data bytes of a stored object wrapped in a
single-part multipart/related envelope. No transcoding is performed.
"""
import secrets
from dataclasses import dataclass, field
from typing import Optional, Tuple

from archive.context import ArchiveContext
from archive.controllers.storage import FileManager
from archive.exceptions import DecodeFailure, NotFound
from .decoder import DicomDecoder

PART_CONTENT_TYPE = 'application/octet-stream'


def _token() -> str:
    return secrets.token_hex(16)


@dataclass(frozen=True)
class MultipartEnvelope:
    """
    A multipart/related body holding one binary part.

    Boundary and Content-ID are fresh random tokens for every envelope.
    """
    payload: bytes
    content_location: str
    boundary: str = field(default_factory=_token)
    content_id: str = field(default_factory=_token)

    @property
    def content_type(self) -> str:
        return (
            f"multipart/related;start={self.content_id};"
            f"type='{PART_CONTENT_TYPE}';boundary='{self.boundary}'"
        )

    def render(self) -> bytes:
        head = (
            f"\r\n--{self.boundary}\r\n"
            f"Content-Location:{self.content_location}\r\n"
            f"Content-ID:{self.content_id}\r\n"
            f"Content-Type:{PART_CONTENT_TYPE}\r\n\r\n"
        ).encode('ascii')
        tail = f"\r\n--{self.boundary}--\r\n".encode('ascii')
        return b''.join((head, bytes(self.payload), tail))


class FrameExtractor:
    """
    Extracts Pixel Data from stored objects.

    Handles:
    - Stored object lookup by Study and SOP Instance UID
    - Locating the raw Pixel Data value in the stored bytes
    - Wrapping it in a multipart/related envelope
    """

    def __init__(
        self,
        context: ArchiveContext,
        decoder: DicomDecoder,
        file_manager: FileManager,
        content_location: str = 'localhost'
    ):
        self.context = context
        self.decoder = decoder
        self.file_manager = file_manager
        self.content_location = content_location
        self.logger = context.get_logger('retrieve')

    def extract_frame(self, stored_bytes: bytes, content_location: Optional[str] = None) -> Tuple[bytes, str]:
        """
        Wrap the Pixel Data of a DICOM object in a multipart envelope.

        Args:
            stored_bytes: Complete DICOM object
            content_location: Content-Location of the part (defaults to the configured value)

        Returns:
            Tuple of (body, content type)

        Raises:
            DecodeFailure: If the bytes do not decode or carry no Pixel Data
        """
        decoded = self.decoder.decode_bytes(stored_bytes, source='<stored object>')
        payload = decoded.pixel_data()

        envelope = MultipartEnvelope(
            payload=payload.tobytes(),
            content_location=content_location or self.content_location,
        )
        return envelope.render(), envelope.content_type

    def retrieve_frame(
        self,
        study_uid: str,
        sop_uid: str,
        frame: int = 1,
        content_location: Optional[str] = None
    ) -> Tuple[bytes, str]:
        """
        Retrieve a frame of a stored object.

        Every frame number returns the full Pixel Data of the object.

        Raises:
            NotFound: If the object is not stored
            DecodeFailure: If the stored object cannot be decoded
        """
        try:
            stored_bytes = self.file_manager.read_object(study_uid, sop_uid)
        except NotFound:
            self.logger.info(
                f"Frame request for missing object {study_uid}/{sop_uid}",
                extra={'study_instance_uid': study_uid, 'sop_instance_uid': sop_uid},
            )
            raise

        try:
            body, content_type = self.extract_frame(stored_bytes, content_location)
        except DecodeFailure as e:
            self.logger.error(
                f"Cannot extract frame {frame} of {sop_uid}: {e.reason}",
                extra={'sop_instance_uid': sop_uid, 'reason': e.reason},
            )
            raise

        self.logger.debug(f"Extracted frame {frame} of {sop_uid} ({len(body)} bytes)")
        return body, content_type
