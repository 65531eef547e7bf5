import re

import pytest

from archive.controllers.dicom import MultipartEnvelope
from archive.exceptions import DecodeFailure, NotFound
from tests.factories import DEFAULT_PIXELS, DicomFactory

CONTENT_TYPE = re.compile(
    r"^multipart/related;start=(?P<cid>[0-9a-f]{32});"
    r"type='application/octet-stream';boundary='(?P<boundary>[0-9a-f]{32})'$"
)


def parse(body, content_type):
    match = CONTENT_TYPE.match(content_type)
    assert match, content_type
    boundary, cid = match.group('boundary'), match.group('cid')

    head = (
        f"\r\n--{boundary}\r\n"
        f"Content-Location:localhost\r\n"
        f"Content-ID:{cid}\r\n"
        f"Content-Type:application/octet-stream\r\n\r\n"
    ).encode()
    tail = f"\r\n--{boundary}--\r\n".encode()

    assert body.startswith(head)
    assert body.endswith(tail)
    return body[len(head):-len(tail)]


def store(file_manager, tmp_path, **kwargs):
    source = tmp_path / 'source.dcm'
    ds = DicomFactory.write(source, **kwargs)
    file_manager.store_copy(source, ds.StudyInstanceUID, ds.SOPInstanceUID)
    return ds


def test_extract_frame_wraps_raw_pixel_data(frame_extractor):
    body, content_type = frame_extractor.extract_frame(DicomFactory.create_bytes(pixels=DEFAULT_PIXELS))

    assert parse(body, content_type) == DEFAULT_PIXELS


def test_tokens_are_fresh_per_call(frame_extractor):
    buffer = DicomFactory.create_bytes()

    _, first = frame_extractor.extract_frame(buffer)
    _, second = frame_extractor.extract_frame(buffer)

    assert first != second


def test_explicit_content_location(frame_extractor):
    body, _ = frame_extractor.extract_frame(DicomFactory.create_bytes(), content_location='/frames/1')

    assert b'Content-Location:/frames/1\r\n' in body


def test_retrieve_frame(frame_extractor, file_manager, tmp_path):
    ds = store(file_manager, tmp_path, pixels=DEFAULT_PIXELS)

    body, content_type = frame_extractor.retrieve_frame(ds.StudyInstanceUID, ds.SOPInstanceUID, frame=1)

    assert parse(body, content_type) == DEFAULT_PIXELS


def test_frame_number_is_not_distinguished(frame_extractor, file_manager, tmp_path):
    ds = store(file_manager, tmp_path)

    body, content_type = frame_extractor.retrieve_frame(ds.StudyInstanceUID, ds.SOPInstanceUID, frame=7)

    assert parse(body, content_type) == DEFAULT_PIXELS


def test_missing_object(frame_extractor):
    with pytest.raises(NotFound):
        frame_extractor.retrieve_frame('1.2.3', '4.5.6')


def test_object_without_pixel_data(frame_extractor, file_manager, tmp_path):
    ds = store(file_manager, tmp_path, pixels=None)

    with pytest.raises(DecodeFailure):
        frame_extractor.retrieve_frame(ds.StudyInstanceUID, ds.SOPInstanceUID)


def test_corrupt_stored_object(frame_extractor, file_manager, tmp_path):
    source = tmp_path / 'corrupt'
    source.write_bytes(b'garbage')
    file_manager.store_copy(source, '1.2', '1.2.3')

    with pytest.raises(DecodeFailure):
        frame_extractor.retrieve_frame('1.2', '1.2.3')


def test_envelope_render():
    envelope = MultipartEnvelope(payload=b'\x00\xff', content_location='here', boundary='B', content_id='C')

    assert envelope.render() == (
        b"\r\n--B\r\nContent-Location:here\r\nContent-ID:C\r\n"
        b"Content-Type:application/octet-stream\r\n\r\n\x00\xff\r\n--B--\r\n"
    )
    assert envelope.content_type == "multipart/related;start=C;type='application/octet-stream';boundary='B'"
