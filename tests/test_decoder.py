import pytest

from archive.controllers.dicom import DicomDecoder
from archive.exceptions import DecodeFailure
from tests.factories import DEFAULT_PIXELS, DicomFactory


def test_decode_bytes_locates_pixel_data(decoder):
    buffer = DicomFactory.create_bytes(pixels=DEFAULT_PIXELS)

    decoded = decoder.decode_bytes(buffer)
    offset, length = decoded.pixel_data_range()

    assert length == len(DEFAULT_PIXELS)
    assert buffer[offset:offset + length] == DEFAULT_PIXELS
    assert decoded.pixel_data().tobytes() == DEFAULT_PIXELS


def test_identifiers(decoder):
    buffer = DicomFactory.create_bytes(study_uid='1.2.3', sop_uid='1.2.3.4')

    decoded = decoder.decode_bytes(buffer)

    assert decoded.identifier('StudyInstanceUID') == '1.2.3'
    assert decoded.identifier('SOPInstanceUID') == '1.2.3.4'
    assert decoded.identifier('AccessionNumber') is None


def test_missing_pixel_data(decoder):
    decoded = decoder.decode_bytes(DicomFactory.create_bytes(pixels=None))

    with pytest.raises(DecodeFailure):
        decoded.pixel_data_range()


def test_document_is_dicom_json(decoder):
    decoded = decoder.decode_bytes(DicomFactory.create_bytes(patient_name='DOE^JOHN', study_uid='1.2.3'))

    document = decoder.to_document(decoded)

    assert document['00100010'] == {'vr': 'PN', 'Value': [{'Alphabetic': 'DOE^JOHN'}]}
    assert document['0020000D'] == {'vr': 'UI', 'Value': ['1.2.3']}


def test_large_binary_values_become_bulk_data_uris():
    decoder = DicomDecoder(bulk_data_threshold=8)
    decoded = decoder.decode_bytes(DicomFactory.create_bytes(pixels=DEFAULT_PIXELS))

    document = decoder.to_document(decoded)

    assert document['7FE00010'] == {'vr': 'OB', 'BulkDataURI': 'bulkdata/7FE00010'}


def test_not_dicom(decoder):
    with pytest.raises(DecodeFailure) as excinfo:
        decoder.decode_bytes(b'this is not a DICOM file', source='junk.txt')

    assert excinfo.value.source == 'junk.txt'


def test_unreadable_file(decoder, tmp_path):
    with pytest.raises(DecodeFailure):
        decoder.decode_file(tmp_path / 'missing.dcm')
