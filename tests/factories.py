"""
Synthetic DICOM objects built with pydicom.
"""
from io import BytesIO
from pathlib import Path
from typing import Optional

import pydicom
from pydicom.dataset import Dataset, FileMetaDataset
from pydicom.uid import CTImageStorage, ExplicitVRLittleEndian, generate_uid

DEFAULT_PIXELS = bytes(range(16))


class DicomFactory:
    """Builds small, valid DICOM objects with 8-bit pixel data."""

    @staticmethod
    def create_dataset(
        study_uid: Optional[str] = None,
        series_uid: Optional[str] = None,
        sop_uid: Optional[str] = None,
        patient_name: str = 'DOE^JOHN',
        patient_id: str = 'PAT001',
        modality: str = 'CT',
        study_date: str = '20200315',
        study_description: str = 'CHEST',
        pixels: Optional[bytes] = DEFAULT_PIXELS,
    ) -> Dataset:
        sop_uid = sop_uid or generate_uid()

        file_meta = FileMetaDataset()
        file_meta.MediaStorageSOPClassUID = CTImageStorage
        file_meta.MediaStorageSOPInstanceUID = sop_uid
        file_meta.TransferSyntaxUID = ExplicitVRLittleEndian

        ds = Dataset()
        ds.file_meta = file_meta
        ds.SOPClassUID = CTImageStorage
        ds.SOPInstanceUID = sop_uid
        ds.StudyInstanceUID = study_uid or generate_uid()
        ds.SeriesInstanceUID = series_uid or generate_uid()
        ds.PatientName = patient_name
        ds.PatientID = patient_id
        ds.Modality = modality
        ds.StudyDate = study_date
        ds.StudyDescription = study_description

        if pixels is not None:
            ds.SamplesPerPixel = 1
            ds.PhotometricInterpretation = 'MONOCHROME2'
            ds.Rows = 4
            ds.Columns = len(pixels) // 4
            ds.BitsAllocated = 8
            ds.BitsStored = 8
            ds.HighBit = 7
            ds.PixelRepresentation = 0
            ds.PixelData = pixels
            ds['PixelData'].VR = 'OB'

        return ds

    @staticmethod
    def to_bytes(ds: Dataset) -> bytes:
        buffer = BytesIO()
        pydicom.dcmwrite(buffer, ds, enforce_file_format=True)
        return buffer.getvalue()

    @classmethod
    def create_bytes(cls, **kwargs) -> bytes:
        return cls.to_bytes(cls.create_dataset(**kwargs))

    @classmethod
    def write(cls, path: Path, **kwargs) -> Dataset:
        """Write a synthetic object to ``path`` and return its dataset."""
        ds = cls.create_dataset(**kwargs)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(cls.to_bytes(ds))
        return ds


def document_for(**kwargs) -> dict:
    """DICOM JSON document of a synthetic object, without pixel data."""
    return DicomFactory.create_dataset(pixels=None, **kwargs).to_json_dict()
