"""
DICOM constants for tags, query levels, and default attribute sets.

Centralizes magic numbers and improves code readability.
"""
from enum import Enum


class Tags:
    """Tags (8 uppercase hex digits) the archive refers to directly."""
    SOP_CLASS_UID = '00080016'
    SOP_INSTANCE_UID = '00080018'
    MODALITY = '00080060'
    MODALITIES_IN_STUDY = '00080061'
    PATIENT_NAME = '00100010'
    STUDY_INSTANCE_UID = '0020000D'
    SERIES_INSTANCE_UID = '0020000E'
    PIXEL_DATA = '7FE00010'


class QueryRetrieveLevel(str, Enum):
    """
    Query/Retrieve hierarchy levels.

    Each level carries the tag of the identifier that is unique at that level.
    """
    STUDY = 'STUDY'
    SERIES = 'SERIES'
    IMAGE = 'IMAGE'

    @property
    def unique_key(self) -> str:
        """Tag used to deduplicate results at this level."""
        return _UNIQUE_KEYS[self]


_UNIQUE_KEYS = {
    QueryRetrieveLevel.STUDY: Tags.STUDY_INSTANCE_UID,
    QueryRetrieveLevel.SERIES: Tags.SERIES_INSTANCE_UID,
    QueryRetrieveLevel.IMAGE: Tags.SOP_INSTANCE_UID,
}


class DefaultAttributes:
    """
    Attributes returned by each query endpoint regardless of the query.

    Web viewers (e.g. OHIF) assume these are always present.
    """
    STUDY = (
        '00080005',
        '00080020',
        '00080030',
        '00080050',
        '00080054',
        '00080056',
        '00080061',
        '00080090',
        '00081190',
        '00100010',
        '00100020',
        '00100030',
        '00100040',
        '0020000D',
        '00200010',
        '00201206',
        '00201208',
    )

    SERIES = (
        '00080005',
        '00080054',
        '00080056',
        '00080060',
        '0008103E',
        '00081190',
        '0020000E',
        '00200011',
        '00201209',
    )

    INSTANCES = (
        '00080016',
        '00080018',
    )

    INSTANCE_METADATA = (
        '00080016',
        '00080018',
        '00080060',
        '00280002',
        '00280004',
        '00280010',
        '00280011',
        '00280030',
        '00280100',
        '00280101',
        '00280102',
        '00280103',
        '00281050',
        '00281051',
        '00281052',
        '00281053',
        '00200032',
        '00200037',
    )
