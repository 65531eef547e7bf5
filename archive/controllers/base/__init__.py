"""
Base constants and validators for controllers.
"""
from .dicom_constants import Tags, QueryRetrieveLevel, DefaultAttributes
from .validators import DICOMUIDValidator, QueryLevelValidator

__all__ = [
    # Constants
    'Tags',
    'QueryRetrieveLevel',
    'DefaultAttributes',

    # Validators
    'DICOMUIDValidator',
    'QueryLevelValidator',
]
