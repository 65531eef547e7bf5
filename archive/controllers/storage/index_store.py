"""
Index store for DICOM JSON documents.

Persists one InstanceRecord per SOP Instance plus its searchable DataElement
rows. The unique constraint on ``sop_instance_uid`` is what rejects
duplicate ingestion, including concurrent ingestion of the same object.
"""
import logging
from typing import Any, Dict, Iterator, List, Optional

from django.db import IntegrityError, transaction

from archive.controllers.base import Tags
from archive.controllers.query.conditions import StoreFilter
from archive.controllers.query.finalizer import unique_value
from archive.exceptions import DuplicateObject, MissingRequiredIdentifier
from archive.models import DataElement, InstanceRecord

logger = logging.getLogger(__name__)

# Binary and sequence elements are kept in the document but not searchable
UNINDEXED_VRS = frozenset({'SQ', 'OB', 'OD', 'OF', 'OL', 'OV', 'OW', 'UN'})

PERSON_NAME_COMPONENTS = ('Alphabetic', 'Ideographic', 'Phonetic')


def build_elements(document: Dict[str, Any]) -> List[DataElement]:
    """
    Build unsaved DataElement rows for the searchable values of a document.

    Args:
        document: DICOM JSON model dictionary

    Returns:
        List of DataElement instances without a record
    """
    elements = []

    for tag, element in document.items():
        if not isinstance(element, dict):
            continue

        vr = element.get('vr', '')
        if vr in UNINDEXED_VRS:
            continue

        for position, value in enumerate(element.get('Value') or []):
            if value is None:
                continue

            if vr == 'PN':
                if not isinstance(value, dict):
                    value = {'Alphabetic': str(value)}
                for component in PERSON_NAME_COMPONENTS:
                    if value.get(component):
                        elements.append(DataElement(
                            tag=tag, vr=vr, component=component,
                            position=position, value=value[component],
                        ))
                continue

            elements.append(DataElement(tag=tag, vr=vr, position=position, value=str(value)))

    return elements


class IndexStore:
    """
    Document index over the Django ORM.

    Responsibilities:
    - Inserting documents with duplicate rejection
    - Running StoreFilters in insertion order
    - Counting and fetching records
    """

    def insert(self, document: Dict[str, Any], source_path: str = '') -> InstanceRecord:
        """
        Index a DICOM JSON document.

        Args:
            document: DICOM JSON model dictionary
            source_path: Original file location, for diagnostics

        Returns:
            The created InstanceRecord

        Raises:
            MissingRequiredIdentifier: If the Study or SOP Instance UID is absent
            DuplicateObject: If the SOP Instance UID is already indexed
        """
        study_uid = unique_value(document, Tags.STUDY_INSTANCE_UID)
        if not study_uid:
            raise MissingRequiredIdentifier('StudyInstanceUID', source_path)

        sop_uid = unique_value(document, Tags.SOP_INSTANCE_UID)
        if not sop_uid:
            raise MissingRequiredIdentifier('SOPInstanceUID', source_path)

        series_uid = unique_value(document, Tags.SERIES_INSTANCE_UID) or ''

        try:
            with transaction.atomic():
                record = InstanceRecord.objects.create(
                    sop_instance_uid=sop_uid,
                    study_instance_uid=study_uid,
                    series_instance_uid=series_uid,
                    document=document,
                    source_path=source_path,
                )
                elements = build_elements(document)
                for element in elements:
                    element.record = record
                DataElement.objects.bulk_create(elements)
        except IntegrityError:
            if InstanceRecord.objects.filter(sop_instance_uid=sop_uid).exists():
                raise DuplicateObject(sop_uid)
            raise

        logger.debug(f"Indexed {sop_uid} with {len(elements)} searchable values")
        return record

    def find(self, store_filter: StoreFilter) -> Iterator[Dict[str, Any]]:
        """
        Run a filter and yield matching documents.

        Documents are yielded in insertion order (created_at, then id).
        """
        queryset = (
            InstanceRecord.objects
            .filter(store_filter.as_q())
            .order_by('created_at', 'id')
            .values_list('document', flat=True)
        )
        return queryset.iterator()

    def get(self, sop_instance_uid: str) -> Optional[InstanceRecord]:
        """Get the record for a SOP Instance UID."""
        return InstanceRecord.objects.filter(sop_instance_uid=sop_instance_uid).first()

    def exists(self, sop_instance_uid: str) -> bool:
        """Check whether a SOP Instance UID is indexed."""
        return InstanceRecord.objects.filter(sop_instance_uid=sop_instance_uid).exists()

    def count(self) -> int:
        """Number of indexed objects."""
        return InstanceRecord.objects.count()
