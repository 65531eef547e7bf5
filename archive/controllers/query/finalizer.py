"""
Result Deduplicator & Projector.
"""
from typing import Any, Dict, Iterable, List, Optional

from archive.controllers.base import QueryRetrieveLevel


def unique_value(record: Dict[str, Any], tag: str) -> Optional[str]:
    """Return the first value of ``tag`` in a DICOM JSON record, or None."""
    element = record.get(tag)
    if not isinstance(element, dict):
        return None
    values = element.get('Value')
    if not values:
        return None
    return values[0]


def deduplicate(level: QueryRetrieveLevel, raw_records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Keep one record per unique key of ``level``.

    Records without the key are dropped. The first record for each key wins,
    in input order.
    """
    key = level.unique_key
    seen = set()
    unique = []

    for record in raw_records:
        value = unique_value(record, key)
        if value is None or value in seen:
            continue
        seen.add(value)
        unique.append(record)

    return unique


def project(records: Iterable[Dict[str, Any]], projection: Iterable[str]) -> List[Dict[str, Any]]:
    """Restrict each record to the tags in ``projection``, keeping record order."""
    keep = set(projection)
    return [
        {tag: element for tag, element in record.items() if tag in keep}
        for record in records
    ]


def finalize(
    level: QueryRetrieveLevel,
    raw_records: Iterable[Dict[str, Any]],
    projection: Iterable[str]
) -> List[Dict[str, Any]]:
    """
    Deduplicate records for a hierarchy level and project their attributes.

    Args:
        level: Query level deciding the unique key
        raw_records: DICOM JSON documents in store order
        projection: Tags to keep

    Returns:
        List of projected DICOM JSON documents
    """
    return project(deduplicate(level, raw_records), projection)


class ResultFinalizer:
    """Wraps finalize() so it can be provided by the DI container."""

    def finalize(
        self,
        level: QueryRetrieveLevel,
        raw_records: Iterable[Dict[str, Any]],
        projection: Iterable[str]
    ) -> List[Dict[str, Any]]:
        return finalize(level, raw_records, projection)
