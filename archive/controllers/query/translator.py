"""
Query Translator.

Converts (attribute, pattern) filters from a query request into a
StoreFilter and the list of attributes to return.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional

from archive.controllers.base import QueryRetrieveLevel, Tags
from archive.controllers.dictionary import AttributeDictionary
from archive.exceptions import UnresolvedAttribute
from .conditions import ElementCondition, MatchStyle, PatternCondition, StoreFilter


@dataclass
class TranslatedQuery:
    """
    Result of translating a query request.

    Attributes:
        level: Hierarchy level of the query
        store_filter: Conditions to run against the index
        projection: Tags to keep in each result, in order
    """
    level: QueryRetrieveLevel
    store_filter: StoreFilter
    projection: List[str] = field(default_factory=list)


class QueryTranslator:
    """Translates query filters to index conditions."""

    def __init__(self, dictionary: AttributeDictionary, logger: Optional[logging.Logger] = None):
        """
        Initialize the translator.

        Args:
            dictionary: AttributeDictionary used for name and VR lookups
            logger: Logger handle (defaults to 'archive.query')
        """
        self.dictionary = dictionary
        self.logger = logger or logging.getLogger('archive.query')

    def translate(
        self,
        level: QueryRetrieveLevel,
        filters: Mapping[str, str],
        required_attributes: Iterable[str] = ()
    ) -> TranslatedQuery:
        """
        Translate query filters.

        Filter keys that do not resolve to a tag are ignored. A filter with an
        empty value only adds its tag to the projection: it matches every
        record, including records that lack the attribute. It is not a
        presence test.

        Args:
            level: Query level
            filters: Attribute keyword or tag -> textual pattern
            required_attributes: Tags always included in the projection

        Returns:
            TranslatedQuery
        """
        projection = list(required_attributes)
        conditions = []

        for name, value in filters.items():
            try:
                tag = self.dictionary.require(name)
            except UnresolvedAttribute:
                self.logger.debug(f"Ignoring unknown query attribute: {name}")
                continue

            if tag not in projection:
                projection.append(tag)

            if value is None or value == '':
                continue

            conditions.append(self._build_condition(tag, str(value)))

        self.logger.debug(
            f"Translated {level.value} query: {len(conditions)} conditions, "
            f"{len(projection)} attributes"
        )

        return TranslatedQuery(
            level=level,
            store_filter=StoreFilter(tuple(conditions)),
            projection=projection,
        )

    def _build_condition(self, tag: str, value: str) -> ElementCondition:
        """Build the condition for one tag according to its VR."""
        # No aggregate field exists in the index; match the per-series Modality
        if tag == Tags.MODALITIES_IN_STUDY:
            return PatternCondition(tag=Tags.MODALITY, pattern=value)

        vr = self.dictionary.value_representation(tag)
        return MatchStyle.for_vr(vr).build(tag, value)
