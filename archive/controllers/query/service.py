"""
Query Service.

Runs a query end to end: translate filters, look them up in the index,
deduplicate and project the results.
"""
from typing import Any, Dict, Iterable, List, Mapping, Union

from archive.context import ArchiveContext
from archive.controllers.base import QueryLevelValidator, QueryRetrieveLevel
from .finalizer import ResultFinalizer
from .translator import QueryTranslator


class QueryService:
    """Hierarchical query over the index store."""

    def __init__(self, context: ArchiveContext, translator: QueryTranslator, finalizer: ResultFinalizer):
        self.context = context
        self.translator = translator
        self.finalizer = finalizer
        self.logger = context.get_logger('query')

    def find(
        self,
        level: Union[QueryRetrieveLevel, str],
        filters: Mapping[str, str],
        required_attributes: Iterable[str] = ()
    ) -> List[Dict[str, Any]]:
        """
        Find records matching ``filters`` at ``level``.

        Args:
            level: Query level deciding the deduplication key ('STUDY', 'SERIES' or 'IMAGE')
            filters: Attribute keyword or tag -> pattern
            required_attributes: Tags always returned

        Returns:
            Deduplicated, projected DICOM JSON documents

        Raises:
            ValueError: If the level is not a valid query level
        """
        level = QueryLevelValidator.coerce(level)

        query = self.translator.translate(level, filters, required_attributes)
        raw_records = self.context.store.find(query.store_filter)
        results = self.finalizer.finalize(level, raw_records, query.projection)

        self.logger.info(f"{level.value} query returned {len(results)} results")
        return results
