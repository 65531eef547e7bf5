"""
Query module.

Translates query filters into index conditions, runs them, and reduces the
results to one projected record per hierarchy entity.
"""
from .conditions import (
    ElementCondition,
    MatchStyle,
    PatternCondition,
    PersonNameCondition,
    RangeCondition,
    StoreFilter,
)
from .finalizer import ResultFinalizer, deduplicate, finalize, project
from .service import QueryService
from .translator import QueryTranslator, TranslatedQuery

__all__ = [
    # Conditions
    'ElementCondition',
    'MatchStyle',
    'PatternCondition',
    'PersonNameCondition',
    'RangeCondition',
    'StoreFilter',

    # Finalizer
    'ResultFinalizer',
    'deduplicate',
    'finalize',
    'project',

    # Translator and service
    'QueryTranslator',
    'TranslatedQuery',
    'QueryService',
]
