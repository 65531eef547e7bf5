"""
Per-attribute match conditions.

A translated query is a StoreFilter: an AND of ElementConditions. Each
condition type compiles itself to a Django ``Q`` over the indexed
DataElement rows, matching when *any* value of the attribute satisfies it.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from django.db.models import Exists, OuterRef, Q

from archive.models import DataElement

PERSON_NAME_VRS = frozenset({'PN'})
RANGE_VRS = frozenset({'DA', 'TM', 'DT'})


@dataclass(frozen=True)
class ElementCondition:
    """Base condition on the values of one tag."""
    tag: str

    def lookups(self) -> Dict[str, str]:
        raise NotImplementedError(f"{self.__class__.__name__} must implement lookups()")

    def as_q(self) -> Q:
        """Compile to a Q matching InstanceRecords with a satisfying value."""
        elements = DataElement.objects.filter(record=OuterRef('pk'), tag=self.tag, **self.lookups())
        return Q(Exists(elements))


@dataclass(frozen=True)
class PatternCondition(ElementCondition):
    """Case-insensitive regular expression search in the raw textual value."""
    pattern: str

    def lookups(self) -> Dict[str, str]:
        return {'value__iregex': self.pattern}


@dataclass(frozen=True)
class PersonNameCondition(ElementCondition):
    """Case-insensitive regular expression search in the alphabetic name component."""
    pattern: str
    component: str = 'Alphabetic'

    def lookups(self) -> Dict[str, str]:
        return {'component': self.component, 'value__iregex': self.pattern}


@dataclass(frozen=True)
class RangeCondition(ElementCondition):
    """Inclusive lexicographic range on DA/TM/DT values."""
    lower: str
    upper: str

    def lookups(self) -> Dict[str, str]:
        return {'value__gte': self.lower, 'value__lte': self.upper}


class MatchStyle(Enum):
    """
    How values of a VR are compared.

    Every VR maps to exactly one style; each style builds its own condition.
    """
    PERSON_NAME = 'person_name'
    RANGE = 'range'
    PATTERN = 'pattern'

    @classmethod
    def for_vr(cls, vr: str) -> 'MatchStyle':
        if vr in PERSON_NAME_VRS:
            return cls.PERSON_NAME
        if vr in RANGE_VRS:
            return cls.RANGE
        return cls.PATTERN

    def build(self, tag: str, value: str) -> ElementCondition:
        """Build the condition for ``value`` on ``tag``."""
        if self is MatchStyle.PERSON_NAME:
            return PersonNameCondition(tag=tag, pattern=value.replace('*', '.*'))
        if self is MatchStyle.RANGE:
            # A value without a hyphen yields an empty upper bound
            lower, _, upper = value.partition('-')
            return RangeCondition(tag=tag, lower=lower, upper=upper)
        return PatternCondition(tag=tag, pattern=value)


@dataclass(frozen=True)
class StoreFilter:
    """Logical AND of element conditions. Empty matches every record."""
    conditions: Tuple[ElementCondition, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.conditions)

    def __len__(self) -> int:
        return len(self.conditions)

    def __iter__(self):
        return iter(self.conditions)

    def as_q(self) -> Q:
        q = Q()
        for condition in self.conditions:
            q &= condition.as_q()
        return q
