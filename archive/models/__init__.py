# Models package
from .instance import InstanceRecord, DataElement

__all__ = [
    'InstanceRecord',
    'DataElement',
]
