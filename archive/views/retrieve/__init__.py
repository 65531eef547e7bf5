"""
Retrieve Views - binary object and frame endpoints.
"""
from .frames import FrameRetrieveView
from .wado import WadoUriView

__all__ = [
    'FrameRetrieveView',
    'WadoUriView',
]
