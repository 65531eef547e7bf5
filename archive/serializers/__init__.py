"""
DRF Serializers for API requests.
"""
from .retrieve_serializers import WadoUriQuerySerializer

__all__ = [
    'WadoUriQuerySerializer',
]
