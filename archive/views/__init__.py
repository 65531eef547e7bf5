"""
Views Module - REST API Endpoints

Organized by domain:
- health/: Health check endpoint
- query/: Hierarchical DICOM JSON search
- retrieve/: Frame and WADO-URI object retrieval
"""
from .health import PublicHealthCheckView
from .query import (
    StudyQueryView,
    StudySeriesQueryView,
    SeriesInstancesView,
    SeriesMetadataView,
)
from .retrieve import FrameRetrieveView, WadoUriView

__all__ = [
    # Health Views
    'PublicHealthCheckView',

    # Query Views
    'StudyQueryView',
    'StudySeriesQueryView',
    'SeriesInstancesView',
    'SeriesMetadataView',

    # Retrieve Views
    'FrameRetrieveView',
    'WadoUriView',
]
