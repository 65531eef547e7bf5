"""
Query Views - hierarchical DICOM JSON search endpoints.
"""
from .studies import StudyQueryView, StudySeriesQueryView
from .instances import SeriesInstancesView, SeriesMetadataView

__all__ = [
    'StudyQueryView',
    'StudySeriesQueryView',
    'SeriesInstancesView',
    'SeriesMetadataView',
]
