"""
Archive app URL configuration
"""
from django.urls import path
from archive.views import (
    StudyQueryView,
    StudySeriesQueryView,
    SeriesInstancesView,
    SeriesMetadataView,
    FrameRetrieveView,
    WadoUriView,
    PublicHealthCheckView,
)

app_name = 'archive'

SERIES_PREFIX = 'viewer/rs/studies/<str:study_uid>/series/<str:series_uid>'

urlpatterns = [
    # Query endpoints
    path('rs/studies', StudyQueryView.as_view(), name='studies'),
    path('viewer/rs/studies/<str:study_uid>/metadata', StudySeriesQueryView.as_view(), name='study_metadata'),
    path('viewer/rs/studies/<str:study_uid>/series', StudySeriesQueryView.as_view(), name='study_series'),
    path(f'{SERIES_PREFIX}/instances', SeriesInstancesView.as_view(), name='series_instances'),
    path(f'{SERIES_PREFIX}/metadata', SeriesMetadataView.as_view(), name='series_metadata'),

    # Retrieve endpoints
    path(
        f'{SERIES_PREFIX}/instances/<str:sop_uid>/frames/<int:frame>',
        FrameRetrieveView.as_view(),
        name='frame'
    ),
    path('viewer/wadouri/', WadoUriView.as_view(), name='wadouri'),

    # Health check endpoint
    path('api/health/', PublicHealthCheckView.as_view(), name='health_check'),
]
