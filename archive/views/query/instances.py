"""Instance query endpoints."""
from archive.controllers.base import DefaultAttributes, QueryRetrieveLevel
from .base import DicomQueryView, exact_match


class SeriesInstancesView(DicomQueryView):
    """
    Instances of one series.

    GET /viewer/rs/studies/<study>/series/<series>/instances
    """
    level = QueryRetrieveLevel.IMAGE
    default_attributes = DefaultAttributes.INSTANCES

    def path_filters(self, study_uid: str, series_uid: str, **kwargs):
        return {
            'StudyInstanceUID': exact_match(study_uid),
            'SeriesInstanceUID': exact_match(series_uid),
        }


class SeriesMetadataView(SeriesInstancesView):
    """
    Per-instance metadata of one series, with the image attributes a viewer needs.

    GET /viewer/rs/studies/<study>/series/<series>/metadata
    """
    default_attributes = DefaultAttributes.INSTANCE_METADATA
