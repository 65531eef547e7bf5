"""Study and series query endpoints."""
from archive.controllers.base import DefaultAttributes, QueryRetrieveLevel
from .base import DicomQueryView, exact_match


class StudyQueryView(DicomQueryView):
    """
    Study-level search.

    GET /rs/studies?PatientName=DOE*&StudyDate=20200101-20201231
    """
    level = QueryRetrieveLevel.STUDY
    default_attributes = DefaultAttributes.STUDY


class StudySeriesQueryView(DicomQueryView):
    """
    Series of one study.

    GET /viewer/rs/studies/<study>/series
    GET /viewer/rs/studies/<study>/metadata
    """
    level = QueryRetrieveLevel.SERIES
    default_attributes = DefaultAttributes.SERIES

    def path_filters(self, study_uid: str, **kwargs):
        return {'StudyInstanceUID': exact_match(study_uid)}
