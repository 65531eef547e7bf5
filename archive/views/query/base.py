"""
Base view for hierarchical DICOM JSON queries.
"""
import logging
import re
from typing import Dict

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from archive.controllers.base import QueryRetrieveLevel
from archive.utils.negotiation import IgnoreClientContentNegotiation
from archive.utils.renderers import ORJSONRenderer

logger = logging.getLogger('archive.views.query')


def exact_match(uid: str) -> str:
    """Pattern matching exactly ``uid``."""
    return f"^{re.escape(uid)}$"


class DicomQueryView(APIView):
    """
    Runs a query at ``level`` with the request's query parameters as filters.

    Subclasses set ``level`` and ``default_attributes`` and may add filters
    derived from URL path parameters.
    """
    permission_classes = [AllowAny]
    renderer_classes = [ORJSONRenderer]
    content_negotiation_class = IgnoreClientContentNegotiation

    level: QueryRetrieveLevel = QueryRetrieveLevel.STUDY
    default_attributes = ()

    def get_filters(self, request: Request, **kwargs) -> Dict[str, str]:
        """First value of every query parameter, plus the path filters."""
        filters = {key: values[0] for key, values in request.query_params.lists() if values}
        filters.update(self.path_filters(**kwargs))
        return filters

    def path_filters(self, **kwargs) -> Dict[str, str]:
        return {}

    def get(self, request: Request, **kwargs) -> Response:
        from archive.containers import container

        filters = self.get_filters(request, **kwargs)

        try:
            results = container.query_service().find(self.level, filters, self.default_attributes)
        except Exception as e:
            logger.error(f"{self.level.value} query failed: {e}", exc_info=True)
            return Response(
                {"error": f"Query failed: {e}"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(results)
