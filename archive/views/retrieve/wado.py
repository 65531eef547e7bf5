"""WADO-URI object retrieval endpoint."""
import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from archive.exceptions import NotFound
from archive.serializers import WadoUriQuerySerializer
from archive.utils.negotiation import IgnoreClientContentNegotiation
from archive.utils.renderers import ORJSONRenderer

logger = logging.getLogger('archive.views.retrieve')


class WadoUriView(APIView):
    """
    Stored DICOM object as ``application/dicom``.

    GET /viewer/wadouri/?studyUID=...&seriesUID=...&objectUID=...
    """
    permission_classes = [AllowAny]
    renderer_classes = [ORJSONRenderer]
    content_negotiation_class = IgnoreClientContentNegotiation

    def get(self, request: Request):
        from archive.containers import container

        params = WadoUriQuerySerializer(data=request.query_params)
        if not params.is_valid():
            logger.error(f"WADO-URI request with missing parameters: {sorted(params.errors)}")
            return Response(
                {"error": "Error missing parameters.", "fields": params.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        study_uid = params.validated_data['studyUID']
        object_uid = params.validated_data['objectUID']

        try:
            data = container.file_manager().read_object(study_uid, object_uid)
        except NotFound as e:
            logger.error(f"Error getting the file: {e}")
            return Response({"error": f"Object not found: {object_uid}"}, status=status.HTTP_404_NOT_FOUND)

        return HttpResponse(data, content_type='application/dicom')
