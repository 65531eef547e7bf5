"""Frame retrieval endpoint."""
import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from archive.exceptions import DecodeFailure, NotFound
from archive.utils.negotiation import IgnoreClientContentNegotiation
from archive.utils.renderers import ORJSONRenderer

logger = logging.getLogger('archive.views.retrieve')


class FrameRetrieveView(APIView):
    """
    Raw Pixel Data of a stored instance in a multipart/related envelope.

    GET /viewer/rs/studies/<study>/series/<series>/instances/<sop>/frames/<frame>
    """
    permission_classes = [AllowAny]
    renderer_classes = [ORJSONRenderer]
    content_negotiation_class = IgnoreClientContentNegotiation

    def get(self, request: Request, study_uid: str, series_uid: str, sop_uid: str, frame: int):
        from archive.containers import container

        try:
            body, content_type = container.frame_extractor().retrieve_frame(
                study_uid, sop_uid, frame=frame
            )
        except NotFound as e:
            logger.error(f"Frame request failed: {e}", extra={'sop_instance_uid': sop_uid})
            return Response({"error": f"Instance not found: {sop_uid}"}, status=status.HTTP_404_NOT_FOUND)
        except DecodeFailure as e:
            logger.error(f"Frame request failed: {e}", exc_info=True, extra={'sop_instance_uid': sop_uid})
            return Response(
                {"error": f"Error getting the file: {e.reason}"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return HttpResponse(body, content_type=content_type)
