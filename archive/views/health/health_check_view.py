"""Public Health Check View."""
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from rest_framework import status
import logging

from archive.utils.renderers import ORJSONRenderer

logger = logging.getLogger('archive.views.health')


class PublicHealthCheckView(APIView):
    """
    Public health check endpoint - no authentication required.

    GET /api/health/
    """
    permission_classes = [AllowAny]
    renderer_classes = [ORJSONRenderer]

    def get(self, request):
        """
        Returns health status with storage root and index size.

        Example:
            curl http://localhost:8000/api/health/
        """
        from django.conf import settings
        from archive.containers import container

        response_data = {
            'status': 'healthy',
            'service': 'dicom-archive',
            'version': getattr(settings, 'ARCHIVE_VERSION', '1.0.0'),
        }

        try:
            context = container.context()
            response_data['storage'] = {
                'root': str(context.storage_root),
                'exists': context.storage_root.is_dir(),
            }
            response_data['index'] = {'objects': context.store.count()}
        except Exception as e:
            logger.error(f"Error in health check: {e}", exc_info=True)
            response_data['status'] = 'unhealthy'
            response_data['error'] = 'Index unavailable'
            return Response(response_data, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(response_data)
