"""
Content negotiation for DICOMweb clients.

Viewers send Accept headers such as ``application/dicom+json`` or
``multipart/related; type="application/octet-stream"`` that no DRF renderer
advertises. Archive views always answer with their first renderer.
"""
from rest_framework.negotiation import BaseContentNegotiation


class IgnoreClientContentNegotiation(BaseContentNegotiation):
    def select_parser(self, request, parsers):
        return parsers[0] if parsers else None

    def select_renderer(self, request, renderers, format_suffix=None):
        return renderers[0], renderers[0].media_type
