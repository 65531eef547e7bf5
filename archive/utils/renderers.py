"""
Custom DRF Renderers using orjson for better performance.
"""
from rest_framework.renderers import JSONRenderer
import orjson


class ORJSONRenderer(JSONRenderer):
    """
    Renderer that uses orjson for fast JSON serialization.

    DICOM JSON documents are plain dicts and lists; non-native values
    (e.g. pydicom MultiValue, Path) fall back to ``str``.
    """
    media_type = 'application/json'
    format = 'json'
    charset = None

    def render(self, data, accepted_media_type=None, renderer_context=None):
        """
        Render `data` into JSON using orjson.
        """
        if data is None:
            return b''

        return orjson.dumps(data, default=str, option=orjson.OPT_NON_STR_KEYS)
