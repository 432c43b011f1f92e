import logging

from rest_framework.renderers import JSONRenderer

log = logging.getLogger(__name__)


class EnvelopeJSONRenderer(JSONRenderer):
    """JSON renderer that logs encoding failures instead of raising them."""

    def render(self, data, accepted_media_type=None, renderer_context=None):
        try:
            return super().render(data, accepted_media_type, renderer_context)
        except (TypeError, ValueError):
            # Status is already decided; only the body is lost
            log.exception("Error encoding response")
            return b""
