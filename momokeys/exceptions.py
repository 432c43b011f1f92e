import logging

from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.views import exception_handler

log = logging.getLogger(__name__)

INVALID_REQUEST_FORMAT = "Invalid request format"


def envelope_exception_handler(exc, context):
    """
    DRF exception handler: same {success, message, data} envelope as the views.
    Anything DRF doesn't handle itself is left to propagate.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, (ParseError, UnsupportedMediaType)):
        message = INVALID_REQUEST_FORMAT
    else:
        detail = getattr(exc, "detail", None)
        message = str(detail) if isinstance(detail, str) else INVALID_REQUEST_FORMAT

    log.warning("Request rejected (%d): %s", response.status_code, exc)
    response.data = {"success": False, "message": message, "data": None}
    return response
