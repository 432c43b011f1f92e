import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .exceptions import INVALID_REQUEST_FORMAT
from .serializers import CredentialBundleSerializer, CredentialRequestSerializer
from .services import generate_credentials

log = logging.getLogger(__name__)


# ============================================================
# 📨 RESPONSE ENVELOPE
# ============================================================
def send_response(success, message, data=None, status_code=status.HTTP_200_OK):
    """Standard {success, message, data} envelope shared by every endpoint."""
    return Response(
        {"success": success, "message": message, "data": data},
        status=status_code,
    )


def _validation_message(errors):
    non_field = errors.get("non_field_errors") if isinstance(errors, dict) else None
    if non_field:
        return str(non_field[0])
    return INVALID_REQUEST_FORMAT


# ============================================================
# 🔑 GENERATE MOMO API USER + API KEY
# ============================================================
@api_view(["POST"])
@permission_classes([AllowAny])
def generate_keys(request):
    """
    POST /api/generate
    {
        "primaryKey": "<Ocp-Apim-Subscription-Key>",
        "secondaryKey": "",
        "callbackHost": "example.com"
    }
    Always 201 once a subscription key is given: registered with MoMo when
    possible, generated locally otherwise (the message says which).
    """
    log.info("=== New API Key Generation Request Received ===")

    if not isinstance(request.data, dict):
        log.error("Invalid request format - body is not a JSON object")
        return send_response(False, INVALID_REQUEST_FORMAT, None, status.HTTP_400_BAD_REQUEST)

    serializer = CredentialRequestSerializer(data=request.data)
    if not serializer.is_valid():
        message = _validation_message(serializer.errors)
        log.error("Rejected request: %s", message)
        return send_response(False, message, None, status.HTTP_400_BAD_REQUEST)

    credential_request = serializer.to_credential_request()
    log.info("Using callback host: %s", credential_request.callback_host)

    message, bundle = generate_credentials(credential_request)

    log.info("Sending response: %s", message)
    response = send_response(
        True, message, CredentialBundleSerializer(bundle).data, status.HTTP_201_CREATED
    )
    log.info("=== API Key Generation Request Completed ===")
    return response
