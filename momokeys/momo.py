# ------------------------------------------------------------
# 💳 MTN MoMo API client (Sandbox provisioning)
# ------------------------------------------------------------
import base64
import logging
import uuid

import requests
import urllib3
from django.conf import settings

log = logging.getLogger(__name__)

TARGET_ENV = "sandbox"
SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"
REFERENCE_ID_HEADER = "X-Reference-Id"


class RemoteFailure(Exception):
    """The MoMo gateway did not do what we asked (transport, status or body)."""

    def __init__(self, message, status_code=None, body=""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def encode_basic_auth(api_user: str, api_key: str) -> str:
    """Base64 of "api_user:api_key", exactly what an Authorization: Basic header carries."""
    return base64.b64encode(f"{api_user}:{api_key}".encode("utf-8")).decode("ascii")


class MomoClient:
    """
    Talks to the MoMo sandbox user-provisioning endpoints.

    Every call is a single attempt bounded by `timeout` seconds; anything
    other than the expected status is raised as RemoteFailure.
    """

    def __init__(self, base_url=None, timeout=None, verify=None, session=None):
        self.base_url = (base_url or settings.MOMO_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.MOMO_REQUEST_TIMEOUT
        self.verify = verify if verify is not None else settings.MOMO_VERIFY_SSL
        # A session passed in belongs to the caller and is left open
        self._owns_session = session is None
        self.session = session or requests.Session()

        if not self.verify:
            # Sandbox only: keep the console readable
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _post(self, url, headers, payload=None):
        try:
            return self.session.post(
                url, headers=headers, json=payload, timeout=self.timeout, verify=self.verify
            )
        except requests.Timeout as e:
            log.error("Request to %s timed out after %ss: %s", url, self.timeout, e)
            raise RemoteFailure(f"timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            log.error("HTTP request to %s failed: %s", url, e)
            raise RemoteFailure(str(e)) from e

    # ------------------------------------------------------------
    # 👤 Step 1: Create API User
    # ------------------------------------------------------------
    def create_api_user(self, subscription_key: str, callback_host: str) -> str:
        api_user = str(uuid.uuid4())
        log.info("Generated new API User UUID: %s", api_user)

        url = f"{self.base_url}/v1_0/apiuser"
        headers = {
            "Content-Type": "application/json",
            SUBSCRIPTION_KEY_HEADER: subscription_key,
            REFERENCE_ID_HEADER: api_user,
        }
        log.info("Sending API User creation request to %s (callback host: %s)", url, callback_host)

        resp = self._post(url, headers, {"providerCallbackHost": callback_host})
        log.info("Received response with status code: %d", resp.status_code)

        if resp.status_code != 201:
            log.error("API returned non-success status: %d, body: %s", resp.status_code, resp.text)
            raise RemoteFailure(
                f"failed to create API user, status: {resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
            )

        log.info("API User created successfully with ID: %s", api_user)
        return api_user

    # ------------------------------------------------------------
    # 🔑 Step 2: Create API Key for that user
    # ------------------------------------------------------------
    def create_api_key(self, subscription_key: str, api_user: str) -> str:
        url = f"{self.base_url}/v1_0/apiuser/{api_user}/apikey"
        headers = {
            "Content-Type": "application/json",
            SUBSCRIPTION_KEY_HEADER: subscription_key,
        }
        log.info("Sending API Key creation request for user %s", api_user)

        resp = self._post(url, headers)
        log.info("Received API Key response with status code: %d", resp.status_code)

        if resp.status_code != 201:
            log.error("API Key creation failed with status: %d, body: %s", resp.status_code, resp.text)
            raise RemoteFailure(
                f"failed to create API key, status: {resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            api_key = resp.json().get("apiKey")
        except (ValueError, AttributeError) as e:
            log.error("Failed to parse API Key response: %s", e)
            raise RemoteFailure("malformed API key response", status_code=201, body=resp.text) from e

        if not api_key or not isinstance(api_key, str):
            log.error("API Key response has no apiKey field")
            raise RemoteFailure("missing apiKey in response", status_code=201, body=resp.text)

        # The key itself is never logged
        log.info("Successfully retrieved API Key from MTN MoMo API")
        return api_key

    # ------------------------------------------------------------
    # 🧾 Access token (checks a provisioned pair)
    # ------------------------------------------------------------
    def get_access_token(self, api_user: str, api_key: str, subscription_key: str) -> str:
        url = f"{self.base_url}/collection/token/"
        headers = {
            "Authorization": f"Basic {encode_basic_auth(api_user, api_key)}",
            SUBSCRIPTION_KEY_HEADER: subscription_key,
            "X-Target-Environment": TARGET_ENV,
            "Content-Type": "application/json",
        }
        log.info("Requesting MoMo access token for user %s", api_user)

        resp = self._post(url, headers)
        if resp.status_code != 200:
            log.warning("Failed to obtain access token: %d %s", resp.status_code, resp.text)
            raise RemoteFailure(
                f"failed to obtain access token, status: {resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            token = resp.json().get("access_token")
        except (ValueError, AttributeError) as e:
            raise RemoteFailure("malformed token response", status_code=200, body=resp.text) from e
        if not token:
            raise RemoteFailure("missing access_token in response", status_code=200, body=resp.text)
        return token
