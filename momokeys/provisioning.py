# ------------------------------------------------------------
# 🔐 Credential provisioning: MoMo first, local fallback second
# ------------------------------------------------------------
from dataclasses import dataclass
from typing import Optional, Union

from django.conf import settings
from django.utils import timezone

from . import fallback
from .momo import TARGET_ENV, MomoClient, RemoteFailure, encode_basic_auth
from .observers import ProvisioningObserver

REGISTERED_MESSAGE = "API User and API Key successfully created and registered with MTN MoMo"
LOCALLY_GENERATED_MESSAGE = "API User and API Key generated locally (not registered with MTN MoMo)"

TEST_COMMAND_TEMPLATE = (
    "\nTest your credentials with this curl command:\n\n"
    "curl --location --request POST '{token_url}' \\\n"
    "--header 'Authorization: Basic {base64_auth}' \\\n"
    "--header 'Ocp-Apim-Subscription-Key: {subscription_key}' \\\n"
    "--header 'Content-Type: application/json'\n"
)


# ============================================================
# 🧾 VALUE OBJECTS
# ============================================================
@dataclass(frozen=True)
class CredentialRequest:
    subscription_key: str
    callback_host: str
    secondary_key: str = ""  # accepted, not used for provisioning


@dataclass(frozen=True)
class Registered:
    """Both values came back from MoMo."""
    identifier: str
    key: str


@dataclass(frozen=True)
class LocallyGenerated:
    """Both values were made here; MoMo knows nothing about them."""
    identifier: str
    key: str


ProvisioningOutcome = Union[Registered, LocallyGenerated]


@dataclass(frozen=True)
class CredentialBundle:
    api_key: str
    api_user: str
    user_id: str
    callback_host: str
    date_time: str
    target_environment: str
    base64_auth: str
    test_command: Optional[str] = None


# ============================================================
# 🔁 ORCHESTRATOR
# ============================================================
class ProvisioningOrchestrator:
    """
    Start -> create_api_user -> create_api_key -> Registered
    Any RemoteFailure on the way -> LocallyGenerated (both values regenerated)

    One attempt per step, no retries.
    """

    def __init__(self, client=None, observer=None):
        self.client = client or MomoClient()
        self.observer = observer or ProvisioningObserver()

    def provision(self, credential_request: CredentialRequest) -> ProvisioningOutcome:
        outcome = self._register_remotely(credential_request)
        if outcome is not None:
            return outcome
        return self._generate_locally()

    def _register_remotely(self, credential_request):
        self.observer.remote_attempt_started(credential_request.callback_host)

        try:
            api_user = self.client.create_api_user(
                credential_request.subscription_key, credential_request.callback_host
            )
        except RemoteFailure as e:
            self.observer.remote_failed("create API User", e)
            return None
        self.observer.api_user_registered(api_user)

        try:
            api_key = self.client.create_api_key(credential_request.subscription_key, api_user)
        except RemoteFailure as e:
            # The remote user is abandoned; the fallback makes a fresh pair
            self.observer.remote_failed("create API Key", e)
            return None
        self.observer.api_key_registered(api_user)

        return Registered(identifier=api_user, key=api_key)

    def _generate_locally(self):
        outcome = LocallyGenerated(
            identifier=fallback.generate_api_user(),
            key=fallback.generate_api_key(),
        )
        self.observer.local_generation_completed(outcome.identifier)
        return outcome


# ============================================================
# 📦 ASSEMBLER
# ============================================================
def build_test_command(base64_auth: str, subscription_key: str) -> str:
    token_url = f"{settings.MOMO_BASE_URL.rstrip('/')}/collection/token/"
    return TEST_COMMAND_TEMPLATE.format(
        token_url=token_url,
        base64_auth=base64_auth,
        subscription_key=subscription_key,
    )


def assemble(outcome: ProvisioningOutcome, credential_request: CredentialRequest) -> CredentialBundle:
    base64_auth = encode_basic_auth(outcome.identifier, outcome.key)

    # Local credentials would fail against the real gateway, so no test command for them
    test_command = None
    if isinstance(outcome, Registered):
        test_command = build_test_command(base64_auth, credential_request.subscription_key)

    return CredentialBundle(
        api_key=outcome.key,
        api_user=outcome.identifier,
        user_id=outcome.identifier,
        callback_host=credential_request.callback_host,
        date_time=timezone.localtime().isoformat(timespec="seconds"),
        target_environment=TARGET_ENV,
        base64_auth=base64_auth,
        test_command=test_command,
    )


def outcome_message(outcome: ProvisioningOutcome) -> str:
    if isinstance(outcome, Registered):
        return REGISTERED_MESSAGE
    return LOCALLY_GENERATED_MESSAGE
