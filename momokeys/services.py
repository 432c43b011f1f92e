import logging

from .momo import MomoClient
from .observers import LoggingObserver
from .provisioning import ProvisioningOrchestrator, assemble, outcome_message

log = logging.getLogger(__name__)


def generate_credentials(credential_request, client=None, observer=None):
    """
    Provision one API User / API Key pair and build the response bundle.

    Returns (message, bundle). Never fails on MoMo errors: those end in
    locally generated credentials with a message saying so.
    """
    observer = observer or LoggingObserver()
    if client is None:
        with MomoClient() as own_client:
            outcome = ProvisioningOrchestrator(own_client, observer).provision(credential_request)
    else:
        outcome = ProvisioningOrchestrator(client, observer).provision(credential_request)

    bundle = assemble(outcome, credential_request)
    if bundle.test_command:
        log.info("Generated test curl command for the user")

    return outcome_message(outcome), bundle
