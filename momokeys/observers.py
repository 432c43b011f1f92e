# ------------------------------------------------------------
# 👀 Provisioning progress observers
# ------------------------------------------------------------
import logging

log = logging.getLogger("momokeys.provisioning")


class ProvisioningObserver:
    """Receives progress events from the provisioning workflow. Silent by default."""

    def remote_attempt_started(self, callback_host):
        pass

    def api_user_registered(self, api_user):
        pass

    def api_key_registered(self, api_user):
        pass

    def remote_failed(self, step, error):
        pass

    def local_generation_completed(self, api_user):
        pass


class LoggingObserver(ProvisioningObserver):
    """Writes workflow progress to the `momokeys.provisioning` logger."""

    def __init__(self, logger=None):
        self.log = logger or log

    def remote_attempt_started(self, callback_host):
        self.log.info("=== ATTEMPTING REAL MTN MOMO API INTEGRATION (callback host: %s) ===", callback_host)

    def api_user_registered(self, api_user):
        self.log.info("STEP 1/2: API User created and registered with MTN MoMo: %s", api_user)

    def api_key_registered(self, api_user):
        self.log.info("STEP 2/2: API Key created and registered with MTN MoMo for user %s", api_user)
        self.log.info("=== MTN MOMO API INTEGRATION SUCCESSFUL ===")

    def remote_failed(self, step, error):
        status_code = getattr(error, "status_code", None)
        self.log.error("Failed to %s via MTN MoMo API (status: %s): %s", step, status_code, error)
        self.log.info("FALLBACK: Will use local generation instead")

    def local_generation_completed(self, api_user):
        self.log.info("=== LOCAL GENERATION COMPLETE for user %s ===", api_user)
        self.log.warning(
            "These credentials are NOT registered with MTN MoMo and cannot be used for API calls"
        )
