import logging

from django.apps import AppConfig

log = logging.getLogger(__name__)


class MomokeysConfig(AppConfig):
    name = 'momokeys'

    def ready(self):
        from django.conf import settings

        log.info("=== MTN MoMo API Key Generator ready ===")
        log.info(
            "Will try to register credentials with %s, falling back to local generation (timeout %ss)",
            settings.MOMO_BASE_URL,
            settings.MOMO_REQUEST_TIMEOUT,
        )
