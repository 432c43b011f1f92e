import json

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from momokeys.provisioning import CredentialRequest
from momokeys.serializers import CredentialBundleSerializer
from momokeys.services import generate_credentials


class Command(BaseCommand):
    help = "Creates a MoMo sandbox API User + API Key (falls back to local generation)."

    def add_arguments(self, parser):
        parser.add_argument("--subscription-key", required=True, help="Ocp-Apim-Subscription-Key (primary key)")
        parser.add_argument("--callback-host", default="", help="Provider callback host")
        parser.add_argument("--secondary-key", default="")

    def handle(self, *args, **options):
        subscription_key = options["subscription_key"]
        if not subscription_key.strip():
            raise CommandError("Subscription Key (Primary Key) is required")

        credential_request = CredentialRequest(
            subscription_key=subscription_key,
            callback_host=options["callback_host"] or settings.MOMO_DEFAULT_CALLBACK_HOST,
            secondary_key=options["secondary_key"],
        )
        message, bundle = generate_credentials(credential_request)

        envelope = {
            "success": True,
            "message": message,
            "data": CredentialBundleSerializer(bundle).data,
        }
        self.stdout.write(json.dumps(envelope, indent=2))

        if bundle.test_command:
            self.stdout.write(self.style.SUCCESS(f"✅ {message}"))
        else:
            self.stdout.write(self.style.WARNING(f"⚠️ {message}"))
