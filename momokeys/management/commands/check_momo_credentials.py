from django.core.management.base import BaseCommand, CommandError

from momokeys.momo import MomoClient, RemoteFailure


class Command(BaseCommand):
    help = "Requests a collection access token to check an API User / API Key pair."

    def add_arguments(self, parser):
        parser.add_argument("--api-user", required=True)
        parser.add_argument("--api-key", required=True)
        parser.add_argument("--subscription-key", required=True)

    def handle(self, *args, **options):
        self.stdout.write("🔐 Requesting access token from MTN MoMo Sandbox...")
        try:
            with MomoClient() as client:
                client.get_access_token(options["api_user"], options["api_key"], options["subscription_key"])
        except RemoteFailure as e:
            if e.status_code == 401:
                raise CommandError("🚫 Unauthorized: API key or user ID mismatch.") from e
            raise CommandError(f"❌ Could not obtain access token: {e}") from e

        # The token itself is not printed
        self.stdout.write(self.style.SUCCESS("✅ Access token obtained successfully!"))
