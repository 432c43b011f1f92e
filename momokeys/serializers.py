from django.conf import settings
from rest_framework import serializers

from .provisioning import CredentialRequest

SUBSCRIPTION_KEY_REQUIRED = "Subscription Key (Primary Key) is required"


# ✅ Incoming request
class CredentialRequestSerializer(serializers.Serializer):
    """
    Validates the generate request.
    `primaryKey` is accepted as another name for `subscriptionKey` (the web form posts it).
    """
    subscriptionKey = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    primaryKey = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    secondaryKey = serializers.CharField(allow_blank=True, allow_null=True, default="", trim_whitespace=False)
    callbackHost = serializers.CharField(allow_blank=True, allow_null=True, default="", trim_whitespace=False)

    def validate(self, attrs):
        # Keys are opaque: forwarded as sent, but whitespace alone counts as missing
        for field in ("subscriptionKey", "primaryKey"):
            value = attrs.get(field)
            if value and value.strip():
                attrs["subscription_key"] = value
                return attrs
        raise serializers.ValidationError(SUBSCRIPTION_KEY_REQUIRED)

    def to_credential_request(self) -> CredentialRequest:
        data = self.validated_data
        return CredentialRequest(
            subscription_key=data["subscription_key"],
            callback_host=data.get("callbackHost") or settings.MOMO_DEFAULT_CALLBACK_HOST,
            secondary_key=data.get("secondaryKey") or "",
        )


# 🔑 Outgoing credential bundle
class CredentialBundleSerializer(serializers.Serializer):
    apiKey = serializers.CharField(source="api_key")
    apiUser = serializers.CharField(source="api_user")
    userId = serializers.CharField(source="user_id")
    callbackHost = serializers.CharField(source="callback_host")
    dateTime = serializers.CharField(source="date_time")
    targetEnvironment = serializers.CharField(source="target_environment")
    base64Auth = serializers.CharField(source="base64_auth")
    testCommand = serializers.CharField(source="test_command", required=False)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # Absent, not empty, when there is nothing to test
        if data.get("testCommand") is None:
            data.pop("testCommand", None)
        return data
