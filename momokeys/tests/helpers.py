from unittest.mock import Mock

from momokeys.momo import RemoteFailure
from momokeys.observers import ProvisioningObserver


def make_response(status_code, json_data=None, text=""):
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    if json_data is None:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        resp.json.return_value = json_data
    return resp


class FakeMomoClient:
    """Stands in for MomoClient; records calls and fails on request."""

    def __init__(self, api_user="11111111-1111-1111-1111-111111111111", api_key="abc123",
                 fail_user=False, fail_key=False):
        self.api_user = api_user
        self.api_key = api_key
        self.fail_user = fail_user
        self.fail_key = fail_key
        self.calls = []

    def create_api_user(self, subscription_key, callback_host):
        self.calls.append(("create_api_user", subscription_key, callback_host))
        if self.fail_user:
            raise RemoteFailure("failed to create API user, status: 401", status_code=401, body="denied")
        return self.api_user

    def create_api_key(self, subscription_key, api_user):
        self.calls.append(("create_api_key", subscription_key, api_user))
        if self.fail_key:
            raise RemoteFailure("failed to create API key, status: 500", status_code=500, body="boom")
        return self.api_key


class RecordingObserver(ProvisioningObserver):
    def __init__(self):
        self.events = []

    def remote_attempt_started(self, callback_host):
        self.events.append(("remote_attempt_started", callback_host))

    def api_user_registered(self, api_user):
        self.events.append(("api_user_registered", api_user))

    def api_key_registered(self, api_user):
        self.events.append(("api_key_registered", api_user))

    def remote_failed(self, step, error):
        self.events.append(("remote_failed", step))

    def local_generation_completed(self, api_user):
        self.events.append(("local_generation_completed", api_user))


