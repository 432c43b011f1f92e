import requests

from momokeys.provisioning import CredentialRequest
from momokeys.services import generate_credentials

from .helpers import FakeMomoClient


def test_closes_the_client_it_creates(mocker):
    session_cls = mocker.patch("momokeys.momo.requests.Session")
    session_cls.return_value.post.side_effect = requests.ConnectionError("down")

    message, bundle = generate_credentials(CredentialRequest("sk-123", "example.com"))

    assert "locally" in message
    assert bundle.test_command is None
    session_cls.return_value.close.assert_called_once()


def test_uses_the_client_it_is_given():
    client = FakeMomoClient()

    message, bundle = generate_credentials(CredentialRequest("sk-123", "example.com"), client=client)

    assert "registered" in message
    assert bundle.api_key == "abc123"
    assert len(client.calls) == 2
