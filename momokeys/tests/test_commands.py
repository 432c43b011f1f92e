import json
from io import StringIO

import pytest
import requests
from django.core.management import call_command
from django.core.management.base import CommandError

from .helpers import make_response


def test_generate_momo_keys_falls_back_when_gateway_is_down(mocker):
    mocker.patch("momokeys.momo.requests.Session.post", side_effect=requests.ConnectionError("down"))
    out = StringIO()

    call_command("generate_momo_keys", "--subscription-key", "sk-123", stdout=out)

    output = out.getvalue()
    envelope = json.loads(output[: output.rindex("}") + 1])
    assert envelope["success"] is True
    assert envelope["data"]["callbackHost"] == "example.com"
    assert "testCommand" not in envelope["data"]
    assert "generated locally" in output


def test_generate_momo_keys_registers_with_gateway(mocker):
    mocker.patch(
        "momokeys.momo.requests.Session.post",
        side_effect=[make_response(201), make_response(201, {"apiKey": "abc123"})],
    )
    out = StringIO()

    call_command(
        "generate_momo_keys", "--subscription-key", "sk-123", "--callback-host", "kudi.example", stdout=out
    )

    output = out.getvalue()
    assert '"apiKey": "abc123"' in output
    assert '"callbackHost": "kudi.example"' in output
    assert "successfully created and registered" in output


def test_generate_momo_keys_rejects_blank_subscription_key():
    with pytest.raises(CommandError, match="Subscription Key"):
        call_command("generate_momo_keys", "--subscription-key", "  ")


def test_check_momo_credentials_reports_success(mocker):
    mocker.patch(
        "momokeys.momo.requests.Session.post",
        return_value=make_response(200, {"access_token": "tok"}),
    )
    out = StringIO()

    call_command(
        "check_momo_credentials", "--api-user", "u", "--api-key", "k", "--subscription-key", "sk-123", stdout=out
    )

    assert "Access token obtained successfully" in out.getvalue()


def test_check_momo_credentials_fails_on_unauthorized(mocker):
    mocker.patch("momokeys.momo.requests.Session.post", return_value=make_response(401, text="denied"))

    with pytest.raises(CommandError, match="Unauthorized"):
        call_command(
            "check_momo_credentials", "--api-user", "u", "--api-key", "k", "--subscription-key", "sk-123"
        )


def test_generate_momo_keys_keeps_callback_host_as_given(mocker):
    mocker.patch("momokeys.momo.requests.Session.post", side_effect=requests.ConnectionError("down"))
    out = StringIO()

    call_command(
        "generate_momo_keys", "--subscription-key", "sk-123", "--callback-host", " kudi.example ", stdout=out
    )

    assert '"callbackHost": " kudi.example "' in out.getvalue()
