import json
import logging

from momokeys.renderers import EnvelopeJSONRenderer


def test_renders_envelope_as_json():
    body = EnvelopeJSONRenderer().render({"success": True, "message": "ok", "data": None})

    assert json.loads(body) == {"success": True, "message": "ok", "data": None}


def test_encoding_failure_is_logged_not_raised(caplog):
    with caplog.at_level(logging.ERROR, logger="momokeys.renderers"):
        body = EnvelopeJSONRenderer().render({"data": object()})

    assert body == b""
    assert "Error encoding response" in caplog.text
