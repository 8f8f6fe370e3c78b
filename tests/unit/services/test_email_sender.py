from __future__ import annotations

from dataclasses import replace

import pytest
import requests

from lawnboss.core.config import get_config
from lawnboss.core.exceptions import ConfigurationError, UpstreamServiceError
from lawnboss.services.email_sender import OutboundEmail, SendGridEmailSender


class _StubResponse:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class _StubSession:
    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def _config(**overrides):
    values = {
        "SENDGRID_API_KEY": "SG.test-key",
        "SENDGRID_FROM_EMAIL": "billing@lawnboss.test",
        "SENDGRID_FROM_NAME": "LawnBoss Billing",
        "SENDGRID_API_URL": "https://api.sendgrid.test/v3/mail/send",
        "SENDGRID_TIMEOUT_SECONDS": 5,
    }
    values.update(overrides)
    return replace(get_config(), **values)


def _email():
    return OutboundEmail(
        to_email="dana@example.com",
        to_name="Dana Field",
        subject="Invoice #INV-1 from LawnBoss",
        text_body="Total Amount: $108.00",
        html_body="<p>Total Amount: $108.00</p>",
    )


def test_accepted_send_posts_sendgrid_payload():
    session = _StubSession(_StubResponse(202))
    SendGridEmailSender(config=_config(), session=session).send(_email())

    [(url, kwargs)] = session.calls
    assert url == "https://api.sendgrid.test/v3/mail/send"
    assert kwargs["headers"]["Authorization"] == "Bearer SG.test-key"
    assert kwargs["timeout"] == 5
    payload = kwargs["json"]
    assert payload["personalizations"] == [
        {"to": [{"email": "dana@example.com", "name": "Dana Field"}], "subject": "Invoice #INV-1 from LawnBoss"}
    ]
    assert payload["from"] == {"email": "billing@lawnboss.test", "name": "LawnBoss Billing"}
    assert [part["type"] for part in payload["content"]] == ["text/plain", "text/html"]
    assert payload["content"][1]["value"] == "<p>Total Amount: $108.00</p>"


def test_rejected_send_raises_with_provider_body():
    session = _StubSession(_StubResponse(403, '{"errors":[{"message":"forbidden"}]}'))

    with pytest.raises(UpstreamServiceError) as excinfo:
        SendGridEmailSender(config=_config(), session=session).send(_email())

    assert str(excinfo.value) == 'Failed to send email: {"errors":[{"message":"forbidden"}]}'
    assert excinfo.value.status_code == 403
    assert excinfo.value.body == '{"errors":[{"message":"forbidden"}]}'
    assert len(session.calls) == 1


def test_transport_error_becomes_upstream_error():
    session = _StubSession(error=requests.exceptions.ConnectTimeout("timed out"))

    with pytest.raises(UpstreamServiceError, match="Failed to send email: timed out"):
        SendGridEmailSender(config=_config(), session=session).send(_email())


def test_unconfigured_sender_never_calls_provider():
    session = _StubSession(_StubResponse(202))
    sender = SendGridEmailSender(config=_config(SENDGRID_API_KEY=None), session=session)

    with pytest.raises(ConfigurationError, match="API key"):
        sender.send(_email())
    assert session.calls == []
