from __future__ import annotations

import json

import httpx
import pytest

from studylink.services.email_templates import templates
from studylink.services.mailer import EmailMessage, Mailer


def _mailer(handler, api_key: str = "re_123") -> Mailer:
    return Mailer(
        api_key=api_key,
        api_url="https://api.resend.test/emails",
        sender="StudyLink <noreply@studylink.test>",
        transport=httpx.MockTransport(handler),
    )


def test_send_posts_message_to_resend():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["auth"] = request.headers["Authorization"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "email-1"})

    sent = _mailer(handler).send(EmailMessage(to="boss@acme.test", subject="Hello", html="<p>Hi</p>"))

    assert sent is True
    assert captured["url"] == "https://api.resend.test/emails"
    assert captured["auth"] == "Bearer re_123"
    assert captured["body"] == {
        "from": "StudyLink <noreply@studylink.test>",
        "to": ["boss@acme.test"],
        "subject": "Hello",
        "html": "<p>Hi</p>",
    }


def test_send_raises_on_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "invalid from"})

    with pytest.raises(httpx.HTTPStatusError):
        _mailer(handler).send(EmailMessage(to="boss@acme.test", subject="Hello", html="<p>Hi</p>"))


def test_send_without_api_key_is_skipped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    mailer = _mailer(handler, api_key="")
    assert not mailer.enabled
    assert mailer.send(EmailMessage(to="boss@acme.test", subject="Hello", html="<p>Hi</p>")) is False


def test_application_template_escapes_candidate_input():
    html = templates.render(
        "job_application",
        company_name="Acme",
        job_title="Data Apprentice",
        student_name="Ada Lovelace",
        student_email="ada@test.com",
        subject="Hi",
        message="<script>alert(1)</script>",
        application_url="https://studylink.test/company/applications/1",
    )
    assert "Data Apprentice" in html
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
