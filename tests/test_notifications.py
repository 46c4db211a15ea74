import logging
from unittest import mock

from django.core import mail

from careplan.notifications import (
    ATTACHMENT_NAME,
    REMINDER_SUBJECT,
    send_in_background,
    send_plan_email,
    send_reminder_email,
)


def test_plan_email_attaches_the_pdf(tmp_path):
    pdf = tmp_path / "careplan_1_1700000000000.pdf"
    pdf.write_bytes(b"%PDF-1.4 fake")

    send_plan_email("a@x.com", "alice", pdf)

    assert len(mail.outbox) == 1
    msg = mail.outbox[0]
    assert msg.to == ["a@x.com"]
    assert msg.subject == "Your HairCare Pro Prescription"
    assert "Hi alice" in msg.body
    assert msg.attachments == [(ATTACHMENT_NAME, b"%PDF-1.4 fake", "application/pdf")]


def test_reminder_email_lists_frequency_and_tips():
    user = mock.Mock(username="alice", email="a@x.com")
    plan = {"wash_frequency": "2-3 times/week", "tips": ["Drink water", "Use a silk scarf"]}

    send_reminder_email(user, plan)

    msg = mail.outbox[0]
    assert msg.subject == REMINDER_SUBJECT
    assert msg.to == ["a@x.com"]
    assert "Recommended wash frequency: 2-3 times/week" in msg.body
    assert "- Drink water\n- Use a silk scarf" in msg.body


def test_background_failures_are_logged_not_raised(caplog):
    def explode(*args):
        raise ConnectionRefusedError("smtp down")

    with caplog.at_level(logging.ERROR, logger="careplan.notifications"):
        thread = send_in_background(explode, "a@x.com")
        thread.join(timeout=5)

    assert "Background notification explode failed" in caplog.text
    assert "smtp down" in caplog.text


def test_background_runs_the_notification():
    done = mock.Mock()

    send_in_background(done, "a@x.com", "alice").join(timeout=5)

    done.assert_called_once_with("a@x.com", "alice")
