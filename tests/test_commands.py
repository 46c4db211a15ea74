from datetime import timedelta
from io import StringIO
from unittest import mock

import pytest
from django.core import mail
from django.core.management import call_command
from django.utils import timezone

from careplan.models import CarePlan

pytestmark = pytest.mark.django_db


def test_send_reminders_runs_a_single_pass(user):
    plan_id = CarePlan.objects.save_plan(user, {}, {"wash_frequency": "2-3 times/week", "tips": []})
    CarePlan.objects.filter(pk=plan_id).update(created_at=timezone.now() - timedelta(days=5))
    out = StringIO()

    call_command("send_reminders", stdout=out)

    assert "Checked 1 care plans" in out.getvalue()
    assert "Sent 1 reminders" in out.getvalue()
    assert len(mail.outbox) == 1
    assert CarePlan.objects.get(pk=plan_id).last_reminder_sent is not None


def test_send_reminders_with_nothing_due(user):
    CarePlan.objects.save_plan(user, {}, {"wash_frequency": "2-3 times/week", "tips": []})
    out = StringIO()

    call_command("send_reminders", stdout=out)

    assert "No reminders due" in out.getvalue()
    assert mail.outbox == []


def test_forever_survives_a_failed_run():
    runs = []

    def failing_pass():
        runs.append(1)
        if len(runs) == 1:
            raise RuntimeError("database went away")
        raise KeyboardInterrupt  # stop the loop

    with mock.patch("careplan.management.commands.send_reminders.run_reminder_pass", side_effect=failing_pass), \
            mock.patch("careplan.management.commands.send_reminders.Command.sleep_until"):
        with pytest.raises(KeyboardInterrupt):
            call_command("send_reminders", "--forever", stdout=StringIO())

    assert len(runs) == 2
