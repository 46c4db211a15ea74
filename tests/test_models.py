from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.db import connection
from django.test.utils import CaptureQueriesContext
from django.utils import timezone

from careplan.models import CarePlan

pytestmark = pytest.mark.django_db


def test_save_plan_returns_id_and_stores_everything(user, survey_data):
    plan_id = CarePlan.objects.save_plan(user, survey_data, {"wash_frequency": "Weekly"})

    plan = CarePlan.objects.get(pk=plan_id)
    assert plan.user == user
    assert plan.survey_data == survey_data
    assert plan.wash_frequency == "Weekly"
    assert plan.created_at is not None
    assert plan.last_reminder_sent is None


def test_find_latest_returns_newest_plan_for_user(user):
    older = CarePlan.objects.save_plan(user, {}, {"wash_frequency": "old"})
    newer = CarePlan.objects.save_plan(user, {}, {"wash_frequency": "new"})
    CarePlan.objects.filter(pk=older).update(created_at=timezone.now() - timedelta(days=3))

    assert CarePlan.objects.find_latest(user).pk == newer


def test_find_latest_without_plans_is_none(user):
    other = get_user_model().objects.create_user("bob", "b@x.com", "pw")
    CarePlan.objects.save_plan(other, {}, {})

    assert CarePlan.objects.find_latest(user) is None


def test_find_all_joins_users(user):
    CarePlan.objects.save_plan(user, {}, {})
    CarePlan.objects.save_plan(user, {}, {})

    with CaptureQueriesContext(connection) as queries:
        emails = [plan.user.email for plan in CarePlan.objects.find_all()]

    assert emails == ["a@x.com", "a@x.com"]
    assert len(queries) == 1


def test_mark_reminder_sent_only_touches_the_stamp(user):
    plan = CarePlan.objects.get(pk=CarePlan.objects.save_plan(user, {}, {"tips": ["a"]}))
    stamp = timezone.now()

    with CaptureQueriesContext(connection) as queries:
        plan.mark_reminder_sent(stamp)

    plan.refresh_from_db()
    assert plan.last_reminder_sent == stamp
    assert plan.care_plan == {"tips": ["a"]}
    assert "care_plan" not in queries[0]["sql"]


def test_passwords_are_hashed(user):
    assert user.password != "pw"
    assert user.check_password("pw")
