import logging
import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, date
from typing import Optional, Tuple, List

from django.utils import timezone

from .models import CarePlan
from .notifications import send_reminder_email

logger = logging.getLogger(__name__)

REMINDER_HOUR = 9  # daily run, local time

# "2 times/week", "2-3 times/week", "1-2/week"
WASH_FREQUENCY = re.compile(r"(\d)-?(\d)?\s*(?:times)?/?week", re.IGNORECASE)


def parse_wash_frequency(text: str) -> Optional[Tuple[int, int]]:
    match = WASH_FREQUENCY.search(text or "")
    if not match:
        return None
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    return low, high


def reminder_interval_days(text: str) -> Optional[int]:
    """Days between reminders for a wash frequency, or None when it can't be scheduled."""
    parsed = parse_wash_frequency(text)
    if parsed is None:
        return None
    average = (parsed[0] + parsed[1]) / 2
    if average <= 0:
        return None
    return math.floor(7 / average + 0.5)


def elapsed_days(since: datetime, now: datetime) -> int:
    return math.floor((now - since).total_seconds() / 86400)


def is_due(plan: CarePlan, now: datetime) -> bool:
    interval = reminder_interval_days(plan.wash_frequency)
    if interval is None:
        return False
    last_sent = plan.last_reminder_sent or plan.created_at
    return elapsed_days(last_sent, now) >= interval


@dataclass
class ReminderSummary:
    checked: int = 0
    sent: List[int] = field(default_factory=list)
    failed: List[int] = field(default_factory=list)
    skipped: int = 0


def run_reminder_pass(now=None, send=send_reminder_email) -> ReminderSummary:
    """
    One scan over every stored plan, sending reminders that are due.

    Each plan is stamped right after its email goes out. A crash between the
    two means the reminder goes out again on the next run.
    """
    now = now or timezone.now()
    summary = ReminderSummary()
    logger.info("Running daily reminder check")

    for plan in CarePlan.objects.find_all():
        summary.checked += 1
        user = plan.user
        if user is None or not user.email:
            summary.skipped += 1
            continue

        if not is_due(plan, now):
            summary.skipped += 1
            continue

        logger.info("Sending reminder to %s", user.email)
        try:
            send(user, plan.care_plan)
        except Exception:
            logger.exception("Reminder to %s for plan %s failed", user.email, plan.pk)
            summary.failed.append(plan.pk)
            continue

        plan.mark_reminder_sent(now)
        summary.sent.append(plan.pk)

    logger.info("Reminder check done: %s checked, %s sent, %s failed",
                summary.checked, len(summary.sent), len(summary.failed))
    return summary


def next_run_at(now: datetime, hour: int = REMINDER_HOUR) -> datetime:
    local_now = timezone.localtime(now)
    run = local_now.replace(hour=hour, minute=0, second=0, microsecond=0)
    if run <= local_now:
        run += timedelta(days=1)
    return run


# dashboard heuristic: days after plan creation to nudge the user
DASHBOARD_DAYS = [
    (re.compile(r"1-2", re.IGNORECASE), 3),
    (re.compile(r"2-3", re.IGNORECASE), 2),
    (re.compile(r"daily|every day", re.IGNORECASE), 1),
]
DASHBOARD_FALLBACK_DAYS = 4


def dashboard_alert(plan: CarePlan, username: str, today: date) -> Optional[str]:
    frequency = plan.wash_frequency
    days = DASHBOARD_FALLBACK_DAYS
    for pattern, pattern_days in DASHBOARD_DAYS:
        if pattern.search(frequency):
            days = pattern_days
            break

    next_reminder = timezone.localtime(plan.created_at).date() + timedelta(days=days)
    if today == next_reminder:
        return f"Hey {username}, it's time to follow your hair care routine!"
    return None
