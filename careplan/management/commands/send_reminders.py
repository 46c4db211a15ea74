import logging
import time

from django.core.management.base import BaseCommand
from django.utils import timezone

from careplan.reminders import run_reminder_pass, next_run_at

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Email wash reminders to users whose care plan is due (daily at 09:00 with --forever)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--forever',
            action='store_true',
            help='Stay running and check every day at 09:00 local time',
        )

    def handle(self, *args, **options):
        if not options['forever']:
            self.report(run_reminder_pass())
            return

        self.stdout.write("Reminder scheduler started")
        while True:
            run_at = next_run_at(timezone.now())
            self.stdout.write(f"Next reminder check at {run_at:%Y-%m-%d %H:%M %Z}")
            self.sleep_until(run_at)
            try:
                self.report(run_reminder_pass())
            except Exception:
                # tomorrow's run still happens
                logger.exception("Reminder check failed")

    def sleep_until(self, run_at):
        while True:
            remaining = (run_at - timezone.now()).total_seconds()
            if remaining <= 0:
                return
            time.sleep(min(remaining, 60))

    def report(self, summary):
        self.stdout.write(f"Checked {summary.checked} care plans")
        if summary.sent:
            self.stdout.write(self.style.SUCCESS(f"Sent {len(summary.sent)} reminders"))
        else:
            self.stdout.write("No reminders due")
        if summary.failed:
            self.stdout.write(self.style.ERROR(f"{len(summary.failed)} reminders failed: {summary.failed}"))
