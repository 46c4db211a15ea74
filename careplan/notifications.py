import logging
import threading
from pathlib import Path

from django.core.mail import EmailMessage

logger = logging.getLogger(__name__)

PLAN_SUBJECT = "Your HairCare Pro Prescription"
REMINDER_SUBJECT = "HairCare Reminder 💧"
ATTACHMENT_NAME = "HairCare_Prescription.pdf"


def send_plan_email(to_email, username, file_path):
    body = (
        f"Hi {username},\n\n"
        "Attached is your personalized hair care prescription.\n\n"
        "Take care,\nHairCare Pro"
    )
    msg = EmailMessage(PLAN_SUBJECT, body, to=[to_email])
    msg.attach(ATTACHMENT_NAME, Path(file_path).read_bytes(), "application/pdf")
    msg.send()


def reminder_body(username, care_plan):
    tips = "\n".join(f"- {tip}" for tip in care_plan.get("tips") or [])
    return (
        f"Hi {username},\n\n"
        "This is your friendly reminder to follow your hair care routine!\n\n"
        f"Recommended wash frequency: {care_plan.get('wash_frequency')}\n\n"
        f"Tips:\n{tips}\n\n"
        "Take care,\nHairCare Pro"
    )


def send_reminder_email(user, care_plan):
    msg = EmailMessage(REMINDER_SUBJECT, reminder_body(user.username, care_plan), to=[user.email])
    msg.send()


def _run_logged(func, args):
    try:
        func(*args)
    except Exception:
        logger.exception("Background notification %s failed", getattr(func, "__name__", func))


def send_in_background(func, *args):
    # the response never waits on the mail server
    thread = threading.Thread(target=_run_logged, args=(func, args))
    thread.daemon = True
    thread.start()
    return thread
