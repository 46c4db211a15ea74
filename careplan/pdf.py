import logging
from pathlib import Path
from typing import Tuple
from xml.sax.saxutils import escape

from django.utils import timezone
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer

from .ai import DEFAULT_INSTRUCTION

logger = logging.getLogger(__name__)

BRAND_NAME = "HairCare Pro"
BRAND_COLOR = colors.HexColor("#1E90FF")


def _styles():
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="brand_title", fontSize=28, leading=32, alignment=TA_CENTER, textColor=BRAND_COLOR))
    styles.add(ParagraphStyle(name="recipient", fontSize=16, leading=20, alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="body", fontSize=14, leading=18))
    return styles


def care_plan_filename(user_id, now=None) -> str:
    now = now or timezone.now()
    return f"careplan_{user_id}_{int(now.timestamp() * 1000)}.pdf"


def build_care_plan_flow(care_plan: dict, username: str) -> list:
    styles = _styles()
    instructions = care_plan.get("instructions") or {}

    flow = [
        Paragraph(BRAND_NAME, styles["brand_title"]),
        Spacer(1, 4 * mm),
        Paragraph(escape(f"This prescription is made for {username}"), styles["recipient"]),
        Spacer(1, 12 * mm),
        Paragraph(escape(f"Recommended Wash Frequency: {care_plan.get('wash_frequency')}"), styles["body"]),
        Spacer(1, 5 * mm),
        Paragraph("Ingredients:", styles["body"]),
    ]
    for name in care_plan.get("ingredients") or []:
        instruction = instructions.get(name) or DEFAULT_INSTRUCTION
        flow.append(Paragraph(escape(f"- {name}: {instruction}"), styles["body"]))
    flow.append(Spacer(1, 5 * mm))

    flow.append(Paragraph("Tips:", styles["body"]))
    for tip in care_plan.get("tips") or []:
        flow.append(Paragraph(escape(f"- {tip}"), styles["body"]))

    return flow


def render_care_plan_pdf(care_plan: dict, username: str, user_id, config) -> Tuple[Path, str]:
    """
    Write the care plan PDF under config.pdf_root.

    Returns the file path on disk and the public URL path it is served from.
    OSError from the filesystem is left to the caller.
    """
    file_name = care_plan_filename(user_id)
    pdf_root = Path(config.pdf_root)
    pdf_root.mkdir(parents=True, exist_ok=True)
    file_path = pdf_root / file_name

    doc = SimpleDocTemplate(str(file_path), pagesize=LETTER,
                            leftMargin=20 * mm, rightMargin=20 * mm,
                            topMargin=20 * mm, bottomMargin=20 * mm,
                            title=f"{BRAND_NAME} care plan", author=BRAND_NAME)
    doc.build(build_care_plan_flow(care_plan, username))

    logger.info("Care plan PDF written to %s", file_path)
    return file_path, f"{config.pdf_url.rstrip('/')}/{file_name}"
