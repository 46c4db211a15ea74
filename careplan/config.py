from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from django.apps import apps
from django.conf import settings


@dataclass(frozen=True)
class CarePlanConfig:
    """Settings the care plan pipeline needs, read once when the app loads."""

    gemini_api_key: str
    gemini_model: str
    gemini_timeout: Optional[float]
    pdf_root: Path
    pdf_url: str

    @classmethod
    def from_settings(cls):
        return cls(
            gemini_api_key=settings.GEMINI_API_KEY,
            gemini_model=settings.GEMINI_MODEL,
            gemini_timeout=settings.GEMINI_TIMEOUT,
            pdf_root=Path(settings.PDF_ROOT),
            pdf_url=settings.PDF_URL,
        )


def get_config() -> CarePlanConfig:
    """The config built by CarePlanAppConfig.ready()."""
    return apps.get_app_config("careplan").config
