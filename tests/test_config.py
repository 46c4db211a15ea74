from pathlib import Path

from django.apps import apps

from careplan.config import CarePlanConfig, get_config


def test_config_is_read_from_settings(settings):
    settings.GEMINI_API_KEY = "from-settings"
    settings.GEMINI_MODEL = "gemini-test"
    settings.GEMINI_TIMEOUT = 12.5

    config = CarePlanConfig.from_settings()

    assert config.gemini_api_key == "from-settings"
    assert config.gemini_model == "gemini-test"
    assert config.gemini_timeout == 12.5
    assert isinstance(config.pdf_root, Path)


def test_app_builds_config_at_startup(settings, tmp_path):
    settings.PDF_ROOT = str(tmp_path / "out")
    app = apps.get_app_config("careplan")

    app.ready()

    assert app.config.pdf_root == tmp_path / "out"
    assert app.config.pdf_root.is_dir()
    assert get_config() is app.config


def test_get_config_returns_the_app_config(careplan_settings):
    assert get_config() is careplan_settings
