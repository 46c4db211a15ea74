from django.apps import AppConfig


class CarePlanAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'careplan'

    config = None

    def ready(self):
        from .config import CarePlanConfig

        config = CarePlanConfig.from_settings()
        config.pdf_root.mkdir(parents=True, exist_ok=True)
        self.config = config
