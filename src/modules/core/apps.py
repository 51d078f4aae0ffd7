from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        from corsheaders.signals import check_request_enabled

        from modules.core.cors import allow_frontend_origin

        check_request_enabled.connect(
            allow_frontend_origin, dispatch_uid="core.allow_frontend_origin"
        )
