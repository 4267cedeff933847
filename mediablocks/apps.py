from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

from . import checks  # NOQA: F401
from .signal_handlers import register_signal_handlers


class MediaBlocksAppConfig(AppConfig):
    name = "mediablocks"
    label = "mediablocks"
    verbose_name = _("Media blocks")
    default_auto_field = "django.db.models.AutoField"

    def ready(self):
        register_signal_handlers()

        from mediablocks.blocks import MEDIA_BLOCK_TYPE, MediaBlockService, registry

        if MEDIA_BLOCK_TYPE not in registry:
            registry.register(MediaBlockService(MEDIA_BLOCK_TYPE))
