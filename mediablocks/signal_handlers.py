from django.core.signals import setting_changed
from django.db.models.signals import pre_save

from mediablocks.blocks import registry
from mediablocks.exceptions import BlockServiceNotFound
from mediablocks.formats import get_media_pool


def pre_save_block_normalize_settings(instance, raw=False, **kwargs):
    # Fixtures are stored as-is
    if raw:
        return

    try:
        service = registry.get_for_block(instance)
    except BlockServiceNotFound:
        return

    # A block saved without having been loaded still holds its raw settings;
    # load it first so that stored references survive normalisation
    service.load(instance)
    if instance._state.adding:
        service.pre_persist(instance)
    else:
        service.pre_update(instance)


def reset_media_pool(setting, **kwargs):
    if setting == "MEDIABLOCKS_CONTEXTS":
        get_media_pool.cache_clear()


def register_signal_handlers():
    from mediablocks.models import Block

    pre_save.connect(pre_save_block_normalize_settings, sender=Block)
    setting_changed.connect(reset_media_pool)
