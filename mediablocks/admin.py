from django.conf import settings
from django.contrib import admin

from mediablocks.models import Block, Media

if (
    hasattr(settings, "MEDIABLOCKS_MEDIA_MODEL")
    and settings.MEDIABLOCKS_MEDIA_MODEL != "mediablocks.Media"
):
    # This installation provides its own custom media class;
    # to avoid confusion, we won't expose the unused mediablocks.Media class
    # in the admin.
    pass
else:
    admin.site.register(Media, list_display=["title", "context", "created_at"])

admin.site.register(Block, list_display=["__str__", "type", "enabled", "position"])
