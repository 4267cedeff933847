import mimetypes
import os.path

from django.conf import settings
from django.core.files.images import get_image_dimensions
from django.db import models
from django.utils.translation import gettext_lazy as _


def get_default_context():
    return getattr(settings, "MEDIABLOCKS_DEFAULT_CONTEXT", "default")


def get_upload_to(instance, filename):
    """
    Obtain a valid upload path for a media file.

    This needs to be a module-level function so that it can be referenced within migrations,
    but simply delegates to the `get_upload_to` method of the instance, so that AbstractMedia
    subclasses can override it.
    """
    return instance.get_upload_to(filename)


class AbstractMedia(models.Model):
    title = models.CharField(max_length=255, verbose_name=_("title"))
    context = models.CharField(
        max_length=64,
        default=get_default_context,
        db_index=True,
        verbose_name=_("context"),
        help_text=_("Determines which display formats are available."),
    )
    file = models.FileField(verbose_name=_("file"), upload_to=get_upload_to)
    width = models.PositiveIntegerField(verbose_name=_("width"), null=True, blank=True)
    height = models.PositiveIntegerField(
        verbose_name=_("height"), null=True, blank=True
    )
    content_type = models.CharField(
        max_length=255, blank=True, editable=False, verbose_name=_("content type")
    )
    created_at = models.DateTimeField(
        verbose_name=_("created at"), auto_now_add=True, db_index=True
    )

    def __str__(self):
        return self.title

    def get_upload_to(self, filename):
        return os.path.join("media", self.context, filename)

    @property
    def filename(self):
        return os.path.basename(self.file.name)

    @property
    def url(self):
        return self.file.url if self.file else ""

    @property
    def is_image(self):
        return self.content_type.startswith("image/")

    def save(self, *args, **kwargs):
        if self.file and not self.content_type:
            self.content_type = mimetypes.guess_type(self.file.name)[0] or ""
        if self.file and self.is_image and self.width is None:
            self.width, self.height = get_image_dimensions(self.file)
        super().save(*args, **kwargs)

    class Meta:
        abstract = True


class Media(AbstractMedia):
    class Meta:
        verbose_name = _("media")
        verbose_name_plural = _("media")
        swappable = "MEDIABLOCKS_MEDIA_MODEL"


class Block(models.Model):
    """
    A configurable, renderable unit placed on a page. ``type`` names the block
    service responsible for it; ``settings`` holds that service's options.
    """

    type = models.CharField(max_length=64, verbose_name=_("type"))
    name = models.CharField(max_length=255, blank=True, verbose_name=_("name"))
    enabled = models.BooleanField(default=True, verbose_name=_("enabled"))
    position = models.PositiveIntegerField(default=0, verbose_name=_("position"))
    settings = models.JSONField(default=dict, blank=True, verbose_name=_("settings"))
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        ordering = ["position", "pk"]
        verbose_name = _("block")
        verbose_name_plural = _("blocks")

    def __str__(self):
        return self.name or self.type

    def get_setting(self, name, default=None):
        return self.settings.get(name, default)

    def set_setting(self, name, value):
        self.settings[name] = value

    def get_service(self):
        from mediablocks.blocks import registry

        return registry.get_for_block(self)
