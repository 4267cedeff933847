import logging

from django import forms
from django.conf import settings
from django.utils.translation import gettext_lazy as _

from mediablocks.formats import get_media_pool
from mediablocks.reference import MediaReference

from .base import BlockService, Metadata

logger = logging.getLogger("mediablocks")

MEDIA_BLOCK_TYPE = "mediablocks.block.media"
DEFAULT_TEMPLATE = "mediablocks/block/block_media.html"


class MediaBlockService(BlockService):
    """
    Embeds a single media item in a page, displayed in one of the formats
    registered for the media's context.

    ``media_pool`` supplies the formats of each context and ``media_manager``
    is used to look media up by id. A service constructed without a pool
    follows the pool configured by ``MEDIABLOCKS_CONTEXTS``, including changes
    made to that setting at runtime; an injected pool is kept as given.
    """

    def __init__(self, name, media_pool=None, media_manager=None, **kwargs):
        super().__init__(name, **kwargs)
        self._media_pool = media_pool
        self._media_manager = media_manager

    @property
    def media_pool(self):
        if self._media_pool is None:
            return get_media_pool()
        return self._media_pool

    @property
    def media_manager(self):
        if self._media_manager is None:
            return self.media_pool.media_manager
        return self._media_manager

    def get_default_template(self):
        return self.meta.template or getattr(
            settings, "MEDIABLOCKS_MEDIA_BLOCK_TEMPLATE", DEFAULT_TEMPLATE
        )

    def configure_settings(self):
        return {
            "media": False,
            "title": None,
            "translation_domain": None,
            "icon": None,
            "class": None,
            "context": False,
            "mediaId": None,
            "format": False,
            "template": self.get_default_template(),
        }

    def configure_create_form(self, form, block):
        self.configure_edit_form(form, block)

    def configure_edit_form(self, form, block):
        if not MediaReference.from_setting(block.get_setting("mediaId")).is_resolved:
            self.load(block)

        format_choices = self.get_format_choices(block.get_setting("mediaId"))

        form.fields["title"] = forms.CharField(label=_("Title"), required=False)
        form.fields["translation_domain"] = forms.CharField(
            label=_("Translation domain"), required=False
        )
        form.fields["icon"] = forms.CharField(label=_("Icon"), required=False)
        form.fields["class"] = forms.CharField(label=_("CSS class"), required=False)
        form.fields["mediaId"] = self.get_media_field()
        form.fields["format"] = forms.ChoiceField(
            label=_("Format"),
            required=len(format_choices) > 0,
            choices=list(format_choices.items()),
        )

    def get_media_field(self):
        from mediablocks.widgets import AdminMediaChooser

        return forms.ModelChoiceField(
            queryset=self.media_manager.all(),
            label=_("Media"),
            required=False,
            widget=AdminMediaChooser(),
        )

    def execute(self, block_context, response=None):
        # make sure we have a valid format
        media = block_context.get_block().get_setting("mediaId")
        if MediaReference.from_setting(media).is_resolved:
            choices = self.get_format_choices(media)

            if block_context.get_setting("format") not in choices:
                fallback = next(iter(choices), None)
                logger.debug(
                    "Block %s: format %r is not available for context %r, using %r",
                    block_context.get_block().pk,
                    block_context.get_setting("format"),
                    media.context,
                    fallback,
                )
                block_context.set_setting("format", fallback)
        else:
            media = None

        return self.render_response(
            block_context.get_template(),
            {
                "media": media,
                "block": block_context.get_block(),
                "settings": block_context.get_settings(),
                "media_pool": self.media_pool,
            },
            response,
        )

    def load(self, block):
        reference = MediaReference.from_setting(block.get_setting("mediaId"))
        resolved = reference.resolve(self.media_manager)

        if reference.state == MediaReference.UNRESOLVED and resolved.is_empty:
            logger.debug(
                "Block %s refers to media %d, which does not exist",
                block.pk,
                reference.media_id,
            )

        block.set_setting("mediaId", resolved.to_python())

    def pre_persist(self, block):
        block.set_setting(
            "mediaId",
            MediaReference.from_setting(block.get_setting("mediaId")).get_prep_value(),
        )

    def pre_update(self, block):
        block.set_setting(
            "mediaId",
            MediaReference.from_setting(block.get_setting("mediaId")).get_prep_value(),
        )

    def get_metadata(self):
        return Metadata(
            self.name,
            None,
            None,
            "mediablocks",
            {"class": "fa fa-picture-o"},
        )

    def get_format_choices(self, media=None):
        if not MediaReference.from_setting(media).is_resolved:
            return {}

        formats = self.media_pool.get_format_names_by_context(media.context)

        return {code: code for code in formats}

    class Meta:
        label = _("Media")
        icon = "image"
        group = _("Media")
