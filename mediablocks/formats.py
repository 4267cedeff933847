from functools import lru_cache

from django.conf import settings

DEFAULT_CONTEXTS = {
    "default": {
        "formats": {
            "small": {"label": "Small", "width": 100},
            "big": {"label": "Big", "width": 500},
        },
    },
}


class Format:
    def __init__(self, name, label, classname=None, width=None, height=None):
        self.name = name
        self.label = label
        self.classname = classname
        self.width = width
        self.height = height

    def __str__(self):
        return f'"{self.name}", "{self.label}", "{self.classname}", "{self.width}x{self.height}"'

    def __repr__(self):
        return f"Format({self})"

    def html_attributes(self, media):
        """
        Return the attributes to go on the HTML element when outputting
        ``media`` in this format
        """
        attrs = {
            "src": media.url,
            "alt": media.title,
        }
        if self.width:
            attrs["width"] = self.width
        if self.height:
            attrs["height"] = self.height
        if self.classname:
            attrs["class"] = self.classname
        return attrs


class MediaPool:
    """
    Registry of media contexts and the display formats available within each.
    Formats keep their registration order; the first registered format of a
    context is its default.
    """

    def __init__(self, media_model=None):
        self._media_model = media_model
        self._contexts = {}

    @property
    def media_model(self):
        if self._media_model is None:
            from mediablocks import get_media_model

            self._media_model = get_media_model()
        return self._media_model

    @property
    def media_manager(self):
        return self.media_model._default_manager

    def add_context(self, name, formats=()):
        if name in self._contexts:
            raise KeyError("Media context '%s' is already registered" % name)
        self._contexts[name] = {}
        for format in formats:
            self.register_format(name, format)

    def has_context(self, name):
        return name in self._contexts

    def get_contexts(self):
        return list(self._contexts)

    def register_format(self, context, format):
        formats = self._contexts.setdefault(context, {})
        if format.name in formats:
            raise KeyError(
                "Media format '%s' is already registered for context '%s'"
                % (format.name, context)
            )
        formats[format.name] = format

    def unregister_format(self, context, format_name):
        # handle being passed a format object rather than a format name string
        format_name = getattr(format_name, "name", format_name)

        try:
            del self._contexts[context][format_name]
        except KeyError:
            raise KeyError(
                "Media format '%s' is not registered for context '%s'"
                % (format_name, context)
            )

    def get_formats(self, context):
        return list(self._contexts.get(context, {}).values())

    def get_format(self, context, name):
        try:
            return self._contexts[context][name]
        except KeyError:
            raise KeyError(
                "Media format '%s' is not registered for context '%s'"
                % (name, context)
            )

    def get_format_names_by_context(self, context):
        """
        Return an ordered mapping of format code to label for ``context``.
        Unknown contexts have no formats.
        """
        return {
            name: format.label
            for name, format in self._contexts.get(context, {}).items()
        }


def build_media_pool(contexts):
    pool = MediaPool()
    for context_name, context_config in contexts.items():
        pool.add_context(
            context_name,
            [
                Format(
                    name,
                    options.get("label", name),
                    classname=options.get("classname"),
                    width=options.get("width"),
                    height=options.get("height"),
                )
                for name, options in context_config.get("formats", {}).items()
            ],
        )
    return pool


@lru_cache(maxsize=None)
def get_media_pool():
    """
    Return the media pool configured by the ``MEDIABLOCKS_CONTEXTS`` setting.
    """
    return build_media_pool(getattr(settings, "MEDIABLOCKS_CONTEXTS", DEFAULT_CONTEXTS))
