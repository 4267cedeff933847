from django.http import HttpResponse
from django.template.loader import render_to_string
from django.utils.encoding import force_str
from django.utils.text import capfirst

from mediablocks.exceptions import UnknownBlockSettingError

__all__ = [
    "BaseBlockService",
    "BlockService",
    "BlockContext",
    "Metadata",
]


class BaseBlockService(type):
    def __new__(mcs, name, bases, attrs):
        meta_class = attrs.pop("Meta", None)

        cls = super().__new__(mcs, name, bases, attrs)

        # Get all the Meta classes from all the bases
        meta_class_bases = [meta_class] + [
            getattr(base, "_meta_class", None) for base in bases
        ]
        meta_class_bases = tuple(filter(bool, meta_class_bases))
        cls._meta_class = type(str(name + "Meta"), meta_class_bases, {})

        return cls


class Metadata:
    """
    Static information describing a block type to a block picker.
    """

    def __init__(self, title, description=None, image=None, domain=None, options=None):
        self.title = title
        self.description = description
        self.image = image
        self.domain = domain
        self.options = options or {}

    def __repr__(self):
        return "<Metadata: %s>" % self.title

    def get_option(self, name, default=None):
        return self.options.get(name, default)


class BlockContext:
    """
    A block paired with its resolved settings for the duration of one render.
    Changing a setting here never touches the stored block.
    """

    def __init__(self, block, settings):
        self.block = block
        self.settings = settings

    def get_block(self):
        return self.block

    def get_settings(self):
        return self.settings

    def get_setting(self, name):
        return self.settings[name]

    def set_setting(self, name, value):
        if name not in self.settings:
            raise UnknownBlockSettingError(self.block.type, [name])
        self.settings[name] = value

    def get_template(self):
        return self.settings.get("template")


class BlockService(metaclass=BaseBlockService):
    class Meta:
        label = None
        icon = "placeholder"
        template = None
        group = ""

    def __init__(self, name, **kwargs):
        self.name = name
        self.meta = self._meta_class()

        for attr, value in kwargs.items():
            setattr(self.meta, attr, value)

        self.label = self.meta.label or capfirst(
            force_str(name).rsplit(".", 1)[-1].replace("_", " ")
        )

    def __repr__(self):
        return "<%s: %s>" % (self.__class__.__name__, self.name)

    def configure_settings(self):
        """
        Return the settings this block type accepts, mapped to their defaults.
        """
        return {"template": self.meta.template}

    def resolve_settings(self, settings=None):
        defaults = self.configure_settings()
        settings = settings or {}

        unknown = set(settings) - set(defaults)
        if unknown:
            raise UnknownBlockSettingError(self.name, unknown)

        resolved = dict(defaults)
        resolved.update(settings)
        return resolved

    def get_block_context(self, block, extra_settings=None):
        settings = dict(block.settings)
        if extra_settings:
            settings.update(extra_settings)
        return BlockContext(block, self.resolve_settings(settings))

    def get_form(self, block, data=None, files=None):
        from mediablocks.forms import BlockSettingsForm

        form = BlockSettingsForm(block, data=data, files=files)
        if block.pk is None:
            self.configure_create_form(form, block)
        else:
            self.configure_edit_form(form, block)
        form.initial.update(
            {name: block.settings.get(name) for name in form.fields}
        )
        return form

    def configure_create_form(self, form, block):
        pass

    def configure_edit_form(self, form, block):
        pass

    def validate(self, form, block):
        pass

    def execute(self, block_context, response=None):
        return self.render_response(
            block_context.get_template(),
            {
                "block": block_context.get_block(),
                "settings": block_context.get_settings(),
            },
            response,
        )

    def load(self, block):
        pass

    def pre_persist(self, block):
        pass

    def pre_update(self, block):
        pass

    def get_metadata(self):
        return Metadata(self.name, options={"icon": self.meta.icon})

    def render_response(self, template, context, response=None, request=None):
        content = render_to_string(template, context, request=request)
        if response is None:
            return HttpResponse(content)

        response.content = content
        return response
