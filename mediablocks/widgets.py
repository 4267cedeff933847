from django import forms
from django.utils.translation import gettext_lazy as _

from mediablocks import get_media_model


class AdminMediaChooser(forms.Select):
    choose_one_text = _("Choose a media item")
    choose_another_text = _("Change media item")
    template_name = "mediablocks/widgets/media_chooser.html"
    classname = "media-chooser"

    def __init__(self, attrs=None, choices=()):
        super().__init__(attrs=attrs, choices=choices)
        self.model = get_media_model()

    def get_instance(self, value):
        if value is None or value == "":
            return None
        if isinstance(value, self.model):
            return value
        return self.model._default_manager.filter(pk=value).first()

    def get_context(self, name, value, attrs):
        # ModelChoiceField.prepare_value gives us a pk, so accept both forms
        instance = self.get_instance(value)
        context = super().get_context(name, instance.pk if instance else value, attrs)
        context["widget"].update(
            {
                "instance": instance,
                "classname": self.classname,
                "choose_one_text": self.choose_one_text,
                "choose_another_text": self.choose_another_text,
            }
        )
        return context
