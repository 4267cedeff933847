from django import forms


class BlockSettingsForm(forms.Form):
    """
    Edits the settings of a single block. The form starts with no fields;
    the block's service adds them in ``configure_create_form`` or
    ``configure_edit_form``.
    """

    def __init__(self, block, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.block = block

    @property
    def service(self):
        return self.block.get_service()

    def clean(self):
        cleaned_data = super().clean()
        self.service.validate(self, self.block)
        return cleaned_data

    def save(self, commit=True):
        for name, value in self.cleaned_data.items():
            self.block.set_setting(name, value)

        if commit:
            self.block.save()
        return self.block
