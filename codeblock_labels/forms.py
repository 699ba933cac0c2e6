# forms.py
from django import forms

from .conf import LabelSettings, save_label_settings


def settings_initial(settings: LabelSettings) -> dict:
    """Initial form values for the given settings."""
    return {
        "show_language_as_label": settings.show_language_as_label,
        "ignore_languages": settings.ignore_languages or "",
    }


class LabelSettingsForm(forms.Form):
    """Edit both label settings; saving always persists the whole object."""

    show_language_as_label = forms.BooleanField(
        label="Show Language as Label",
        required=False,
        help_text=(
            "If no label is given but there is a set highlight language "
            "show that language as the label."
        ),
    )
    ignore_languages = forms.CharField(
        label="Ignore",
        required=False,
        strip=False,
        widget=forms.Textarea(attrs={"rows": 6}),
        help_text="Ignore languages, one per line",
    )

    def clean_ignore_languages(self):
        # Textareas submit CRLF; storage is newline-delimited
        value = self.cleaned_data.get("ignore_languages") or ""
        return value.replace("\r\n", "\n")

    def save(self) -> LabelSettings:
        settings = LabelSettings(
            ignore_languages=self.cleaned_data["ignore_languages"],
            show_language_as_label=self.cleaned_data["show_language_as_label"],
        )
        return save_label_settings(settings)
