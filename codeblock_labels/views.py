from django.contrib import messages
from django.urls import reverse_lazy
from django.views.generic import FormView

from .conf import get_label_settings
from .forms import LabelSettingsForm, settings_initial


class LabelSettingsView(FormView):
    """
    Settings page for code block labels.

    Displays:
    - "Show Language as Label" toggle
    - Ignored languages, one per line
    """

    template_name = "codeblock_labels/settings.html"
    form_class = LabelSettingsForm
    success_url = reverse_lazy("codeblock_labels:settings")

    def get_initial(self):
        return settings_initial(get_label_settings())

    def form_valid(self, form):
        form.save()
        messages.success(self.request, "Code block label settings saved.")
        return super().form_valid(form)
