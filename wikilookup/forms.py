"""Forms for the wikilookup app."""

from __future__ import annotations

from django import forms


class LookupForm(forms.Form):
    """Validates the query string of a lookup request."""

    q = forms.CharField(
        max_length=255,
        strip=True,
        label='Query',
        help_text='Title or phrase to look up, e.g. "Rome".',
    )

    def clean_q(self) -> str:
        value = self.cleaned_data.get('q', '')
        if not value:
            raise forms.ValidationError('Enter something to look up.')
        return value
