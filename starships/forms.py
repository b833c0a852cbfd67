from django import forms

from .models import Starship, TEXT_FIELDS


class StarshipForm(forms.ModelForm):
    """
    Create/edit form. Every text field is required here even though the
    model accepts "" for rows seeded from SWAPI.
    """
    class Meta:
        model = Starship
        fields = list(TEXT_FIELDS)
        labels = {
            'starship_class': 'Class',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.required = True
