from django import forms
from recipes.models import Mark

MARK_CHOICES = [(value, str(value)) for value in range(Mark.MIN_MARK, Mark.MAX_MARK + 1)]


class MarkForm(forms.ModelForm):
    """Form for rating a recipe from 1 to 5."""
    mark = forms.TypedChoiceField(
        choices=MARK_CHOICES,
        coerce=int,
        label="Noter la recette",
    )

    class Meta:
        """Model and field config for marks."""
        model = Mark
        fields = ['mark']
