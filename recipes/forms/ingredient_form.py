from django import forms
from recipes.models import Ingredient


class IngredientForm(forms.ModelForm):
    """Form for creating and editing an ingredient."""

    class Meta:
        """Model and field config for ingredients."""
        model = Ingredient
        fields = ['name', 'price']
        labels = {
            'name': 'Nom',
            'price': 'Prix',
        }
