from django import forms

from recipes.models import Ingredient, Recipe

DIFFICULTY_CHOICES = [
    ("", "---"),
    (1, "1 - Très facile"),
    (2, "2 - Facile"),
    (3, "3 - Moyen"),
    (4, "4 - Difficile"),
    (5, "5 - Très difficile"),
]


class RecipeForm(forms.ModelForm):
    """Form for creating and editing recipes.

    The owner is never a form field: the view assigns it from the logged-in
    user. The ingredient choices are limited to the owner's ingredients.
    """

    field_order = [
        "name",
        "time",
        "nb_people",
        "difficulty",
        "description",
        "price",
        "is_favorite",
        "is_public",
        "ingredients",
    ]

    difficulty = forms.TypedChoiceField(
        choices=DIFFICULTY_CHOICES,
        coerce=int,
        empty_value=None,
        required=False,
        label="Difficulté",
    )

    ingredients = forms.ModelMultipleChoiceField(
        queryset=Ingredient.objects.none(),
        required=False,
        widget=forms.CheckboxSelectMultiple,
        label="Les ingrédients",
    )

    class Meta:
        """Model/field configuration for RecipeForm."""
        model = Recipe
        fields = [
            "name",
            "time",
            "nb_people",
            "difficulty",
            "description",
            "price",
            "is_favorite",
            "is_public",
            "ingredients",
        ]
        labels = {
            "name": "Nom",
            "time": "Temps (en minutes)",
            "nb_people": "Nombre de personnes",
            "price": "Prix",
            "is_favorite": "Favoris ?",
            "is_public": "Public ?",
        }
        widgets = {
            "description": forms.Textarea(attrs={"rows": 5}),
        }

    def __init__(self, *args, owner=None, **kwargs):
        """Bind the ingredient choices to the recipe owner."""
        super().__init__(*args, **kwargs)
        if owner is None and self.instance.pk:
            owner = self.instance.user
        if owner is not None:
            self.fields["ingredients"].queryset = Ingredient.objects.filter(user=owner).order_by("name")
