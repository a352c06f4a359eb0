from django.apps import AppConfig


class RecipesConfig(AppConfig):
    """Django app config for recipes, ingredients and marks."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'recipes'
    verbose_name = 'Recettes'
