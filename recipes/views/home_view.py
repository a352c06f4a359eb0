from django.conf import settings
from django.shortcuts import render
from django.views.decorators.http import require_GET

from recipes.repos.recipe_repo import RecipeRepo

recipe_repo = RecipeRepo()


@require_GET
def home(request):
    """Show the most recent public recipes."""
    recipes = recipe_repo.list_public(limit=settings.HOME_RECIPE_COUNT)
    return render(request, "pages/home.html", {"recipes": recipes})
