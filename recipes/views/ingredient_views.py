from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from recipes.forms import IngredientForm
from recipes.models import Ingredient
from recipes.repos.ingredient_repo import IngredientRepo
from recipes.services import IngredientService
from recipes.services import access
from recipes.views.decorators import granted
from recipes.views.view_utils import paginate

ingredient_repo = IngredientRepo()
ingredient_service = IngredientService()


@require_GET
@granted(access.can_manage_ingredients)
def ingredient_index(request):
    """List the current user's ingredients, ten per page."""
    ingredients = paginate(request, ingredient_repo.list_for_user(request.user))
    return render(request, "pages/ingredient/index.html", {"ingredients": ingredients})


@require_http_methods(["GET", "POST"])
@granted(access.can_manage_ingredients)
def ingredient_new(request):
    form = IngredientForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        ingredient_service.create_from_form(form, request.user)
        messages.success(request, "Votre ingrédient a été créé avec succès !")
        return redirect("ingredient_index")

    return render(request, "pages/ingredient/new.html", {"form": form})


@require_http_methods(["GET", "POST"])
@granted(access.can_edit_ingredient, model=Ingredient)
def ingredient_edit(request, ingredient):
    form = IngredientForm(request.POST or None, instance=ingredient)
    if request.method == "POST" and form.is_valid():
        ingredient_service.update_from_form(ingredient, form)
        messages.success(request, "Votre ingrédient a été modifié avec succès !")
        return redirect("ingredient_index")

    return render(request, "pages/ingredient/edit.html", {"form": form, "ingredient": ingredient})


@require_http_methods(["GET", "POST"])
@granted(access.can_delete_ingredient, model=Ingredient)
def ingredient_delete(request, ingredient):
    ingredient_service.delete(ingredient)
    messages.success(request, "Votre ingrédient a été supprimé avec succès !")
    return redirect("ingredient_index")
