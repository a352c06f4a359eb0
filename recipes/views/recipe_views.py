from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from recipes.forms import MarkForm, RecipeForm
from recipes.models import Recipe
from recipes.repos.recipe_repo import RecipeRepo
from recipes.services import MarkService, RecipeService
from recipes.services import access
from recipes.views.decorators import granted
from recipes.views.view_utils import paginate

recipe_repo = RecipeRepo()
recipe_service = RecipeService()
mark_service = MarkService()


@require_GET
@granted(access.can_list_own_recipes)
def recipe_index(request):
    """List the current user's recipes, ten per page."""
    recipes = paginate(request, recipe_repo.list_for_user(request.user))
    return render(request, "pages/recipe/index.html", {"recipes": recipes})


@require_GET
def recipe_index_public(request):
    """List every public recipe, ten per page."""
    recipes = paginate(request, recipe_repo.list_public())
    return render(request, "pages/recipe/index_public.html", {"recipes": recipes})


@require_http_methods(["GET", "POST"])
@granted(access.can_create_recipe)
def recipe_new(request):
    """Create a recipe owned by the current user."""
    form = RecipeForm(request.POST or None, owner=request.user)
    if request.method == "POST" and form.is_valid():
        recipe_service.create_from_form(form, request.user)
        messages.success(request, "Votre recette a été créée avec succès !")
        return redirect("recipe_index")

    return render(request, "pages/recipe/new.html", {"form": form})


@require_http_methods(["GET", "POST"])
@granted(access.can_view_recipe, model=Recipe)
def recipe_show(request, recipe):
    """Display a recipe and record the current user's mark on it."""
    form = MarkForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        mark_service.rate(request.user, recipe, form.cleaned_data["mark"])
        messages.success(request, "Votre note a bien été prise en compte.")
        return redirect("recipe_show", id=recipe.id)

    return render(
        request,
        "pages/recipe/show.html",
        {
            "recipe": recipe,
            "form": form,
            "current_mark": mark_service.mark_of(request.user, recipe),
            "is_owner": access.is_owner(request.user, recipe),
        },
    )


@require_http_methods(["GET", "POST"])
@granted(access.can_edit_recipe, model=Recipe)
def recipe_edit(request, recipe):
    """Edit a recipe owned by the current user."""
    form = RecipeForm(request.POST or None, instance=recipe, owner=recipe.user)
    if request.method == "POST" and form.is_valid():
        recipe_service.update_from_form(recipe, form)
        messages.success(request, "Votre recette a été modifiée avec succès !")
        return redirect("recipe_index")

    return render(request, "pages/recipe/edit.html", {"form": form, "recipe": recipe})


@require_http_methods(["GET", "POST"])
@granted(access.can_delete_recipe, model=Recipe)
def recipe_delete(request, recipe):
    """Delete a recipe owned by the current user."""
    recipe_service.delete(recipe)
    messages.success(request, "Votre recette a été supprimée avec succès !")
    return redirect("recipe_index")
