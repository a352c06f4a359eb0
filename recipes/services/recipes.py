"""Service helpers for recipe creation, updates and deletion."""

import logging

logger = logging.getLogger(__name__)


class RecipeService:
    """Encapsulate the recipe lifecycle: create, edit, delete."""

    def create_from_form(self, form, actor):
        """Persist a validated RecipeForm; the owner is always the actor."""
        recipe = form.save(commit=False)
        recipe.user = actor
        recipe.save()
        form.save_m2m()
        logger.info("Recipe %s created by user %s", recipe.pk, actor.pk)
        return recipe

    def update_from_form(self, recipe, form):
        """Persist edits from a validated RecipeForm without touching ownership."""
        owner_id = recipe.user_id
        recipe = form.save(commit=False)
        recipe.user_id = owner_id
        recipe.save()
        form.save_m2m()
        logger.info("Recipe %s updated", recipe.pk)
        return recipe

    def delete(self, recipe):
        """Delete the recipe (its marks cascade) and return the old id."""
        recipe_id = recipe.pk
        recipe.delete()
        logger.info("Recipe %s deleted", recipe_id)
        return recipe_id
