"""Service helpers for ingredient CRUD."""

import logging

logger = logging.getLogger(__name__)


class IngredientService:
    """Encapsulate ingredient create/update/delete for their owner."""

    def create_from_form(self, form, actor):
        """Persist a validated IngredientForm owned by the actor."""
        ingredient = form.save(commit=False)
        ingredient.user = actor
        ingredient.save()
        logger.info("Ingredient %s created by user %s", ingredient.pk, actor.pk)
        return ingredient

    def update_from_form(self, ingredient, form):
        owner_id = ingredient.user_id
        ingredient = form.save(commit=False)
        ingredient.user_id = owner_id
        ingredient.save()
        return ingredient

    def delete(self, ingredient):
        """Delete the ingredient; recipes simply lose it from their list."""
        ingredient_id = ingredient.pk
        ingredient.delete()
        logger.info("Ingredient %s deleted", ingredient_id)
        return ingredient_id
