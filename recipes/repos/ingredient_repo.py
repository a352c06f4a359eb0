"""Repository helpers for ingredients."""

from django.db.models import QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.models.ingredient import Ingredient


class IngredientRepo(DB_Accessor):
    """Repository for Ingredient queries."""
    def __init__(self) -> None:
        """Initialise with the Ingredient model."""
        super().__init__(Ingredient)

    def list_for_user(self, user) -> QuerySet:
        """Return ingredients owned by the given user, newest first."""
        return self.list(filters={"user": user}, order_by=("-created_at", "-id"))
