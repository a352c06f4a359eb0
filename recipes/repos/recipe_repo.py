"""Repository helpers for fetching recipes."""

from typing import Optional

from django.db.models import Avg, QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.models.recipe import Recipe


class RecipeRepo(DB_Accessor):
    """Repository for Recipe queries (public listing, per-owner listing)."""
    def __init__(self) -> None:
        """Initialise with the Recipe model."""
        super().__init__(Recipe)

    def base_queryset(self) -> QuerySet:
        """Recipes with their owner loaded and the mean mark annotated."""
        return (
            Recipe.objects.select_related("user")
            .annotate(average_mark=Avg("marks__mark"))
        )

    def list_public(self, limit: Optional[int] = None) -> QuerySet:
        """Return public recipes, newest first. No limit when limit is None or 0."""
        return self.list(
            filters={"is_public": True},
            order_by=("-created_at", "-id"),
            limit=limit or None,
        )

    def list_for_user(self, user) -> QuerySet:
        """Return recipes owned by the given user, newest first."""
        return self.list(
            filters={"user": user},
            order_by=("-created_at", "-id"),
        )
