"""Repository helpers for marks."""

from typing import Optional

from django.db import transaction

from recipes.db_accessor import DB_Accessor
from recipes.models.mark import Mark


class MarkRepo(DB_Accessor):
    """Repository for Mark lookups and the per user/recipe upsert."""
    def __init__(self) -> None:
        """Initialise with the Mark model."""
        super().__init__(Mark)

    def find_for(self, user, recipe) -> Optional[Mark]:
        """Return the user's mark on the recipe, if any."""
        return self.first(user=user, recipe=recipe)

    def upsert(self, user, recipe, value: int) -> tuple[Mark, bool]:
        """Set the user's mark on the recipe, inserting it when missing.

        Relies on the (user, recipe) unique constraint: a concurrent insert
        makes update_or_create fall back to updating the winning row.
        """
        with transaction.atomic():
            return Mark.objects.update_or_create(
                user=user,
                recipe=recipe,
                defaults={"mark": value},
            )
