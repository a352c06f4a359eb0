"""Service helpers for rating recipes."""

import logging

from recipes.repos.mark_repo import MarkRepo

logger = logging.getLogger(__name__)


class MarkService:
    """Record a user's mark on a recipe, keeping one mark per user/recipe."""

    def __init__(self, repo=None):
        self.repo = repo or MarkRepo()

    def rate(self, actor, recipe, value):
        """Insert or overwrite the actor's mark on the recipe and return it."""
        mark, created = self.repo.upsert(actor, recipe, value)
        logger.info(
            "Mark %s by user %s on recipe %s (%s)",
            value, actor.pk, recipe.pk, "created" if created else "updated",
        )
        return mark

    def mark_of(self, actor, recipe):
        """Return the actor's existing mark value on the recipe, or None."""
        mark = self.repo.find_for(actor, recipe)
        return mark.mark if mark else None
