"""Model representing a user's mark (1 to 5) on a recipe."""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .recipe import Recipe


class Mark(models.Model):
    """User rating of a recipe; one per user/recipe pair."""
    MIN_MARK = 1
    MAX_MARK = 5

    mark = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_MARK), MaxValueValidator(MAX_MARK)]
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='marks'
    )

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        related_name='marks'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one mark per user/recipe pair and the 1-5 range in the schema."""
        constraints = [
            models.UniqueConstraint(
                fields=["user", "recipe"],
                name="uniq_mark_user_recipe",
            ),
            models.CheckConstraint(
                condition=models.Q(mark__gte=1) & models.Q(mark__lte=5),
                name="mark_between_1_and_5",
            ),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.recipe_id}: {self.mark}"
