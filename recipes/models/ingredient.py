"""Model for user-owned ingredients that recipes are composed of."""

from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models


class Ingredient(models.Model):
    """Ingredient with a unit price, owned by the user who created it."""
    name = models.CharField(max_length=50, validators=[MinLengthValidator(2)])

    # strictly between 0 and 200
    price = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[
            MinValueValidator(Decimal("0.01")),
            MaxValueValidator(Decimal("199.99")),
        ],
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="ingredients",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Newest first; lists are always per owner."""
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["user"], name="ingredient_user_idx"),
        ]

    def __str__(self):
        """Readable ingredient name for admin and form choices."""
        return self.name
