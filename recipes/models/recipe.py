from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models
from django.db.models import Avg

from .ingredient import Ingredient

"""
Recipe model

A recipe belongs to exactly one user (`user`), who is the only one allowed
to edit or delete it. The owner is assigned from the logged-in user when the
recipe is created and is never taken from submitted form data.

- `is_public` controls whether other users may see the recipe. Recipes are
  private unless created public.
- `ingredients` only ever references ingredients of the same owner (the
  recipe form restricts the choices).
- `average` is derived from the recipe's marks; nothing is cached on the row.
"""


class Recipe(models.Model):
    name = models.CharField(max_length=50, validators=[MinLengthValidator(2)])

    # minutes, 1 to 24h
    time = models.PositiveIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(1440)],
    )
    nb_people = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(50)],
    )
    difficulty = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    description = models.TextField()
    price = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[
            MinValueValidator(Decimal("0.01")),
            MaxValueValidator(Decimal("999.99")),
        ],
    )

    is_favorite = models.BooleanField(default=False)
    is_public = models.BooleanField(default=False)

    ingredients = models.ManyToManyField(
        Ingredient,
        related_name="recipes",
        blank=True,
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="recipes",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["is_public", "-created_at"], name="recipe_public_created_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def average(self):
        """Mean mark of this recipe, or None while nobody has rated it."""
        annotated = getattr(self, "average_mark", None)
        if annotated is not None:
            return annotated
        return self.marks.aggregate(value=Avg("mark"))["value"]

    @property
    def marks_count(self):
        return self.marks.count()
