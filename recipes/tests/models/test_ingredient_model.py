from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase

from recipes.models import Ingredient
from recipes.tests.helpers import make_ingredient, make_recipe, make_user


class IngredientModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user()
        self.ingredient = make_ingredient(user=self.user)

    def _assert_valid(self):
        try:
            self.ingredient.full_clean()
        except ValidationError:
            self.fail("Ingredient should be valid")

    def _assert_invalid(self):
        with self.assertRaises(ValidationError):
            self.ingredient.full_clean()

    def test_valid_ingredient(self):
        self._assert_valid()

    def test_str_is_name(self):
        self.assertEqual(str(self.ingredient), "Tomate")

    def test_name_needs_two_characters(self):
        self.ingredient.name = "T"
        self._assert_invalid()

    def test_name_cannot_be_over_50_characters(self):
        self.ingredient.name = "x" * 51
        self._assert_invalid()

    def test_price_bounds(self):
        for price in ("0.01", "199.99"):
            self.ingredient.price = Decimal(price)
            self._assert_valid()
        for price in ("0", "200", "-1"):
            self.ingredient.price = Decimal(price)
            self._assert_invalid()

    def test_deleting_owner_deletes_ingredients(self):
        self.user.delete()
        self.assertFalse(Ingredient.objects.exists())

    def test_deleting_ingredient_detaches_it_from_recipes(self):
        recipe = make_recipe(user=self.user)
        recipe.ingredients.add(self.ingredient)
        self.ingredient.delete()
        recipe.refresh_from_db()
        self.assertEqual(recipe.ingredients.count(), 0)
