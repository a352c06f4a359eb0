from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase

from recipes.models import Mark, Recipe
from recipes.tests.helpers import make_recipe, make_user


class RecipeModelTestCase(TestCase):
    def setUp(self):
        self.owner = make_user(username="owner")
        self.recipe = make_recipe(user=self.owner)

    def _assert_valid(self):
        try:
            self.recipe.full_clean()
        except ValidationError:
            self.fail("Recipe should be valid")

    def _assert_invalid(self):
        with self.assertRaises(ValidationError):
            self.recipe.full_clean()

    def test_valid_recipe(self):
        self._assert_valid()

    def test_defaults(self):
        self.assertFalse(self.recipe.is_public)
        self.assertFalse(self.recipe.is_favorite)
        self.assertIsNone(self.recipe.time)
        self.assertIsNone(self.recipe.price)
        self.assertIsNotNone(self.recipe.created_at)
        self.assertIsNotNone(self.recipe.updated_at)

    def test_name_length(self):
        self.recipe.name = "S"
        self._assert_invalid()
        self.recipe.name = "x" * 51
        self._assert_invalid()

    def test_description_is_required(self):
        self.recipe.description = ""
        self._assert_invalid()

    def test_time_bounds(self):
        self.recipe.time = 1440
        self._assert_valid()
        self.recipe.time = 1441
        self._assert_invalid()
        self.recipe.time = 0
        self._assert_invalid()

    def test_nb_people_bounds(self):
        self.recipe.nb_people = 50
        self._assert_valid()
        self.recipe.nb_people = 51
        self._assert_invalid()

    def test_difficulty_bounds(self):
        self.recipe.difficulty = 5
        self._assert_valid()
        self.recipe.difficulty = 6
        self._assert_invalid()

    def test_price_bounds(self):
        self.recipe.price = Decimal("999.99")
        self._assert_valid()
        self.recipe.price = Decimal("1000")
        self._assert_invalid()
        self.recipe.price = Decimal("0")
        self._assert_invalid()

    def test_average_is_none_without_marks(self):
        self.assertIsNone(self.recipe.average)
        self.assertEqual(self.recipe.marks_count, 0)

    def test_average_is_the_mean_of_marks(self):
        Mark.objects.create(user=self.owner, recipe=self.recipe, mark=4)
        Mark.objects.create(user=make_user(username="rater"), recipe=self.recipe, mark=1)
        recipe = Recipe.objects.get(pk=self.recipe.pk)
        self.assertAlmostEqual(float(recipe.average), 2.5)
        self.assertEqual(recipe.marks_count, 2)

    def test_average_prefers_annotation(self):
        self.recipe.average_mark = 3.0
        with self.assertNumQueries(0):
            self.assertEqual(self.recipe.average, 3.0)

    def test_deleting_recipe_deletes_marks(self):
        Mark.objects.create(user=self.owner, recipe=self.recipe, mark=4)
        self.recipe.delete()
        self.assertFalse(Mark.objects.exists())

    def test_default_ordering_is_newest_first(self):
        newer = make_recipe(user=self.owner, name="Gratin")
        self.assertEqual(list(Recipe.objects.all()), [newer, self.recipe])
