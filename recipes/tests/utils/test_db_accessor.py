from decimal import Decimal

from django.test import TestCase

from recipes.db_accessor import DB_Accessor
from recipes.models import Ingredient
from recipes.tests.helpers import make_user


class DBAccessorTests(TestCase):

    def setUp(self):
        self.user = make_user()
        self.obj1 = Ingredient.objects.create(user=self.user, name="Sel", price=Decimal("1.00"))
        self.obj2 = Ingredient.objects.create(user=self.user, name="Beurre", price=Decimal("3.50"))

        self.repo = DB_Accessor(Ingredient)

    # ---------- list() ----------

    def test_list_default_returns_queryset(self):
        qs = self.repo.list()
        self.assertEqual(qs.count(), 2)

    def test_list_filters(self):
        qs = self.repo.list(filters={"name": "Sel"})
        self.assertEqual(qs.count(), 1)
        self.assertEqual(qs.first().name, "Sel")

    def test_list_order_by(self):
        qs = self.repo.list(order_by=["name"])
        names = list(qs.values_list("name", flat=True))
        self.assertEqual(names, ["Beurre", "Sel"])

    def test_list_limit(self):
        qs = self.repo.list(order_by=["name"], limit=1)
        self.assertEqual([i.name for i in qs], ["Beurre"])

    def test_list_negative_limit_is_empty(self):
        self.assertEqual(len(self.repo.list(limit=-3)), 0)

    def test_list_as_dict(self):
        result = self.repo.list(as_dict=True)
        self.assertIsInstance(result, list)
        self.assertIsInstance(result[0], dict)
        self.assertIn("price", result[0])

    # ---------- get() / first() ----------

    def test_get_returns_object(self):
        self.assertEqual(self.repo.get(pk=self.obj1.pk), self.obj1)

    def test_get_raises_when_missing(self):
        with self.assertRaises(Ingredient.DoesNotExist):
            self.repo.get(pk=0)

    def test_first_returns_none_when_missing(self):
        self.assertIsNone(self.repo.first(name="Farine"))

    # ---------- create() / update() / delete() ----------

    def test_create(self):
        obj = self.repo.create(user=self.user, name="Farine", price=Decimal("0.90"))
        self.assertEqual(Ingredient.objects.count(), 3)
        self.assertEqual(obj.name, "Farine")

    def test_update_returns_count(self):
        count = self.repo.update({"user": self.user}, price=Decimal("2.00"))
        self.assertEqual(count, 2)
        self.obj1.refresh_from_db()
        self.assertEqual(self.obj1.price, Decimal("2.00"))

    def test_delete_returns_count(self):
        self.assertEqual(self.repo.delete(name="Sel"), 1)
        self.assertEqual(Ingredient.objects.count(), 1)
