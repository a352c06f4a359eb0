from decimal import Decimal
import uuid

from django.urls import reverse

from recipes.models import Ingredient, Recipe, User

DEFAULT_PASSWORD = "Password123"


def reverse_with_next(url_name, next_url):
    """Extended version of reverse to generate URLs with redirects"""
    url = reverse(url_name)
    url += f"?next={next_url}"
    return url


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    email = kwargs.pop(
        "email",
        f"{username}_{uuid.uuid4().hex[:6]}@example.org"
    )
    password = kwargs.pop("password", DEFAULT_PASSWORD)

    return User.objects.create_user(
        username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        **kwargs,
    )


def make_ingredient(*, user=None, name="Tomate", price=Decimal("2.50")):
    if user is None:
        user = make_user()
    return Ingredient.objects.create(user=user, name=name, price=price)


def make_recipe(*, user=None, name="Soupe", description="Une bonne soupe.", is_public=False, **extra):
    """
    creates and returns a recipe; private unless is_public=True.
    """
    if user is None:
        user = make_user()
    return Recipe.objects.create(
        user=user,
        name=name,
        description=description,
        is_public=is_public,
        **extra,
    )


class LogInTester:
    """Class support login in tests."""

    def _is_logged_in(self):
        """Returns True if a user is logged in.  False otherwise."""
        return '_auth_user_id' in self.client.session.keys()
