"""Management command to seed the database with sample users, ingredients, recipes and marks."""

from decimal import Decimal
from random import choice, randint, random, sample

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction
from django.utils.text import slugify

from recipes.models import Ingredient, Mark, Recipe, User
from .seed_data import BASE_INGREDIENT_POOL, recipe_name_pool, user_fixtures


def _ascii(name):
    return slugify(name).replace("-", "")


def create_username(first_name, last_name):
    """Build a simple lowercase username from a name."""
    return (_ascii(first_name) + _ascii(last_name))[:30]


def create_email(first_name, last_name):
    """Build a deterministic email for seeded users."""
    return _ascii(first_name) + "." + _ascii(last_name) + "@example.org"


class Command(BaseCommand):
    """Seed the database with sample users and their recipes."""
    USER_COUNT = 20
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('fr_FR')

    def add_arguments(self, parser):
        parser.add_argument(
            "--users",
            type=int,
            default=self.USER_COUNT,
            help="Total number of users to reach (fixtures included).",
        )

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        self.seed_ingredients(per_user=8)
        self.seed_recipes(per_user=3)
        self.seed_marks(max_marks_per_recipe=5)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, target):
        """Create fixture users, then random users until ``target`` is reached."""
        for data in user_fixtures:
            self.try_create_user(data)
        attempts = 0
        while User.objects.count() < target and attempts < target * 5:
            attempts += 1
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            self.try_create_user({
                'username': create_username(first_name, last_name),
                'email': create_email(first_name, last_name),
                'first_name': first_name,
                'last_name': last_name,
            })
        self.stdout.write(f"users: {User.objects.count()}")

    def try_create_user(self, data):
        """Create a user, skipping duplicates of an existing username or email."""
        try:
            with transaction.atomic():
                self.create_user(data)
        except IntegrityError:
            self.stdout.write(f"skipped existing user {data['email']}")

    def create_user(self, data):
        User.objects.create_user(
            data['username'],
            email=data['email'],
            password=self.DEFAULT_PASSWORD,
            first_name=data['first_name'],
            last_name=data['last_name'],
        )

    def seed_ingredients(self, per_user: int = 8) -> None:
        """Give every user a handful of priced ingredients."""
        rows = []
        for user_id in User.objects.values_list("id", flat=True):
            for name in sample(BASE_INGREDIENT_POOL, min(per_user, len(BASE_INGREDIENT_POOL))):
                rows.append(
                    Ingredient(
                        user_id=user_id,
                        name=name[:50],
                        price=Decimal(randint(1, 19999)) / 100,
                    )
                )
        with transaction.atomic():
            Ingredient.objects.bulk_create(rows, batch_size=1000)
        self.stdout.write(f"ingredients created: {len(rows)}")

    def seed_recipes(self, per_user: int = 3) -> None:
        """Create recipes for each user, using only that user's ingredients."""
        created = 0
        for user in User.objects.all():
            own_ingredients = list(Ingredient.objects.filter(user=user))
            for _ in range(per_user):
                recipe = Recipe.objects.create(
                    user=user,
                    name=choice(recipe_name_pool),
                    time=randint(1, 1440) if random() < 0.5 else None,
                    nb_people=randint(1, 50) if random() < 0.5 else None,
                    difficulty=randint(1, 5) if random() < 0.5 else None,
                    description=self.faker.paragraph(nb_sentences=4),
                    price=Decimal(randint(1, 99999)) / 100 if random() < 0.5 else None,
                    is_favorite=random() < 0.5,
                    is_public=random() < 0.5,
                )
                if own_ingredients:
                    recipe.ingredients.set(
                        sample(own_ingredients, randint(1, min(5, len(own_ingredients))))
                    )
                created += 1
        self.stdout.write(f"recipes created: {created}")

    def seed_marks(self, max_marks_per_recipe: int = 5) -> None:
        """Rate public recipes by random users, at most one mark per user and recipe."""
        users = list(User.objects.values_list("id", flat=True))
        recipes = list(Recipe.objects.filter(is_public=True).values_list("id", flat=True))
        if not users or not recipes:
            return

        rows = []
        for recipe_id in recipes:
            raters = sample(users, min(len(users), randint(0, max_marks_per_recipe)))
            for user_id in raters:
                rows.append(Mark(user_id=user_id, recipe_id=recipe_id, mark=randint(1, 5)))

        with transaction.atomic():
            Mark.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"marks created: {len(rows)}")
