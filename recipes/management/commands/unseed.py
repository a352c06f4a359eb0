from django.core.management.base import BaseCommand
from django.db import transaction
from recipes.models import User


class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes every non-staff user; their ingredients, recipes and marks go
    with them through cascading deletes. Administrative accounts are kept.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        """Delete all non-staff users and report how many rows went."""
        with transaction.atomic():
            deleted_count, _ = User.objects.filter(is_staff=False).delete()

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} rows belonging to non-staff users."))
