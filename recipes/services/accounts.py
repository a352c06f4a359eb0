"""Service helpers for account self-service: registration, profile and password."""

import logging

from recipes.exceptions import CredentialMismatch
from recipes.models import User

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulate account changes that require the current password."""

    def verify_password(self, user, plain_password):
        """Raise CredentialMismatch unless plain_password matches the stored hash."""
        if not plain_password or not user.check_password(plain_password):
            logger.warning("Current password check failed for user %s", user.pk)
            raise CredentialMismatch()

    def update_profile(self, user, form, current_password):
        """Save a validated UserForm once the current password is verified."""
        self.verify_password(user, current_password)
        user = form.save()
        logger.info("Profile of user %s updated", user.pk)
        return user

    def change_password(self, user, current_password, new_password):
        """Replace the stored hash with a hash of new_password."""
        self.verify_password(user, current_password)
        user.set_password(new_password)
        user.save(update_fields=["password"])
        logger.info("Password of user %s changed", user.pk)
        return user

    def register(self, *, username, email, first_name, last_name, password):
        """Create and return a new account with a hashed password."""
        user = User.objects.create_user(
            username,
            email=email,
            first_name=first_name,
            last_name=last_name,
            password=password,
        )
        logger.info("User %s registered", user.pk)
        return user
