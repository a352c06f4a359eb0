"""Custom user model with role helpers and gravatar display."""

from django.core.validators import RegexValidator
from django.contrib.auth.models import AbstractUser
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Account that owns recipes, ingredients and marks. Logs in by email."""

    ROLE_USER = "ROLE_USER"
    ROLE_ADMIN = "ROLE_ADMIN"

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    first_name = models.CharField(max_length=50, blank=False)
    last_name = models.CharField(max_length=50, blank=False)
    email = models.EmailField(unique=True, blank=False)
    roles = models.JSONField(default=list, blank=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username", "first_name", "last_name"]

    class Meta:
        """Default ordering for users."""
        ordering = ['last_name', 'first_name']

    def full_name(self):
        """Return full name string."""
        return f'{self.first_name} {self.last_name}'

    def get_roles(self):
        """Return stored roles; every account implicitly holds ROLE_USER."""
        roles = set(self.roles or [])
        roles.add(self.ROLE_USER)
        return sorted(roles)

    def has_role(self, role):
        return role in self.get_roles()

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        gravatar_url = gravatar_object.get_image(size=size, default='mp')
        return gravatar_url

    def mini_gravatar(self):
        """Return smaller gravatar URL."""
        return self.gravatar(size=60)
