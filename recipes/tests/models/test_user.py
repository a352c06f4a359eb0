from unittest.mock import patch

from django.core.exceptions import ValidationError
from django.test import TestCase

from recipes.models import User
from recipes.tests.helpers import make_user


class UserModelTestCase(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            'johndoe',
            first_name='John',
            last_name='Doe',
            email='johndoe@example.org',
            password='Password123',
        )

    def _assert_user_is_valid(self):
        try:
            self.user.full_clean()
        except (ValidationError):
            self.fail('Test user should be valid')

    def _assert_user_is_invalid(self):
        with self.assertRaises(ValidationError):
            self.user.full_clean()

    def test_valid_user(self):
        self._assert_user_is_valid()

    def test_username_can_be_30_characters_long(self):
        self.user.username = 'x' * 30
        self._assert_user_is_valid()

    def test_username_cannot_be_over_30_characters_long(self):
        self.user.username = 'x' * 31
        self._assert_user_is_invalid()

    def test_username_needs_three_alphanumericals(self):
        self.user.username = 'jd'
        self._assert_user_is_invalid()

    def test_username_cannot_contain_spaces(self):
        self.user.username = 'john doe'
        self._assert_user_is_invalid()

    def test_username_must_be_unique(self):
        make_user(username='janedoe', email='janedoe@example.org')
        self.user.username = 'janedoe'
        self._assert_user_is_invalid()

    def test_email_must_be_unique(self):
        make_user(username='janedoe', email='janedoe@example.org')
        self.user.email = 'janedoe@example.org'
        self._assert_user_is_invalid()

    def test_email_must_be_well_formed(self):
        self.user.email = 'johndoe.example.org'
        self._assert_user_is_invalid()

    def test_first_name_cannot_be_blank(self):
        self.user.first_name = ''
        self._assert_user_is_invalid()

    def test_last_name_can_be_50_characters_long(self):
        self.user.last_name = 'x' * 50
        self._assert_user_is_valid()

    def test_last_name_cannot_be_over_50_characters_long(self):
        self.user.last_name = 'x' * 51
        self._assert_user_is_invalid()

    def test_password_is_hashed(self):
        self.assertNotEqual(self.user.password, 'Password123')
        self.assertTrue(self.user.check_password('Password123'))

    def test_full_name(self):
        self.assertEqual(self.user.full_name(), 'John Doe')

    def test_every_account_holds_role_user(self):
        self.assertEqual(self.user.roles, [])
        self.assertEqual(self.user.get_roles(), [User.ROLE_USER])
        self.assertTrue(self.user.has_role(User.ROLE_USER))
        self.assertFalse(self.user.has_role(User.ROLE_ADMIN))

    def test_stored_roles_are_kept(self):
        self.user.roles = [User.ROLE_ADMIN]
        self.user.save()
        self.user.refresh_from_db()
        self.assertEqual(self.user.get_roles(), [User.ROLE_ADMIN, User.ROLE_USER])

    def test_logs_in_by_email(self):
        self.assertEqual(User.USERNAME_FIELD, 'email')
        self.assertTrue(self.client.login(email='johndoe@example.org', password='Password123'))

    def test_gravatar_returns_url(self):
        url = self.user.gravatar(size=80)
        self.assertIn("gravatar.com/avatar", url)

    def test_mini_gravatar_delegates_with_size(self):
        with patch.object(self.user, "gravatar", return_value="mini") as mock_method:
            self.assertEqual(self.user.mini_gravatar(), "mini")
        mock_method.assert_called_once_with(size=60)
