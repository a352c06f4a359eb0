"""Tests of the sign up view."""
from django.test import TestCase
from django.urls import reverse

from recipes.forms import SignUpForm
from recipes.models import User
from recipes.tests.helpers import LogInTester, make_user


class SignUpViewTestCase(TestCase, LogInTester):
    """Tests of the sign up view."""

    def setUp(self):
        self.url = reverse('sign_up')
        self.form_input = {
            'first_name': 'Jane',
            'last_name': 'Doe',
            'username': 'janedoe',
            'email': 'janedoe@example.org',
            'new_password': 'Password123',
            'password_confirmation': 'Password123',
        }

    def test_sign_up_url(self):
        self.assertEqual(self.url, '/inscription')

    def test_get_sign_up(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'pages/security/registration.html')
        form = response.context['form']
        self.assertTrue(isinstance(form, SignUpForm))
        self.assertFalse(form.is_bound)

    def test_get_sign_up_redirects_when_logged_in(self):
        self.client.force_login(make_user())
        response = self.client.get(self.url)
        self.assertRedirects(response, reverse('recipe_index'))

    def test_unsuccessful_sign_up(self):
        self.form_input['username'] = 'jd'
        before_count = User.objects.count()
        response = self.client.post(self.url, self.form_input)
        self.assertEqual(User.objects.count(), before_count)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'pages/security/registration.html')
        form = response.context['form']
        self.assertTrue(form.is_bound)
        self.assertFalse(self._is_logged_in())

    def test_succesful_sign_up(self):
        before_count = User.objects.count()
        response = self.client.post(self.url, self.form_input, follow=True)
        self.assertEqual(User.objects.count(), before_count + 1)
        self.assertRedirects(response, reverse('recipe_index'))
        self.assertTemplateUsed(response, 'pages/recipe/index.html')
        user = User.objects.get(email='janedoe@example.org')
        self.assertEqual(user.first_name, 'Jane')
        self.assertEqual(user.last_name, 'Doe')
        self.assertTrue(user.check_password('Password123'))
        self.assertTrue(self._is_logged_in())
        messages_list = list(response.context['messages'])
        self.assertEqual(str(messages_list[0]), 'Votre compte a bien été créé.')


class LogOutViewTestCase(TestCase, LogInTester):
    def setUp(self):
        self.url = reverse('log_out')
        self.user = make_user()

    def test_log_out_url(self):
        self.assertEqual(self.url, '/deconnexion')

    def test_get_log_out(self):
        self.client.force_login(self.user)
        self.assertTrue(self._is_logged_in())
        response = self.client.get(self.url, follow=True)
        self.assertRedirects(response, reverse('home'))
        self.assertTemplateUsed(response, 'pages/home.html')
        self.assertFalse(self._is_logged_in())

    def test_log_out_when_anonymous(self):
        response = self.client.get(self.url)
        self.assertRedirects(response, reverse('home'))
