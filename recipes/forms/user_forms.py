"""Forms for user profile editing, signup, and password changes."""

from django import forms
from django.core.validators import RegexValidator
from recipes.models import User
from recipes.services.accounts import AccountService


class UserForm(forms.ModelForm):
    """Form to update profile information; asks for the current password to confirm."""
    plain_password = forms.CharField(
        label='Mot de passe',
        widget=forms.PasswordInput(),
        help_text='Saisissez votre mot de passe actuel pour confirmer.',
    )

    class Meta:
        """Model/field config for user profile form."""
        model = User
        fields = ['first_name', 'last_name', 'username', 'email']
        labels = {
            'first_name': 'Prénom',
            'last_name': 'Nom',
            'username': 'Pseudo',
            'email': 'Adresse email',
        }


class NewPasswordMixin(forms.Form):
    """Mixin providing password and password confirmation fields."""
    new_password = forms.CharField(
        label='Nouveau mot de passe',
        widget=forms.PasswordInput(),
        validators=[
            RegexValidator(
                regex=r'^(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9]).*$',
                message=(
                    'Password must contain an uppercase character, '
                    'a lowercase character, and a number'
                )
            )
        ]
    )
    password_confirmation = forms.CharField(label='Confirmation du mot de passe', widget=forms.PasswordInput())

    def clean(self):
        """Validate new password and confirmation match."""
        super().clean()
        new_password = self.cleaned_data.get('new_password')
        password_confirmation = self.cleaned_data.get('password_confirmation')
        if new_password != password_confirmation:
            self.add_error(
                'password_confirmation',
                'Confirmation does not match password.'
            )
        return self.cleaned_data


class PasswordForm(NewPasswordMixin):
    """Form carrying the current password and the new one.

    The current password is checked against the stored hash by
    AccountService, not here, so a mismatch surfaces as a warning message
    rather than a field error.
    """
    plain_password = forms.CharField(label='Mot de passe actuel', widget=forms.PasswordInput())

    field_order = ['plain_password', 'new_password', 'password_confirmation']


class SignUpForm(NewPasswordMixin, forms.ModelForm):
    """Form to register a new user."""
    class Meta:
        """Model/field config for signup form."""
        model = User
        fields = ['first_name', 'last_name', 'username', 'email']
        labels = UserForm.Meta.labels

    def save(self, account_service=None):
        """Create and return a new User with a hashed password."""
        service = account_service or AccountService()
        return service.register(
            username=self.cleaned_data.get('username'),
            email=self.cleaned_data.get('email'),
            first_name=self.cleaned_data.get('first_name'),
            last_name=self.cleaned_data.get('last_name'),
            password=self.cleaned_data.get('new_password'),
        )
