"""Account self-service views: profile edit and password change."""

from django.contrib import messages
from django.contrib.auth import update_session_auth_hash
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from recipes.exceptions import CredentialMismatch
from recipes.forms import PasswordForm, UserForm
from recipes.models import User
from recipes.services import AccountService
from recipes.services import access
from recipes.views.decorators import granted

account_service = AccountService()


@require_http_methods(["GET", "POST"])
@granted(access.can_edit_user, model=User)
def user_edit(request, chosen_user):
    """Edit the current user's profile once their password is confirmed."""
    form = UserForm(request.POST or None, instance=chosen_user)
    if request.method == "POST" and form.is_valid():
        try:
            account_service.update_profile(
                chosen_user, form, form.cleaned_data["plain_password"]
            )
        except CredentialMismatch as error:
            messages.warning(request, error.message)
        else:
            messages.success(request, "Les informations de votre compte ont bien été modifiées.")
            return redirect("recipe_index")

    return render(request, "pages/user/edit.html", {"form": form})


@require_http_methods(["GET", "POST"])
@granted(access.can_edit_user, model=User)
def user_edit_password(request, chosen_user):
    """Change the current user's password after checking the current one."""
    form = PasswordForm(data=request.POST or None)
    if request.method == "POST" and form.is_valid():
        try:
            account_service.change_password(
                chosen_user,
                form.cleaned_data["plain_password"],
                form.cleaned_data["new_password"],
            )
        except CredentialMismatch as error:
            messages.warning(request, error.message)
        else:
            update_session_auth_hash(request, chosen_user)
            messages.success(request, "Le mot de passe a été modifié.")
            return redirect("recipe_index")

    return render(request, "pages/user/edit_password.html", {"form": form})
