from django.contrib import messages
from django.contrib.auth import login as auth_login
from django.shortcuts import redirect, render
from django.urls import reverse_lazy
from django.views.generic.edit import FormView

from recipes.forms import SignUpForm
from recipes.views.decorators import LoginProhibitedMixin


class SignUpView(LoginProhibitedMixin, FormView):
    """
    Handles user registration via the custom SignUpForm.
    """

    template_name = "pages/security/registration.html"
    form_class = SignUpForm
    success_url = reverse_lazy("recipe_index")
    redirect_when_logged_in_url = reverse_lazy("recipe_index")

    def form_valid(self, form):
        user = form.save()
        auth_login(
            self.request,
            user,
            backend="django.contrib.auth.backends.ModelBackend",
        )
        messages.success(self.request, "Votre compte a bien été créé.")
        return redirect(self.get_success_url())

    def form_invalid(self, form):
        return render(self.request, self.template_name, {"form": form})
