from django.shortcuts import render, redirect
from django.urls import reverse
from django.contrib.auth import login
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.utils.decorators import method_decorator
from django.views.decorators.cache import never_cache
from django.contrib import messages
from recipes.forms.log_in_form import LogInForm
from recipes.views.decorators import LoginProhibitedMixin


@method_decorator(never_cache, name="dispatch")
class LogInView(LoginProhibitedMixin, View):
    """Display and process the login form for unauthenticated users."""

    redirect_when_logged_in_url = 'recipe_index'

    def dispatch(self, request, *args, **kwargs):
        """Capture ?next param before handling request."""
        self.next = request.POST.get("next") or request.GET.get("next") or None
        return super().dispatch(request, *args, **kwargs)

    def get(self, request):
        """Render the login form."""
        form = LogInForm()
        return render(request, "pages/security/login.html", {"form": form, "next": self.next})

    def post(self, request):
        """Process login form submission."""
        form = LogInForm(request.POST)
        user = form.get_user()
        if user:
            return self._login_success(request, user)
        messages.add_message(request, messages.ERROR, self._error_message())
        return render(request, "pages/security/login.html", {"form": form, "next": self.next})

    def _login_success(self, request, user):
        login(request, user)
        messages.add_message(request, messages.SUCCESS, "Vous êtes connecté.")
        next_url = self.next
        if not next_url or not url_has_allowed_host_and_scheme(
            next_url, allowed_hosts={request.get_host()}
        ):
            next_url = reverse("recipe_index")
        return redirect(next_url)

    def _error_message(self):
        return "Identifiants invalides, vérifiez votre email et votre mot de passe."
