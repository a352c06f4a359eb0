from django.contrib import messages
from django.contrib.auth import logout
from django.shortcuts import redirect


def log_out(request):
    """End the session and go back to the home page."""
    was_logged_in = request.user.is_authenticated
    logout(request)
    if was_logged_in:
        messages.info(request, "Vous êtes déconnecté.")
    return redirect("home")
