import logging
from functools import wraps

from django.contrib.auth.decorators import login_required
from django.core.exceptions import ImproperlyConfigured, PermissionDenied
from django.shortcuts import get_object_or_404, redirect

logger = logging.getLogger(__name__)


def granted(predicate, model=None, url_kwarg="id"):
    """
    Guard a view with an authorization predicate.

    Anonymous users are sent to the login page. When ``model`` is given, the
    target entity is resolved from ``url_kwarg`` first (404 when missing) and
    passed to both ``predicate(actor, entity)`` and the view in place of the
    raw id. A false predicate raises PermissionDenied (403) before the view
    body runs.
    """
    def decorator(view_function):
        @wraps(view_function)
        @login_required
        def modified_view_function(request, *args, **kwargs):
            actor = request.user
            if model is None:
                allowed = predicate(actor)
            else:
                target = get_object_or_404(model, pk=kwargs.pop(url_kwarg))
                allowed = predicate(actor, target)
                args = (target, *args)
            if not allowed:
                logger.warning(
                    "Access denied: user=%s view=%s path=%s",
                    actor.pk, view_function.__name__, request.path,
                )
                raise PermissionDenied
            return view_function(request, *args, **kwargs)
        return modified_view_function
    return decorator


class LoginProhibitedMixin:
    """Send already authenticated users elsewhere instead of showing an anonymous-only page.

    Set ``redirect_when_logged_in_url`` (a path or URL name) or override
    ``get_redirect_when_logged_in_url()``.
    """

    redirect_when_logged_in_url = None

    def dispatch(self, *args, **kwargs):
        if self.request.user.is_authenticated:
            return self.handle_already_logged_in(*args, **kwargs)
        return super().dispatch(*args, **kwargs)

    def handle_already_logged_in(self, *args, **kwargs):
        return redirect(self.get_redirect_when_logged_in_url())

    def get_redirect_when_logged_in_url(self):
        """Return the redirect target, or raise ImproperlyConfigured when none is set."""
        if self.redirect_when_logged_in_url is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} needs 'redirect_when_logged_in_url' "
                "or an override of 'get_redirect_when_logged_in_url()'."
            )
        return self.redirect_when_logged_in_url
