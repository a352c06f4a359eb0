import logging

from django.views.defaults import permission_denied as default_permission_denied

logger = logging.getLogger(__name__)


def permission_denied(request, exception=None, template_name="403.html"):
    """
    Render Django's default 403 page and log who was refused what.
    """
    logger.warning(
        "Forbidden: path=%s method=%s user=%s",
        request.path,
        request.method,
        getattr(getattr(request, "user", None), "pk", None),
    )
    return default_permission_denied(request, exception, template_name=template_name)
