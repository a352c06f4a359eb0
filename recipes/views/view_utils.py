from django.conf import settings
from django.core.paginator import Paginator


def paginate(request, queryset, per_page=None):
    """Return the page of ``queryset`` named by ``?page=`` (first page when absent or invalid)."""
    paginator = Paginator(queryset, per_page or settings.RECIPES_PER_PAGE)
    return paginator.get_page(request.GET.get("page", 1))
