from rest_framework import permissions

from recipes.services import access


class CanViewRecipe(permissions.BasePermission):
    """Allow reading a recipe when it is public or owned by the requester."""

    def has_object_permission(self, request, view, obj):
        if obj.is_public is True:
            return True
        return access.can_view_recipe(request.user, obj)
