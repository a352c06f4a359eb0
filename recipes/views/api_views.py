from rest_framework import generics, filters, permissions

from recipes.permissions import CanViewRecipe
from recipes.repos.recipe_repo import RecipeRepo
from recipes.serializers import RecipeSerializer

recipe_repo = RecipeRepo()


class RecipeListApi(generics.ListAPIView):
    """List public recipes as JSON, paginated, with search and ordering."""
    serializer_class = RecipeSerializer
    permission_classes = [permissions.AllowAny]

    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['created_at', 'name']

    def get_queryset(self):
        return recipe_repo.list_public().prefetch_related("ingredients")


class RecipeDetailApi(generics.RetrieveAPIView):
    """Retrieve one recipe, visible when public or owned by the requester."""
    serializer_class = RecipeSerializer
    permission_classes = [CanViewRecipe]

    def get_queryset(self):
        return recipe_repo.base_queryset().prefetch_related("ingredients")
