from rest_framework import serializers
from recipes.models import Ingredient, Recipe


class IngredientSerializer(serializers.ModelSerializer):
    """Serializer for an ingredient listed on a recipe."""

    class Meta:
        model = Ingredient
        fields = ["id", "name", "price"]


class RecipeSerializer(serializers.ModelSerializer):
    """Read-only serializer for Recipe with its owner pseudo and mean mark."""
    user = serializers.CharField(source="user.username", read_only=True)
    average = serializers.FloatField(read_only=True)
    ingredients = IngredientSerializer(many=True, read_only=True)

    class Meta:
        model = Recipe
        fields = [
            "id",
            "name",
            "time",
            "nb_people",
            "difficulty",
            "description",
            "price",
            "is_public",
            "user",
            "ingredients",
            "average",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
