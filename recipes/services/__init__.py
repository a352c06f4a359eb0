from .accounts import AccountService
from .ingredients import IngredientService
from .marks import MarkService
from .recipes import RecipeService

__all__ = [
    "AccountService",
    "IngredientService",
    "MarkService",
    "RecipeService",
]
