from .user import User
from .ingredient import Ingredient
from .recipe import Recipe
from .mark import Mark

__all__ = [
    "User",
    "Ingredient",
    "Recipe",
    "Mark",
]
