from .user_forms import UserForm, PasswordForm, SignUpForm, NewPasswordMixin
from .log_in_form import LogInForm
from .recipe_forms import RecipeForm
from .mark_form import MarkForm
from .ingredient_form import IngredientForm

__all__ = [
    "UserForm",
    "PasswordForm",
    "SignUpForm",
    "NewPasswordMixin",
    "LogInForm",
    "RecipeForm",
    "MarkForm",
    "IngredientForm",
]
