from .home_view import *
from .log_in_view import *
from .log_out_view import *
from .sign_up_view import *
from .recipe_views import *
from .ingredient_views import *
from .user_views import *
from .api_views import *
from .error_views import *
