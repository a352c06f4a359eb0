"""Authorization predicates.

Each predicate is a pure function of the acting user and the target entity.
Views evaluate them through ``recipes.views.decorators.granted`` before any
handler logic runs; they never touch the database beyond the attributes of
the objects passed in.
"""

ROLE_USER = "ROLE_USER"


def has_role(actor, role=ROLE_USER):
    """Return True when the actor is an active, authenticated account holding ``role``."""
    if actor is None or not getattr(actor, "is_authenticated", False):
        return False
    if not getattr(actor, "is_active", True):
        return False
    get_roles = getattr(actor, "get_roles", None)
    roles = get_roles() if callable(get_roles) else [ROLE_USER]
    return role in roles


def is_owner(actor, entity):
    """Return True when ``entity.user`` is the actor."""
    if actor is None or not getattr(actor, "is_authenticated", False):
        return False
    owner_id = getattr(entity, "user_id", None)
    if owner_id is None:
        owner = getattr(entity, "user", None)
        owner_id = getattr(owner, "pk", None)
    return owner_id is not None and owner_id == actor.pk


def can_list_own_recipes(actor):
    return has_role(actor)


def can_create_recipe(actor):
    return has_role(actor)


def can_view_recipe(actor, recipe):
    """Members may view public recipes and their own private ones."""
    return has_role(actor) and (recipe.is_public is True or is_owner(actor, recipe))


def can_mark_recipe(actor, recipe):
    """Marking is offered on the recipe page, so it follows the view rule."""
    return can_view_recipe(actor, recipe)


def can_edit_recipe(actor, recipe):
    return has_role(actor) and is_owner(actor, recipe)


def can_delete_recipe(actor, recipe):
    return has_role(actor) and is_owner(actor, recipe)


def can_manage_ingredients(actor):
    return has_role(actor)


def can_edit_ingredient(actor, ingredient):
    return has_role(actor) and is_owner(actor, ingredient)


def can_delete_ingredient(actor, ingredient):
    return has_role(actor) and is_owner(actor, ingredient)


def can_edit_user(actor, target_user):
    """Only the account holder may edit their profile or password."""
    return has_role(actor) and target_user is not None and target_user.pk == actor.pk
