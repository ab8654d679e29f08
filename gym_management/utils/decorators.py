# gym_management/utils/decorators.py
from functools import wraps

from flask_jwt_extended import get_current_user, jwt_required

from gym_management.errors import Forbidden
from gym_management.models import Role


def roles_required(*roles):
    """
    Require a valid bearer token whose user holds one of ``roles``.

    The authenticated user is passed to the view as ``current_user``.
    Missing or bad tokens are answered with 401 by the JWT callbacks,
    a wrong role with 403.
    """
    allowed = {Role.parse(role) for role in roles} or set(Role)

    def decorator(view_func):
        @wraps(view_func)
        @jwt_required()
        def wrapper(*args, **kwargs):
            user = get_current_user()
            if user.role not in allowed:
                raise Forbidden("Insufficient role for this action")
            kwargs["current_user"] = user
            return view_func(*args, **kwargs)
        return wrapper
    return decorator


def login_required(view_func):
    """Any authenticated user, regardless of role."""
    return roles_required()(view_func)


def ensure_self_or_admin(user, target_user_id, message="You can only access your own records"):
    if user.is_admin or user.id == target_user_id:
        return
    raise Forbidden(message)
