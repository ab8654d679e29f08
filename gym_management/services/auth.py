import logging

from flask_jwt_extended import create_access_token

from gym_management.errors import InvalidCredentials, PasswordMismatch
from gym_management.models import Role
from gym_management.services import users as user_service

logger = logging.getLogger(__name__)


def issue_token(user):
    """Bearer token carrying subject id, email and role."""
    return create_access_token(
        identity=str(user.id),
        additional_claims={"email": user.email, "role": user.role.value},
    )


def register(data):
    """Register a member from a payload loaded by RegisterSchema.

    Returns ``(access_token, user)``.
    """
    if data["password"] != data["confirm_password"]:
        raise PasswordMismatch()

    user = user_service.create_user(
        name=data["name"],
        email=data["email"],
        password=data["password"],
        role=Role.MEMBER,
        age=data.get("age"),
        height=data.get("height"),
        weight=data.get("weight"),
    )
    return issue_token(user), user


def authenticate(email, password):
    user = user_service.find_by_email(email)
    if not user:
        logger.warning("Login failed: unknown email %s", email)
        raise InvalidCredentials()

    if not user.check_password(password):
        logger.warning("Login failed: incorrect password for user %s", user.id)
        raise InvalidCredentials()

    logger.info("Login successful for user %s", user.id)
    return issue_token(user), user
