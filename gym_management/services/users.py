import logging

from sqlalchemy.exc import IntegrityError

from gym_management.errors import Conflict, DuplicateEmail, Forbidden, InvalidRole, UserNotFound
from gym_management.extensions import db
from gym_management.models import Role, User, Workout
from gym_management.services import commit

logger = logging.getLogger(__name__)


def get_user(user_id) -> User:
    user = db.session.get(User, user_id)
    if not user:
        raise UserNotFound(f"User with ID {user_id} not found")
    return user


def find_by_email(email):
    return User.query.filter_by(email=email.strip().lower()).first()


def list_users():
    return User.query.order_by(User.id).all()


def list_members():
    return User.query.filter_by(role=Role.MEMBER).order_by(User.id).all()


def create_user(name, email, password, role=Role.MEMBER, age=None, height=None, weight=None):
    """Create a user; bmi is derived before the row is written."""
    email = email.strip().lower()
    if find_by_email(email):
        raise DuplicateEmail()

    user = User(name=name, email=email, role=role, age=age, height=height, weight=weight)
    user.set_password(password)
    user.recompute_bmi()

    db.session.add(user)
    try:
        commit()
    except IntegrityError:
        # lost a race with a concurrent registration
        raise DuplicateEmail() from None

    logger.info("Created %s user %s", role.value, user.id)
    return user


def update_user(user, changes, acting_user):
    """Apply a partial profile update loaded by UserUpdateSchema."""
    if "role" in changes and changes["role"] is not user.role:
        if not acting_user.is_admin:
            raise Forbidden("Only admins can change roles")
        if changes["role"] is Role.ADMIN and user.workouts.count():
            raise InvalidRole("User has assigned workouts and cannot become an admin")
        if changes["role"] is Role.ADMIN and user.event_registrations.count():
            raise InvalidRole("User is registered for events and cannot become an admin")
        if changes["role"] is Role.ADMIN and user.progress_snapshots.count():
            raise InvalidRole("User has progress records and cannot become an admin")
        if changes["role"] is Role.MEMBER and user.events.count():
            raise InvalidRole("User has created events and cannot become a member")

    if "email" in changes and changes["email"] != user.email:
        if find_by_email(changes["email"]):
            raise DuplicateEmail()

    password = changes.pop("password", None)
    if password:
        user.set_password(password)

    for field, value in changes.items():
        setattr(user, field, value)

    if "height" in changes or "weight" in changes:
        user.recompute_bmi()

    try:
        commit()
    except IntegrityError:
        raise DuplicateEmail() from None

    logger.info("Updated user %s (%s)", user.id, ", ".join(sorted(changes)) or "password")
    return user


def delete_user(user_id, acting_user):
    """Hard delete.

    Workouts, event registrations and progress snapshots go with the user.
    An admin who still authored events cannot be removed.
    """
    user = get_user(user_id)
    if user.id == acting_user.id:
        raise Conflict("You cannot delete your own account")
    if user.events.count():
        raise Conflict("User has created events; reassign or delete them first")

    workout_count = Workout.query.filter_by(user_id=user.id).count()
    db.session.delete(user)
    commit()
    logger.info("Deleted user %s and %d workouts", user_id, workout_count)
