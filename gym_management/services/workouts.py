import logging

from sqlalchemy import desc

from gym_management.errors import InvalidRole, NotFound
from gym_management.extensions import db
from gym_management.models import Workout
from gym_management.services import commit
from gym_management.services import users as user_service
from gym_management.utils.metrics import completion_percentage

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (desc(Workout.created_at), desc(Workout.id))


def require_member(user_id):
    """Workouts can only belong to members."""
    user = user_service.get_user(user_id)
    if not user.is_member:
        raise InvalidRole("Workouts can only be assigned to members")
    return user


def get_workout(workout_id) -> Workout:
    workout = db.session.get(Workout, workout_id)
    if not workout:
        raise NotFound(f"Workout with ID {workout_id} not found")
    return workout


def list_workouts():
    return Workout.query.order_by(*_NEWEST_FIRST).all()


def list_user_workouts(user_id):
    return Workout.query.filter_by(user_id=user_id).order_by(*_NEWEST_FIRST).all()


def create_workout(data):
    """``data`` as loaded by WorkoutInputSchema; ``user_id`` is the target member."""
    owner = require_member(data["user_id"])

    workout = Workout(
        user=owner,
        event_title=data["event_title"],
        sets=data["sets"],
        reps_or_secs=data["reps_or_secs"],
        rest_time=data["rest_time"],
        image_uri=data.get("image_uri"),
        is_completed=data.get("is_completed", False),
    )
    db.session.add(workout)
    commit()
    logger.info("Created workout %s for user %s", workout.id, owner.id)
    return workout


def update_workout(workout_id, changes):
    """Apply only the provided fields; ``user_id`` reassigns the owner."""
    workout = get_workout(workout_id)

    if "user_id" in changes:
        workout.user = require_member(changes.pop("user_id"))

    for field, value in changes.items():
        setattr(workout, field, value)

    commit()
    logger.info("Updated workout %s", workout.id)
    return workout


def toggle_completion(workout_id):
    workout = get_workout(workout_id)
    workout.is_completed = not workout.is_completed
    commit()
    logger.info("Workout %s completed=%s", workout.id, workout.is_completed)
    return workout


def delete_workout(workout_id):
    workout = get_workout(workout_id)
    db.session.delete(workout)
    commit()
    logger.info("Deleted workout %s", workout_id)


def workout_stats(user_id):
    total = Workout.query.filter_by(user_id=user_id).count()
    completed = Workout.query.filter_by(user_id=user_id, is_completed=True).count()
    return {
        "total_workouts": total,
        "completed_workouts": completed,
        "completion_rate": completion_percentage(completed, total),
    }
