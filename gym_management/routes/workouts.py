from flask import Blueprint, jsonify, request

from gym_management.models import Role
from gym_management.schemas.progress import members_progress_schema
from gym_management.schemas.workouts import (
    workout_input_schema, workout_schema, workout_stats_schema, workouts_schema,
)
from gym_management.services import progress as progress_service
from gym_management.services import workouts as workout_service
from gym_management.utils.decorators import ensure_self_or_admin, login_required, roles_required

workouts_bp = Blueprint("workouts", __name__)


# =========================================================
# Admin management
# =========================================================

@workouts_bp.route("", methods=["POST"])
@roles_required(Role.ADMIN)
def create_workout(current_user):
    data = workout_input_schema.load(request.get_json(silent=True) or {})
    workout = workout_service.create_workout(data)
    return jsonify(workout_schema.dump(workout)), 201


@workouts_bp.route("", methods=["GET"])
@roles_required(Role.ADMIN)
def list_workouts(current_user):
    return jsonify(workouts_schema.dump(workout_service.list_workouts()))


@workouts_bp.route("/<int:workout_id>", methods=["PATCH"])
@roles_required(Role.ADMIN)
def update_workout(workout_id, current_user):
    changes = workout_input_schema.load(request.get_json(silent=True) or {}, partial=True)
    workout = workout_service.update_workout(workout_id, changes)
    return jsonify(workout_schema.dump(workout))


@workouts_bp.route("/<int:workout_id>", methods=["DELETE"])
@roles_required(Role.ADMIN)
def delete_workout(workout_id, current_user):
    workout_service.delete_workout(workout_id)
    return jsonify({"msg": "Workout deleted successfully"}), 200


@workouts_bp.route("/users/all-progress", methods=["GET"])
@roles_required(Role.ADMIN)
def all_users_progress(current_user):
    return jsonify(members_progress_schema.dump(progress_service.all_members_progress()))


# =========================================================
# Member views (admins may act on a member's behalf)
# =========================================================

@workouts_bp.route("/my-workout", methods=["GET"])
@login_required
def my_workouts(current_user):
    return jsonify(workouts_schema.dump(workout_service.list_user_workouts(current_user.id)))


@workouts_bp.route("/user/<int:user_id>", methods=["GET"])
@login_required
def user_workouts(user_id, current_user):
    ensure_self_or_admin(current_user, user_id, "You can only view your own workouts")
    workout_service.require_member(user_id)
    return jsonify(workouts_schema.dump(workout_service.list_user_workouts(user_id)))


@workouts_bp.route("/<int:workout_id>", methods=["GET"])
@login_required
def get_workout(workout_id, current_user):
    workout = workout_service.get_workout(workout_id)
    ensure_self_or_admin(current_user, workout.user_id, "You can only view your own workouts")
    return jsonify(workout_schema.dump(workout))


@workouts_bp.route("/<int:workout_id>/toggle-completion", methods=["PATCH"])
@login_required
def toggle_completion(workout_id, current_user):
    workout = workout_service.get_workout(workout_id)
    ensure_self_or_admin(current_user, workout.user_id, "You can only toggle your own workouts")
    workout = workout_service.toggle_completion(workout_id)
    return jsonify(workout_schema.dump(workout))


@workouts_bp.route("/stats/<int:user_id>", methods=["GET"])
@login_required
def workout_stats(user_id, current_user):
    ensure_self_or_admin(current_user, user_id, "You can only view your own stats")
    workout_service.require_member(user_id)
    return jsonify(workout_stats_schema.dump(workout_service.workout_stats(user_id)))
