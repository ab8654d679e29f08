from flask import Blueprint, jsonify, request

from gym_management.models import Role
from gym_management.schemas.progress import (
    member_progress_schema, members_progress_schema,
    snapshot_input_schema, snapshot_schema, snapshots_schema,
)
from gym_management.services import progress as progress_service
from gym_management.utils.decorators import ensure_self_or_admin, login_required, roles_required

progress_bp = Blueprint("progress", __name__)


# =========================================================
# Live progress (computed from workouts)
# =========================================================

@progress_bp.route("/members", methods=["GET"])
@roles_required(Role.ADMIN)
def all_members_progress(current_user):
    return jsonify(members_progress_schema.dump(progress_service.all_members_progress()))


@progress_bp.route("/members/<int:user_id>", methods=["GET"])
@login_required
def member_progress(user_id, current_user):
    ensure_self_or_admin(current_user, user_id, "You can only view your own progress")
    return jsonify(member_progress_schema.dump(progress_service.single_member_progress(user_id)))


# =========================================================
# Snapshots (trainee_progress)
# =========================================================

@progress_bp.route("", methods=["POST"])
@roles_required(Role.ADMIN)
def create_snapshot(current_user):
    data = snapshot_input_schema.load(request.get_json(silent=True) or {})
    return jsonify(snapshot_schema.dump(progress_service.create_snapshot(data))), 201


@progress_bp.route("/capture", methods=["POST"])
@roles_required(Role.ADMIN)
def capture_snapshots(current_user):
    return jsonify(snapshots_schema.dump(progress_service.capture_snapshots())), 201


@progress_bp.route("", methods=["GET"])
@roles_required(Role.ADMIN)
def list_snapshots(current_user):
    return jsonify(snapshots_schema.dump(progress_service.list_snapshots()))


@progress_bp.route("/<int:snapshot_id>", methods=["GET"])
@login_required
def get_snapshot(snapshot_id, current_user):
    snapshot = progress_service.get_snapshot(snapshot_id)
    ensure_self_or_admin(current_user, snapshot.trainee_id, "You can only view your own progress")
    return jsonify(snapshot_schema.dump(snapshot))


@progress_bp.route("/trainee/<int:trainee_id>", methods=["GET"])
@login_required
def trainee_snapshots(trainee_id, current_user):
    ensure_self_or_admin(current_user, trainee_id, "You can only view your own progress")
    return jsonify(snapshots_schema.dump(progress_service.latest_snapshots(trainee_id)))


@progress_bp.route("/<int:snapshot_id>", methods=["PATCH"])
@roles_required(Role.ADMIN)
def update_snapshot(snapshot_id, current_user):
    changes = snapshot_input_schema.load(request.get_json(silent=True) or {}, partial=True)
    return jsonify(snapshot_schema.dump(progress_service.update_snapshot(snapshot_id, changes)))


@progress_bp.route("/<int:snapshot_id>", methods=["DELETE"])
@roles_required(Role.ADMIN)
def delete_snapshot(snapshot_id, current_user):
    progress_service.delete_snapshot(snapshot_id)
    return jsonify({"msg": "Progress record deleted"}), 200
