from flask import Blueprint, jsonify, request

from gym_management.models import Role
from gym_management.schemas.events import (
    event_input_schema, event_registration_schema, event_schema, events_schema,
)
from gym_management.services import events as event_service
from gym_management.utils.decorators import ensure_self_or_admin, login_required, roles_required

events_bp = Blueprint("events", __name__)


# ================================
# Event Management APIs
# ================================

@events_bp.route("", methods=["POST"])
@roles_required(Role.ADMIN)
def create_event(current_user):
    data = event_input_schema.load(request.get_json(silent=True) or {})
    event = event_service.create_event(data, current_user)
    return jsonify(event_schema.dump(event)), 201


@events_bp.route("/<int:event_id>", methods=["PATCH"])
@roles_required(Role.ADMIN)
def update_event(event_id, current_user):
    changes = event_input_schema.load(request.get_json(silent=True) or {}, partial=True)
    event = event_service.update_event(event_id, changes)
    return jsonify(event_schema.dump(event))


@events_bp.route("/<int:event_id>", methods=["DELETE"])
@roles_required(Role.ADMIN)
def delete_event(event_id, current_user):
    event_service.delete_event(event_id)
    return jsonify({"msg": "Event deleted successfully"}), 200


# ================================
# Read-only listing (all roles)
# ================================

@events_bp.route("", methods=["GET"])
@login_required
def list_events(current_user):
    return jsonify(events_schema.dump(event_service.list_events()))


@events_bp.route("/<int:event_id>", methods=["GET"])
@login_required
def get_event(event_id, current_user):
    return jsonify(event_schema.dump(event_service.get_event(event_id)))


# ================================
# Registrations
# ================================

@events_bp.route("/<int:event_id>/register", methods=["POST"])
@roles_required(Role.MEMBER)
def register_for_event(event_id, current_user):
    registration = event_service.register_member(event_id, current_user)
    return jsonify(event_registration_schema.dump(registration)), 201


@events_bp.route("/<int:event_id>/register", methods=["DELETE"])
@roles_required(Role.MEMBER)
def unregister_from_event(event_id, current_user):
    event_service.unregister_member(event_id, current_user)
    return jsonify({"msg": "Registration cancelled"}), 200


@events_bp.route("/user/<int:user_id>", methods=["GET"])
@login_required
def user_events(user_id, current_user):
    ensure_self_or_admin(current_user, user_id, "You can only view your own registrations")
    return jsonify(events_schema.dump(event_service.list_user_events(user_id)))
