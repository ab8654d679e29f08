from flask import Blueprint, jsonify, request

from gym_management.errors import Forbidden, UserNotFound
from gym_management.models import Role
from gym_management.schemas.users import user_schema, user_update_schema, users_schema
from gym_management.services import users as user_service
from gym_management.utils.decorators import ensure_self_or_admin, login_required, roles_required

users_bp = Blueprint("users", __name__)


@users_bp.route("", methods=["GET"])
@roles_required(Role.ADMIN)
def list_users(current_user):
    return jsonify(users_schema.dump(user_service.list_users()))


@users_bp.route("/<int:user_id>", methods=["GET"])
@login_required
def get_user(user_id, current_user):
    ensure_self_or_admin(current_user, user_id, "You can only view your own profile")
    return jsonify(user_schema.dump(user_service.get_user(user_id)))


@users_bp.route("/<int:user_id>", methods=["PATCH"])
@login_required
def update_user(user_id, current_user):
    ensure_self_or_admin(current_user, user_id, "You can only update your own profile")
    changes = user_update_schema.load(request.get_json(silent=True) or {})
    user = user_service.update_user(user_service.get_user(user_id), changes, current_user)
    return jsonify(user_schema.dump(user))


@users_bp.route("/<int:user_id>", methods=["DELETE"])
@roles_required(Role.ADMIN)
def delete_user(user_id, current_user):
    user_service.delete_user(user_id, current_user)
    return jsonify({"msg": "User deleted successfully"}), 200


@users_bp.route("/email/<string:email>", methods=["GET"])
@login_required
def get_user_by_email(email, current_user):
    if not current_user.is_admin and email.strip().lower() != current_user.email:
        raise Forbidden("You can only look up your own email")
    user = user_service.find_by_email(email)
    if not user:
        raise UserNotFound()
    return jsonify(user_schema.dump(user))
