from flask import Blueprint, current_app, jsonify, request

from gym_management.extensions import limiter
from gym_management.schemas.users import auth_response_schema, login_schema, register_schema
from gym_management.services import auth as auth_service

auth_bp = Blueprint("auth", __name__)


def _auth_limit():
    return current_app.config["AUTH_RATE_LIMIT"]


def _auth_response(token, user, status=200):
    return jsonify(auth_response_schema.dump({"access_token": token, "user": user})), status


@auth_bp.route("/register", methods=["POST"])
@limiter.limit(_auth_limit)
def register():
    data = register_schema.load(request.get_json(silent=True) or {})
    token, user = auth_service.register(data)
    return _auth_response(token, user, 201)


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(_auth_limit)
def login():
    data = login_schema.load(request.get_json(silent=True) or {})
    token, user = auth_service.authenticate(data["email"], data["password"])
    return _auth_response(token, user)
