"""Error taxonomy shared by services and routes.

Services raise these; the handlers registered in ``register_error_handlers``
turn them into ``{"msg": ..., "error": ...}`` JSON bodies.
"""
import logging

from flask import jsonify
from marshmallow import ValidationError as SchemaValidationError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.errors = errors

    @property
    def name(self):
        return type(self).__name__

    def to_dict(self):
        body = {"msg": self.message, "error": self.name}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid input"


class PasswordMismatch(ApiError):
    status_code = 400
    default_message = "Passwords do not match"


class InvalidRole(ApiError):
    status_code = 400
    default_message = "Target user has the wrong role for this operation"


class InvalidCredentials(ApiError):
    status_code = 401
    default_message = "Invalid credentials"


class Unauthenticated(ApiError):
    status_code = 401
    default_message = "Missing or invalid access token"


class Forbidden(ApiError):
    status_code = 403
    default_message = "You are not allowed to perform this action"


class NotFound(ApiError):
    status_code = 404
    default_message = "Resource not found"


class UserNotFound(NotFound):
    default_message = "User not found"


class DuplicateEmail(ApiError):
    status_code = 409
    default_message = "Email already registered"


class Conflict(ApiError):
    status_code = 409
    default_message = "Request conflicts with the current state"


def error_response(error):
    return jsonify(error.to_dict()), error.status_code


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error("%s: %s", error.name, error.message)
        return error_response(error)

    @app.errorhandler(SchemaValidationError)
    def handle_schema_error(error):
        return error_response(ValidationError(errors=error.normalized_messages()))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"msg": error.description, "error": error.name}), error.code
