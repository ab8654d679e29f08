from flask import current_app
from marshmallow import EXCLUDE, fields, validate, validates, post_load, ValidationError

from gym_management.extensions import ma
from gym_management.models import Role
from gym_management.schemas import not_blank

PASSWORD_PATTERN = r"^(?=.*[A-Za-z])(?=.*\d).+$"
PASSWORD_MESSAGE = "Password must contain at least one letter and one number"


class RoleField(fields.Field):
    """Role enum on the wire as its lowercase value."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return value.value

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return Role.parse(value)
        except ValueError as e:
            raise ValidationError(str(e)) from e


def _check_password(value):
    min_length = current_app.config.get("PASSWORD_MIN_LENGTH", 6)
    if len(value) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters")


class UserSchema(ma.Schema):
    id = fields.Integer()
    name = fields.String()
    email = fields.String()
    role = RoleField()
    age = fields.Integer(allow_none=True)
    height = fields.Float(allow_none=True)
    weight = fields.Float(allow_none=True)
    bmi = fields.Float(allow_none=True)
    join_date = fields.String(data_key="joinDate")


class RegisterSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=[not_blank, validate.Length(max=150)])
    email = fields.Email(required=True)
    password = fields.String(
        required=True, load_only=True, validate=validate.Regexp(PASSWORD_PATTERN, error=PASSWORD_MESSAGE)
    )
    confirm_password = fields.String(required=True, load_only=True, data_key="confirmPassword")
    age = fields.Integer(load_default=None, allow_none=True, validate=validate.Range(min=0))
    height = fields.Float(load_default=None, allow_none=True, validate=validate.Range(min=0))
    weight = fields.Float(load_default=None, allow_none=True, validate=validate.Range(min=0))

    @validates("password")
    def validate_password(self, value, **kwargs):
        _check_password(value)

    @post_load
    def normalise(self, data, **kwargs):
        data["email"] = data["email"].strip().lower()
        data["name"] = data["name"].strip()
        return data


class LoginSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))

    @post_load
    def normalise(self, data, **kwargs):
        data["email"] = data["email"].strip().lower()
        return data


class UserUpdateSchema(ma.Schema):
    """Partial profile update; every field is optional."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(validate=[not_blank, validate.Length(max=150)])
    email = fields.Email()
    password = fields.String(load_only=True, validate=validate.Regexp(PASSWORD_PATTERN, error=PASSWORD_MESSAGE))
    age = fields.Integer(allow_none=True, validate=validate.Range(min=0))
    height = fields.Float(allow_none=True, validate=validate.Range(min=0))
    weight = fields.Float(allow_none=True, validate=validate.Range(min=0))
    role = RoleField()
    join_date = fields.String(data_key="joinDate", validate=validate.Length(max=10))

    @validates("password")
    def validate_password(self, value, **kwargs):
        _check_password(value)

    @post_load
    def normalise(self, data, **kwargs):
        if "email" in data:
            data["email"] = data["email"].strip().lower()
        if "name" in data:
            data["name"] = data["name"].strip()
        return data


class AuthResponseSchema(ma.Schema):
    access_token = fields.String()
    user = fields.Nested(UserSchema)


user_schema = UserSchema()
users_schema = UserSchema(many=True)
register_schema = RegisterSchema()
login_schema = LoginSchema()
user_update_schema = UserUpdateSchema()
auth_response_schema = AuthResponseSchema()
