from marshmallow import ValidationError


def not_blank(value):
    if not value.strip():
        raise ValidationError("Field may not be blank.")
