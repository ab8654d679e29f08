from marshmallow import EXCLUDE, fields, validate, post_load

from gym_management.extensions import ma
from gym_management.schemas import not_blank


class EventSchema(ma.Schema):
    id = fields.Integer()
    title = fields.String()
    date = fields.String()
    time = fields.String()
    location = fields.String()
    image_uri = fields.String(data_key="imageUri", allow_none=True)
    created_by_id = fields.Integer(data_key="createdBy")
    registered_count = fields.Integer(data_key="registeredCount")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")


class EventInputSchema(ma.Schema):
    """Body of POST /events; loaded with partial=True for PATCH."""

    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=[not_blank, validate.Length(max=150)])
    date = fields.Date(required=True)
    time = fields.Time(required=True)
    location = fields.String(required=True, validate=[not_blank, validate.Length(max=100)])
    image_uri = fields.String(data_key="imageUri", allow_none=True, validate=validate.Length(max=255))

    @post_load
    def to_storage_format(self, data, **kwargs):
        for field in ("title", "location"):
            if field in data:
                data[field] = data[field].strip()
        if "date" in data:
            data["date"] = data["date"].isoformat()
        if "time" in data:
            data["time"] = data["time"].strftime("%H:%M")
        return data


class EventRegistrationSchema(ma.Schema):
    event_id = fields.Integer(data_key="eventId")
    user_id = fields.Integer(data_key="memberId")
    registration_date = fields.DateTime(data_key="registrationDate")


event_schema = EventSchema()
events_schema = EventSchema(many=True)
event_input_schema = EventInputSchema()
event_registration_schema = EventRegistrationSchema()
