from marshmallow import EXCLUDE, fields, validate

from gym_management.extensions import ma

_count = dict(strict=True, validate=validate.Range(min=0))


class WorkoutSchema(ma.Schema):
    id = fields.Integer()
    event_title = fields.String(data_key="eventTitle")
    user_id = fields.Integer(data_key="userId")
    sets = fields.Integer()
    reps_or_secs = fields.Integer(data_key="repsOrSecs")
    rest_time = fields.Integer(data_key="restTime")
    image_uri = fields.String(data_key="imageUri", allow_none=True)
    is_completed = fields.Boolean(data_key="isCompleted")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")


class WorkoutInputSchema(ma.Schema):
    """Body of POST /workouts; loaded with partial=True for PATCH."""

    class Meta:
        unknown = EXCLUDE

    event_title = fields.String(required=True, data_key="eventTitle", validate=validate.Length(min=1, max=150))
    user_id = fields.Integer(required=True, strict=True, data_key="userId")
    sets = fields.Integer(required=True, **_count)
    reps_or_secs = fields.Integer(required=True, data_key="repsOrSecs", **_count)
    rest_time = fields.Integer(required=True, data_key="restTime", **_count)
    image_uri = fields.String(data_key="imageUri", allow_none=True, validate=validate.Length(max=255))
    is_completed = fields.Boolean(data_key="isCompleted")


class WorkoutStatsSchema(ma.Schema):
    total_workouts = fields.Integer(data_key="totalWorkouts")
    completed_workouts = fields.Integer(data_key="completedWorkouts")
    completion_rate = fields.Integer(data_key="completionRate")


workout_schema = WorkoutSchema()
workouts_schema = WorkoutSchema(many=True)
workout_input_schema = WorkoutInputSchema()
workout_stats_schema = WorkoutStatsSchema()
