from marshmallow import EXCLUDE, fields, validate, validates_schema, ValidationError

from gym_management.extensions import ma


class MemberProgressSchema(ma.Schema):
    user_id = fields.Integer(data_key="userId")
    name = fields.String()
    email = fields.String()
    total_workouts = fields.Integer(data_key="totalWorkouts")
    completed_workouts = fields.Integer(data_key="completedWorkouts")
    progress_percentage = fields.Integer(data_key="progressPercentage")


class ProgressSnapshotSchema(ma.Schema):
    id = fields.Integer()
    trainee_id = fields.Integer(data_key="traineeId")
    completed_workouts = fields.Integer(data_key="completedWorkouts")
    total_workouts = fields.Integer(data_key="totalWorkouts")
    progress_percentage = fields.Integer(data_key="progressPercentage")
    last_updated = fields.Integer(data_key="lastUpdated")
    created_at = fields.DateTime(data_key="createdAt")


class ProgressSnapshotInputSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    trainee_id = fields.Integer(required=True, strict=True, data_key="traineeId")
    completed_workouts = fields.Integer(
        required=True, strict=True, data_key="completedWorkouts", validate=validate.Range(min=0)
    )
    total_workouts = fields.Integer(
        required=True, strict=True, data_key="totalWorkouts", validate=validate.Range(min=0)
    )

    @validates_schema
    def completed_within_total(self, data, **kwargs):
        completed = data.get("completed_workouts")
        total = data.get("total_workouts")
        if completed is not None and total is not None and completed > total:
            raise ValidationError("completedWorkouts cannot exceed totalWorkouts", "completedWorkouts")


member_progress_schema = MemberProgressSchema()
members_progress_schema = MemberProgressSchema(many=True)
snapshot_schema = ProgressSnapshotSchema()
snapshots_schema = ProgressSnapshotSchema(many=True)
snapshot_input_schema = ProgressSnapshotInputSchema()
