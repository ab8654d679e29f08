from datetime import datetime

from gym_management.extensions import db


class Workout(db.Model):
    __tablename__ = "workouts"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    event_title = db.Column(db.String(150), nullable=False)
    sets = db.Column(db.Integer, nullable=False, default=0)
    reps_or_secs = db.Column(db.Integer, nullable=False, default=0)
    rest_time = db.Column(db.Integer, nullable=False, default=0)  # seconds
    image_uri = db.Column(db.String(255))
    is_completed = db.Column(db.Boolean, nullable=False, default=False)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = db.relationship("User", back_populates="workouts")

    __table_args__ = (
        db.CheckConstraint("sets >= 0", name="ck_workouts_sets"),
        db.CheckConstraint("reps_or_secs >= 0", name="ck_workouts_reps"),
        db.CheckConstraint("rest_time >= 0", name="ck_workouts_rest"),
        db.Index("idx_workouts_user_completed", "user_id", "is_completed"),
    )

    def __repr__(self):
        return f"<Workout {self.id} user={self.user_id} completed={self.is_completed}>"
