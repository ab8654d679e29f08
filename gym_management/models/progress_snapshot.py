# models/progress_snapshot.py
import time
from datetime import datetime

from gym_management.extensions import db
from gym_management.utils.metrics import completion_percentage


def _now_ms():
    return int(time.time() * 1000)


class ProgressSnapshot(db.Model):
    """Historical record of a member's completion counts.

    Not authoritative: live figures always come from the workouts table.
    """

    __tablename__ = "trainee_progress"

    id = db.Column(db.Integer, primary_key=True)
    trainee_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    completed_workouts = db.Column(db.Integer, nullable=False, default=0)
    total_workouts = db.Column(db.Integer, nullable=False, default=0)
    last_updated = db.Column(db.BigInteger, nullable=False, default=_now_ms)  # epoch millis

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationship
    trainee = db.relationship("User", back_populates="progress_snapshots")

    def touch(self):
        self.last_updated = _now_ms()

    @property
    def progress_percentage(self):
        return completion_percentage(self.completed_workouts, self.total_workouts)
