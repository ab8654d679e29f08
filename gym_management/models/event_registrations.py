from datetime import datetime

from gym_management.extensions import db


class EventRegistration(db.Model):
    __tablename__ = "event_registrations"

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)

    registration_date = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    event = db.relationship("Event", back_populates="registrations")
    user = db.relationship("User", back_populates="event_registrations")

    __table_args__ = (
        db.UniqueConstraint("event_id", "user_id", name="uq_event_registrations_event_user"),
    )
