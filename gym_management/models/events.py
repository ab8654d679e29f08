from datetime import datetime

from gym_management.extensions import db


# ================================
# Event Model
# ================================

class Event(db.Model):
    __tablename__ = "events"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(150), nullable=False)

    # Date and time are kept as the strings the client sends (YYYY-MM-DD, HH:MM)
    date = db.Column(db.String(10), nullable=False, index=True)
    time = db.Column(db.String(5), nullable=False)
    location = db.Column(db.String(100), nullable=False)

    image_uri = db.Column(db.String(255))

    created_by_id = db.Column("created_by", db.Integer, db.ForeignKey("users.id"), nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    created_by = db.relationship("User", foreign_keys=[created_by_id], back_populates="events")
    registrations = db.relationship(
        "EventRegistration", back_populates="event", lazy="dynamic", cascade="all, delete-orphan"
    )

    @property
    def registered_count(self):
        return self.registrations.count()
