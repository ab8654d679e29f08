import enum
from datetime import datetime, date

from werkzeug.security import generate_password_hash, check_password_hash

from gym_management.extensions import db
from gym_management.utils.metrics import calculate_bmi

USERS_TABLE = "users"


class Role(enum.Enum):
    ADMIN = "admin"
    MEMBER = "member"

    @classmethod
    def parse(cls, value):
        """Normalise a role coming from outside (JSON body, token claim)."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid role: {value!r}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid role: {value!r}") from None


class User(db.Model):
    __tablename__ = USERS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(150), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.Enum(Role, name="user_role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
        default=Role.MEMBER,
        index=True,
    )

    age = db.Column(db.Integer, nullable=True)
    height = db.Column(db.Float, nullable=True)  # cm
    weight = db.Column(db.Float, nullable=True)  # kg
    bmi = db.Column(db.Float, nullable=True)
    join_date = db.Column(db.String(10), default=lambda: date.today().isoformat())

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    workouts = db.relationship(
        "Workout", back_populates="user", lazy="dynamic", cascade="all, delete-orphan"
    )
    event_registrations = db.relationship(
        "EventRegistration", back_populates="user", lazy="dynamic", cascade="all, delete-orphan"
    )
    progress_snapshots = db.relationship(
        "ProgressSnapshot", back_populates="trainee", lazy="dynamic", cascade="all, delete-orphan"
    )
    events = db.relationship("Event", back_populates="created_by", lazy="dynamic")

    # Helpers
    def set_password(self, password: str):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def recompute_bmi(self):
        self.bmi = calculate_bmi(self.weight, self.height)
        return self.bmi

    # ------- helper properties -------
    @property
    def is_admin(self):
        return self.role is Role.ADMIN

    @property
    def is_member(self):
        return self.role is Role.MEMBER

    def __repr__(self):
        return f"<User {self.id} {self.email} {self.role.value}>"
