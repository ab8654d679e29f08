"""
Pytest configuration and fixtures

Every test gets a fresh app on an in-memory SQLite database. Users are
created through the service layer; bearer headers are minted the same way
the login endpoint does it.
"""
import pytest

from gym_management import create_app
from gym_management.extensions import db
from gym_management.models import Role
from gym_management.services.auth import issue_token
from gym_management.services.users import create_user


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def auth_headers(user):
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture
def admin(app):
    return create_user(name="Gym Admin", email="admin@gym.test", password="admin123", role=Role.ADMIN)


@pytest.fixture
def member(app):
    return create_user(
        name="Member One", email="member@gym.test", password="member123",
        age=25, height=175, weight=70,
    )


@pytest.fixture
def other_member(app):
    return create_user(name="Member Two", email="other@gym.test", password="other123")


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def member_headers(member):
    return auth_headers(member)


@pytest.fixture
def other_headers(other_member):
    return auth_headers(other_member)


@pytest.fixture
def make_workout(client, admin_headers):
    """Create a workout through the API as the admin."""

    def _make(user, **overrides):
        body = {
            "eventTitle": "Squats",
            "userId": user.id,
            "sets": 3,
            "repsOrSecs": 10,
            "restTime": 60,
        }
        body.update(overrides)
        response = client.post("/workouts", json=body, headers=admin_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _make
