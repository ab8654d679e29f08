from gym_management.models import User

REGISTER_BODY = {
    "name": "New Member",
    "email": "New.Member@Gym.test",
    "password": "secret12",
    "confirmPassword": "secret12",
    "age": 30,
    "height": 180,
    "weight": 81,
}


class TestRegister:

    def test_register_returns_token_and_member(self, client):
        response = client.post("/auth/register", json=REGISTER_BODY)

        assert response.status_code == 201
        data = response.get_json()
        assert data["access_token"]
        assert data["user"]["email"] == "new.member@gym.test"
        assert data["user"]["role"] == "member"
        assert data["user"]["bmi"] == 25.0
        assert data["user"]["joinDate"]
        assert "password" not in data["user"]

    def test_register_without_body_metrics_leaves_bmi_null(self, client):
        body = {k: v for k, v in REGISTER_BODY.items() if k not in ("height", "weight")}
        response = client.post("/auth/register", json=body)

        assert response.status_code == 201
        assert response.get_json()["user"]["bmi"] is None

    def test_duplicate_email_is_rejected_without_new_row(self, client, member):
        body = dict(REGISTER_BODY, email="MEMBER@gym.test")
        response = client.post("/auth/register", json=body)

        assert response.status_code == 409
        assert response.get_json()["error"] == "DuplicateEmail"
        assert User.query.filter_by(email="member@gym.test").count() == 1
        assert User.query.count() == 1

    def test_password_mismatch(self, client):
        body = dict(REGISTER_BODY, confirmPassword="different1")
        response = client.post("/auth/register", json=body)

        assert response.status_code == 400
        assert response.get_json()["error"] == "PasswordMismatch"
        assert User.query.count() == 0

    def test_weak_password_is_a_validation_error(self, client):
        body = dict(REGISTER_BODY, password="abcdefgh", confirmPassword="abcdefgh")
        response = client.post("/auth/register", json=body)

        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "ValidationError"
        assert "password" in data["errors"]

    def test_short_password_is_a_validation_error(self, client):
        body = dict(REGISTER_BODY, password="ab1", confirmPassword="ab1")
        response = client.post("/auth/register", json=body)

        assert response.status_code == 400
        assert "password" in response.get_json()["errors"]

    def test_invalid_email_and_negative_weight(self, client):
        body = dict(REGISTER_BODY, email="not-an-email", weight=-5)
        response = client.post("/auth/register", json=body)

        assert response.status_code == 400
        errors = response.get_json()["errors"]
        assert "email" in errors
        assert "weight" in errors

    def test_registration_cannot_request_admin_role(self, client):
        body = dict(REGISTER_BODY, role="admin")
        response = client.post("/auth/register", json=body)

        assert response.status_code == 201
        assert response.get_json()["user"]["role"] == "member"

    def test_blank_name_is_a_validation_error(self, client):
        body = dict(REGISTER_BODY, name="   ")
        response = client.post("/auth/register", json=body)

        assert response.status_code == 400
        assert "name" in response.get_json()["errors"]
        assert User.query.count() == 0

    def test_name_is_stripped(self, client):
        body = dict(REGISTER_BODY, name="  New Member  ")
        response = client.post("/auth/register", json=body)

        assert response.get_json()["user"]["name"] == "New Member"


class TestLogin:

    def test_login_success(self, client, member):
        response = client.post("/auth/login", json={"email": "member@gym.test", "password": "member123"})

        assert response.status_code == 200
        data = response.get_json()
        assert data["user"]["id"] == member.id
        assert data["access_token"]

    def test_login_email_is_case_insensitive(self, client, member):
        response = client.post("/auth/login", json={"email": " Member@Gym.Test ", "password": "member123"})
        assert response.status_code == 200

    def test_wrong_password(self, client, member):
        response = client.post("/auth/login", json={"email": "member@gym.test", "password": "nope1234"})

        assert response.status_code == 401
        assert response.get_json()["error"] == "InvalidCredentials"

    def test_unknown_email(self, client):
        response = client.post("/auth/login", json={"email": "ghost@gym.test", "password": "whatever1"})

        assert response.status_code == 401
        assert response.get_json()["error"] == "InvalidCredentials"

    def test_missing_fields(self, client):
        response = client.post("/auth/login", json={})

        assert response.status_code == 400
        assert response.get_json()["error"] == "ValidationError"

    def test_token_from_login_authenticates(self, client, member):
        token = client.post(
            "/auth/login", json={"email": "member@gym.test", "password": "member123"}
        ).get_json()["access_token"]

        response = client.get(f"/users/{member.id}", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200


class TestUnauthenticated:

    def test_missing_token(self, client):
        response = client.get("/events")

        assert response.status_code == 401
        assert response.get_json()["error"] == "Unauthenticated"

    def test_garbage_token(self, client):
        response = client.get("/events", headers={"Authorization": "Bearer not.a.token"})

        assert response.status_code == 401
        assert response.get_json()["error"] == "Unauthenticated"

    def test_token_of_deleted_user(self, client, admin_headers, other_member, other_headers):
        assert client.delete(f"/users/{other_member.id}", headers=admin_headers).status_code == 200

        response = client.get("/events", headers=other_headers)
        assert response.status_code == 401
        assert response.get_json()["error"] == "Unauthenticated"
