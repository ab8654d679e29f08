"""
Client session and workout board, driven against the Flask test client.
"""
import pytest

from gym_management.client import ApiClientError, ApiSession, WorkoutBoard


class _Response:
    def __init__(self, response):
        self.status_code = response.status_code
        self._payload = response.get_json(silent=True)

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FlaskTransport:
    """Stands in for requests.Session, routing calls to the test client."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.calls.append((method, url))
        return _Response(self.client.open(url, method=method, json=json, headers=headers))


@pytest.fixture
def transport(client):
    return FlaskTransport(client)


@pytest.fixture
def member_session(transport, member):
    session = ApiSession("", http=transport)
    session.login("member@gym.test", "member123")
    return session


class TestApiSession:

    def test_login_stores_token_on_the_session(self, member_session, member):
        assert member_session.token
        assert member_session.user_id == member.id

    def test_sessions_do_not_share_tokens(self, transport, member, admin):
        member_session = ApiSession("", http=transport)
        admin_session = ApiSession("", http=transport)
        member_session.login("member@gym.test", "member123")
        admin_session.login("admin@gym.test", "admin123")

        assert member_session.token != admin_session.token
        assert admin_session.all_members_progress()[0]["userId"] == member.id
        with pytest.raises(ApiClientError) as exc:
            member_session.all_members_progress()
        assert exc.value.status_code == 403
        assert exc.value.error == "Forbidden"

    def test_register(self, transport):
        session = ApiSession("", http=transport)
        user = session.register("Casey", "casey@gym.test", "pass1234", "pass1234", age=40, height=160, weight=64)

        assert user["bmi"] == 25.0
        assert session.token

    def test_error_message_is_surfaced(self, transport, member):
        session = ApiSession("", http=transport)
        with pytest.raises(ApiClientError) as exc:
            session.login("member@gym.test", "wrong-pass1")

        assert exc.value.status_code == 401
        assert exc.value.message == "Invalid credentials"
        assert session.token is None

    def test_logout_drops_token(self, member_session):
        member_session.logout()
        with pytest.raises(ApiClientError) as exc:
            member_session.events()
        assert exc.value.status_code == 401


class TestWorkoutBoard:

    def test_refresh_and_toggle_use_server_state(self, member_session, member, make_workout):
        workout = make_workout(member)
        board = WorkoutBoard(member_session)

        board.refresh()
        assert [w["id"] for w in board.workouts] == [workout["id"]]
        assert board.stats["completionRate"] == 0

        board.toggle(workout["id"])
        assert board.completed[0]["id"] == workout["id"]
        assert board.stats == {"totalWorkouts": 1, "completedWorkouts": 1, "completionRate": 100}

    def test_stale_fetch_is_ignored(self, member_session):
        board = WorkoutBoard(member_session)
        older = board.begin_fetch()
        newer = board.begin_fetch()

        assert board.apply_fetch(newer, [{"id": 2, "isCompleted": False}]) is True
        assert board.apply_fetch(older, [{"id": 1, "isCompleted": True}]) is False
        assert [w["id"] for w in board.workouts] == [2]

    def test_failed_toggle_leaves_state(self, member_session, other_member, member, make_workout):
        mine = make_workout(member)
        theirs = make_workout(other_member)
        board = WorkoutBoard(member_session)
        board.refresh()
        before = [dict(w) for w in board.workouts]

        with pytest.raises(ApiClientError) as exc:
            board.toggle(theirs["id"])

        assert exc.value.status_code == 403
        assert board.workouts == before
        assert [w["id"] for w in board.workouts] == [mine["id"]]
