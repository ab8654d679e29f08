import logging

import requests

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """Non-2xx answer from the server, carrying its ``msg`` and ``error``."""

    def __init__(self, status_code, message, error=None, errors=None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error
        self.errors = errors


class ApiSession:
    """
    One authenticated conversation with the gym API.

    Each session owns its token, so several sessions (an admin and a member,
    or parallel tests) can live side by side. ``http`` is anything with a
    ``requests.Session``-like ``request`` method.
    """

    def __init__(self, base_url, token=None, http=None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.user = None
        self.http = http or requests.Session()
        self.timeout = timeout

    @property
    def user_id(self):
        return self.user["id"] if self.user else None

    def request(self, method, path, json=None):
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        response = self.http.request(
            method, f"{self.base_url}{path}", json=json, headers=headers, timeout=self.timeout
        )
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            payload = payload if isinstance(payload, dict) else {}
            logger.info("%s %s failed with %s", method, path, response.status_code)
            raise ApiClientError(
                response.status_code,
                payload.get("msg", f"Request failed with status {response.status_code}"),
                error=payload.get("error"),
                errors=payload.get("errors"),
            )
        return payload

    # -- auth --
    def _remember(self, payload):
        self.token = payload["access_token"]
        self.user = payload["user"]
        return self.user

    def login(self, email, password):
        return self._remember(self.request("POST", "/auth/login", {"email": email, "password": password}))

    def register(self, name, email, password, confirm_password, age=None, height=None, weight=None):
        body = {
            "name": name,
            "email": email,
            "password": password,
            "confirmPassword": confirm_password,
            "age": age,
            "height": height,
            "weight": weight,
        }
        return self._remember(self.request("POST", "/auth/register", body))

    def logout(self):
        self.token = None
        self.user = None

    # -- workouts --
    def my_workouts(self):
        return self.request("GET", "/workouts/my-workout")

    def toggle_completion(self, workout_id):
        return self.request("PATCH", f"/workouts/{workout_id}/toggle-completion")

    def workout_stats(self, user_id=None):
        return self.request("GET", f"/workouts/stats/{user_id or self.user_id}")

    def create_workout(self, **fields):
        return self.request("POST", "/workouts", fields)

    def all_members_progress(self):
        return self.request("GET", "/workouts/users/all-progress")

    # -- events --
    def events(self):
        return self.request("GET", "/events")
