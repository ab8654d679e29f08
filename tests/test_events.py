import pytest

EVENT_BODY = {
    "title": "Spin Marathon",
    "date": "2026-11-20",
    "time": "18:30",
    "location": "Studio B",
    "imageUri": "content://images/spin.png",
}


@pytest.fixture
def event(client, admin_headers):
    response = client.post("/events", json=EVENT_BODY, headers=admin_headers)
    assert response.status_code == 201
    return response.get_json()


class TestEventManagement:

    def test_admin_creates_event(self, event, admin):
        assert event["title"] == "Spin Marathon"
        assert event["date"] == "2026-11-20"
        assert event["time"] == "18:30"
        assert event["createdBy"] == admin.id
        assert event["imageUri"] == "content://images/spin.png"
        assert event["registeredCount"] == 0

    def test_member_cannot_create(self, client, member_headers):
        response = client.post("/events", json=EVENT_BODY, headers=member_headers)
        assert response.status_code == 403

    def test_bad_date_and_time(self, client, admin_headers):
        body = dict(EVENT_BODY, date="20/11/2026", time="late")
        response = client.post("/events", json=body, headers=admin_headers)

        assert response.status_code == 400
        errors = response.get_json()["errors"]
        assert "date" in errors and "time" in errors

    def test_missing_location(self, client, admin_headers):
        body = {k: v for k, v in EVENT_BODY.items() if k != "location"}
        response = client.post("/events", json=body, headers=admin_headers)
        assert response.status_code == 400

    def test_blank_title_and_location(self, client, admin_headers):
        body = dict(EVENT_BODY, title="  ", location="\t")
        response = client.post("/events", json=body, headers=admin_headers)

        assert response.status_code == 400
        errors = response.get_json()["errors"]
        assert "title" in errors and "location" in errors

    def test_blank_title_on_update(self, client, event, admin_headers):
        response = client.patch(f"/events/{event['id']}", json={"title": " "}, headers=admin_headers)

        assert response.status_code == 400
        assert client.get(f"/events/{event['id']}", headers=admin_headers).get_json()["title"] == "Spin Marathon"

    def test_partial_update(self, client, event, admin_headers):
        response = client.patch(f"/events/{event['id']}", json={"location": "Main Hall"}, headers=admin_headers)

        data = response.get_json()
        assert response.status_code == 200
        assert data["location"] == "Main Hall"
        assert data["title"] == "Spin Marathon"

    def test_member_cannot_update(self, client, event, member_headers):
        response = client.patch(f"/events/{event['id']}", json={"title": "Mine"}, headers=member_headers)
        assert response.status_code == 403

    def test_update_unknown(self, client, admin_headers):
        assert client.patch("/events/404", json={"title": "x"}, headers=admin_headers).status_code == 404

    def test_delete(self, client, event, admin_headers):
        assert client.delete(f"/events/{event['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"/events/{event['id']}", headers=admin_headers).status_code == 404
        assert client.delete(f"/events/{event['id']}", headers=admin_headers).status_code == 404

    def test_member_cannot_delete(self, client, event, member_headers):
        assert client.delete(f"/events/{event['id']}", headers=member_headers).status_code == 403


class TestEventReading:

    def test_member_lists_events_sorted_by_date(self, client, admin_headers, member_headers):
        client.post("/events", json=dict(EVENT_BODY, title="Later", date="2026-12-01"), headers=admin_headers)
        client.post("/events", json=dict(EVENT_BODY, title="Sooner", date="2026-11-01"), headers=admin_headers)

        response = client.get("/events", headers=member_headers)

        assert response.status_code == 200
        assert [e["title"] for e in response.get_json()] == ["Sooner", "Later"]

    def test_member_views_single_event(self, client, event, member_headers):
        response = client.get(f"/events/{event['id']}", headers=member_headers)

        assert response.status_code == 200
        assert response.get_json()["id"] == event["id"]


class TestEventRegistration:

    def test_member_registers(self, client, event, member, member_headers):
        response = client.post(f"/events/{event['id']}/register", headers=member_headers)

        assert response.status_code == 201
        data = response.get_json()
        assert data["eventId"] == event["id"]
        assert data["memberId"] == member.id
        assert client.get(f"/events/{event['id']}", headers=member_headers).get_json()["registeredCount"] == 1

    def test_double_registration_conflicts(self, client, event, member_headers):
        client.post(f"/events/{event['id']}/register", headers=member_headers)
        response = client.post(f"/events/{event['id']}/register", headers=member_headers)

        assert response.status_code == 409
        assert response.get_json()["error"] == "Conflict"

    def test_admin_cannot_register(self, client, event, admin_headers):
        assert client.post(f"/events/{event['id']}/register", headers=admin_headers).status_code == 403

    def test_register_unknown_event(self, client, member_headers):
        assert client.post("/events/999/register", headers=member_headers).status_code == 404

    def test_unregister(self, client, event, member, member_headers):
        client.post(f"/events/{event['id']}/register", headers=member_headers)

        assert client.delete(f"/events/{event['id']}/register", headers=member_headers).status_code == 200
        assert client.get(f"/events/user/{member.id}", headers=member_headers).get_json() == []
        assert client.delete(f"/events/{event['id']}/register", headers=member_headers).status_code == 404

    def test_user_events(self, client, event, member, other_member, member_headers, admin_headers):
        client.post(f"/events/{event['id']}/register", headers=member_headers)

        mine = client.get(f"/events/user/{member.id}", headers=member_headers).get_json()
        assert [e["id"] for e in mine] == [event["id"]]
        assert client.get(f"/events/user/{other_member.id}", headers=admin_headers).get_json() == []
        assert client.get(f"/events/user/{other_member.id}", headers=member_headers).status_code == 403

    def test_deleting_event_removes_registrations(self, client, event, member, member_headers, admin_headers):
        client.post(f"/events/{event['id']}/register", headers=member_headers)
        client.delete(f"/events/{event['id']}", headers=admin_headers)

        assert client.get(f"/events/user/{member.id}", headers=member_headers).get_json() == []
