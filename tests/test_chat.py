import pytest

from chat import service as chat_service
from conftest import OTHER_USER_ID, USER_ID

ROOM_ID = "55555555-5555-5555-5555-555555555555"


class RecordingHub:
    def __init__(self):
        self.emitted = []

    async def emit(self, room, event, data, *, skip_sid=None):
        self.emitted.append((room, event, data))
        return 1


@pytest.fixture
def recording_hub(monkeypatch):
    hub = RecordingHub()
    monkeypatch.setattr(chat_service, "hub", hub)
    return hub


class TestRooms:
    def test_list_is_scoped_to_caller(self, client, fake_db, auth_headers):
        fake_db.all.append([{"id": ROOM_ID, "last_message": "hi"}])
        response = client.get("/api/chat?limit=5", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == [{"id": ROOM_ID, "last_message": "hi"}]
        assert fake_db.calls[0][2] == (USER_ID, 5, 0)

    def test_get_room_includes_participants(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": ROOM_ID, "subject": "Lease renewal"})
        fake_db.all.append([{"user_id": USER_ID}, {"user_id": OTHER_USER_ID}])
        response = client.get(f"/api/chat/{ROOM_ID}", headers=auth_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["subject"] == "Lease renewal"
        assert [p["user_id"] for p in body["participants"]] == [USER_ID, OTHER_USER_ID]

    def test_get_room_of_non_participant(self, client, fake_db, auth_headers):
        response = client.get(f"/api/chat/{ROOM_ID}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Chat room not found"}

    def test_create_adds_creator_and_participants(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO chat_rooms", {"id": ROOM_ID, "room_type": "general", "status": "active"})

        response = client.post(
            "/api/chat",
            json={"subject": "Lease renewal", "participant_ids": [USER_ID, OTHER_USER_ID]},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert fake_db.transactions == 1
        room_args = fake_db.args_for("INSERT INTO chat_rooms")
        assert room_args[1:] == ("general", "Lease renewal", "active", USER_ID)
        members = [
            str(args[1]) for name, sql, args in fake_db.calls if "INSERT INTO chat_room_participants" in sql
        ]
        assert members == [USER_ID, OTHER_USER_ID]

    def test_update_missing_room(self, client, fake_db, auth_headers):
        response = client.put(f"/api/chat/{ROOM_ID}", json={"status": "closed"}, headers=auth_headers)
        assert response.status_code == 404

    def test_delete(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": ROOM_ID})
        response = client.delete(f"/api/chat/{ROOM_ID}", headers=auth_headers)
        assert response.json() == {"message": "Chat room deleted successfully"}


class TestMessages:
    def test_non_participant_cannot_post(self, client, fake_db, auth_headers, recording_hub):
        response = client.post(
            f"/api/chat/{ROOM_ID}/messages",
            json={"message_body": "hello"},
            headers=auth_headers,
        )
        assert response.status_code == 403
        assert response.json() == {"error": "You are not a participant in this room"}
        assert recording_hub.emitted == []

    def test_participant_posts_and_room_is_notified(self, client, fake_db, auth_headers, recording_hub):
        fake_db.on("FROM chat_room_participants WHERE", {"id": "p1"})
        fake_db.on("INSERT INTO chat_messages", {"id": "m1", "message_body": "hello", "message_type": "text"})

        response = client.post(
            f"/api/chat/{ROOM_ID}/messages",
            json={"message_body": "hello"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["id"] == "m1"
        assert fake_db.args_for("INSERT INTO chat_messages")[3] == "text"
        assert recording_hub.emitted == [
            (f"chat:{ROOM_ID}", "new_message", {"id": "m1", "message_body": "hello", "message_type": "text"})
        ]

    def test_message_body_required(self, client, fake_db, auth_headers):
        response = client.post(f"/api/chat/{ROOM_ID}/messages", json={}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "message_body is required"}
        assert fake_db.calls == []

    def test_list_in_order_for_participant(self, client, fake_db, auth_headers):
        fake_db.on("FROM chat_room_participants WHERE", {"id": "p1"})
        fake_db.all.append([{"id": "m1"}, {"id": "m2"}])
        response = client.get(f"/api/chat/{ROOM_ID}/messages", headers=auth_headers)
        assert response.status_code == 200
        assert [m["id"] for m in response.json()] == ["m1", "m2"]
        assert "ORDER BY cm.created_at ASC" in fake_db.sql_for("fetch_all")[0]

    def test_list_for_non_participant(self, client, fake_db, auth_headers):
        response = client.get(f"/api/chat/{ROOM_ID}/messages", headers=auth_headers)
        assert response.status_code == 403
