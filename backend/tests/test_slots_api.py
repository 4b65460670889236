"""
HTTP layer: routes, response shapes and the error envelope.
"""

from roombook.models import Slots


def _create(client, room_id, start="09:00", end="11:00", date="2024-06-15"):
    return client.post("/slots/", json={
        "room": room_id,
        "date": date,
        "start_time": start,
        "end_time": end,
    })


def test_create_slots(client, room):
    response = _create(client, room.id)

    assert response.status_code == 201
    body = response.json()
    assert [(s["start_time"], s["end_time"]) for s in body] == [("09:00", "10:00"), ("10:00", "11:00")]
    assert body[0]["room"] == room.id
    assert body[0]["date"] == "2024-06-15"
    assert body[0]["is_booked"] is False
    assert body[0]["is_deleted"] is False


def test_create_overlapping_returns_conflict_envelope(client, room):
    _create(client, room.id)

    response = _create(client, room.id, "10:30", "11:30")

    assert response.status_code == 409
    assert response.json() == {
        "success": False,
        "message": "A slot already exists for this time range",
        "error_sources": [{"path": "", "message": "A slot already exists for this time range"}],
    }


def test_create_inverted_window(client, room):
    response = _create(client, room.id, "11:00", "09:00")

    assert response.status_code == 400
    assert response.json()["message"] == "End time must be after start time"


def test_create_unknown_room(client):
    response = _create(client, 12345)

    assert response.status_code == 404
    assert response.json()["message"] == "Room is not found"


def test_request_validation_envelope(client, room):
    response = client.post("/slots/", json={"room": room.id, "date": "2024-06-15", "start_time": "9am"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation Error"
    assert {src["path"] for src in body["error_sources"]} == {"start_time", "end_time"}


def test_malformed_path_id(client):
    response = client.delete("/slots/abc")

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid ID"


def test_availability_returns_room_inline(client, room):
    _create(client, room.id)

    response = client.get("/slots/availability", params={"date": "2024-06-15", "roomId": room.id})

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 2
    assert body[0]["room"]["id"] == room.id
    assert body[0]["room"]["name"] == room.name
    assert body[0]["room"]["amenities"] == ["projector", "whiteboard"]


def test_availability_hides_booked_and_deleted(client, db, room):
    created = _create(client, room.id, "09:00", "12:00").json()
    db.query(Slots).filter(Slots.id == created[0]["id"]).update({"is_booked": 1})
    db.commit()
    client.delete(f"/slots/{created[1]['id']}")

    body = client.get("/slots/availability").json()

    assert [s["id"] for s in body] == [created[2]["id"]]


def test_update_slot(client, room):
    created = _create(client, room.id, "09:00", "10:00").json()

    response = client.patch(f"/slots/{created[0]['id']}", json={"start_time": "13:00", "end_time": "14:00"})

    assert response.status_code == 200
    assert (response.json()["start_time"], response.json()["end_time"]) == ("13:00", "14:00")


def test_update_booked_slot(client, db, room):
    created = _create(client, room.id, "09:00", "10:00").json()
    db.query(Slots).filter(Slots.id == created[0]["id"]).update({"is_booked": 1})
    db.commit()

    response = client.patch(f"/slots/{created[0]['id']}", json={"start_time": "13:00"})

    assert response.status_code == 409
    assert response.json()["message"] == "Cannot update a booked slot"


def test_update_missing_slot(client):
    response = client.patch("/slots/999", json={"start_time": "13:00", "end_time": "14:00"})

    assert response.status_code == 404


def test_delete_twice(client, room):
    slot_id = _create(client, room.id, "09:00", "10:00").json()[0]["id"]

    first = client.delete(f"/slots/{slot_id}")
    second = client.delete(f"/slots/{slot_id}")

    assert first.status_code == 200
    assert first.json()["is_deleted"] is True
    assert second.status_code == 409
    assert second.json()["message"] == "Slot is already deleted"


def test_health(client, fake_redis, monkeypatch):
    from roombook import main

    monkeypatch.setattr(main, "redis_client", fake_redis)
    fake_redis.ping.return_value = True

    assert client.get("/health").json() == {"status": "ok", "redis": True}


def test_availability_empty_date_means_any_date(client, room):
    _create(client, room.id, "09:00", "10:00", date="2024-06-15")
    _create(client, room.id, "09:00", "10:00", date="2024-06-16")

    response = client.get("/slots/availability?date=")

    assert response.status_code == 200
    assert sorted(s["date"] for s in response.json()) == ["2024-06-15", "2024-06-16"]


def test_availability_malformed_date(client):
    response = client.get("/slots/availability", params={"date": "15.06.2024"})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_unknown_route_envelope(client):
    response = client.get("/rooms/")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Not Found",
        "error_sources": [{"path": "", "message": "Not Found"}],
    }


def test_wrong_method_envelope(client):
    response = client.put("/slots/1", json={})

    assert response.status_code == 405
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Method Not Allowed"
