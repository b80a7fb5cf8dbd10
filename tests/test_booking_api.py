from __future__ import annotations

from dataclasses import replace

from fastapi.testclient import TestClient

from app import create_app
from backend.utils.config import get_settings


FUTURE_DATE = "05/01/2099"


def _build_test_settings(tmp_path, filename: str, **overrides):
    get_settings.cache_clear()
    base = get_settings()
    return replace(base, record_path=tmp_path / filename, **overrides)


def _payload(name: str, **overrides) -> dict[str, str]:
    payload = {
        "name": name,
        "anchor": "Jordan Lee",
        "time": "09:30 AM",
        "date": FUTURE_DATE,
    }
    payload.update(overrides)
    return payload


def test_book_list_and_history_flow(tmp_path):
    app = create_app(_build_test_settings(tmp_path, "api.csv"))
    client = TestClient(app)

    first = client.post("/book", json=_payload("Kickoff"))
    second = client.post("/book", json=_payload("Retro"))

    assert first.status_code == 201
    assert first.json() == {
        "slot_id": "C1",
        "persisted": True,
        "slots_left": 14,
        "slots_booked": 1,
    }
    assert second.json()["slot_id"] == "C2"

    bookings = client.get("/bookings").json()
    assert [row["name"] for row in bookings["bookings"]] == ["Kickoff", "Retro"]
    assert bookings["slots_booked"] == 2

    history = client.get("/history").json()
    assert history["records"][-1] == {
        "name": "Retro",
        "anchor": "Jordan Lee",
        "time": "09:30 AM",
        "date": FUTURE_DATE,
        "slot_id": "C2",
    }


def test_history_reads_log_independent_of_memory(tmp_path):
    settings = _build_test_settings(tmp_path, "api.csv")
    settings.record_path.write_text("Earlier,Alex Kim,10:00 AM,01/01/2024,C4\n", encoding="utf-8")
    client = TestClient(create_app(settings))

    assert client.get("/bookings").json()["bookings"] == []
    assert client.get("/history").json()["records"][0]["slot_id"] == "C4"


def test_book_rejects_invalid_input(tmp_path):
    client = TestClient(create_app(_build_test_settings(tmp_path, "api.csv")))

    assert client.post("/book", json=_payload("Kickoff", anchor="R2D2")).status_code == 400
    assert client.post("/book", json=_payload("Kickoff", time="25:00 AM")).status_code == 400
    assert client.post("/book", json=_payload("Kickoff", date="01/01/2020")).status_code == 400
    assert client.post("/book", json=_payload("")).status_code == 422
    assert client.get("/bookings").json()["slots_booked"] == 0


def test_book_rejects_line_breaks_so_history_keeps_one_record_per_booking(tmp_path):
    client = TestClient(create_app(_build_test_settings(tmp_path, "api.csv")))

    forged_name = client.post(
        "/book",
        json=_payload("Kickoff\nForged,X,01:00 AM,01/01/2099,C9"),
    )
    forged_anchor = client.post("/book", json=_payload("Kickoff", anchor="Jordan\r\nLee"))
    accepted = client.post("/book", json=_payload("Kickoff"))

    assert forged_name.status_code == 400
    assert forged_anchor.status_code == 400
    assert accepted.status_code == 201
    records = client.get("/history").json()["records"]
    assert [record["name"] for record in records] == ["Kickoff"]
    assert records[0]["slot_id"] == "C1"


def test_book_uses_patterns_from_app_settings(tmp_path):
    settings = _build_test_settings(tmp_path, "api.csv", anchor_regex=r"^[A-Z]+$")
    client = TestClient(create_app(settings))

    rejected = client.post("/book", json=_payload("Kickoff", anchor="Jordan Lee"))
    accepted = client.post("/book", json=_payload("Kickoff", anchor="JORDAN"))

    assert rejected.status_code == 400
    assert accepted.status_code == 201


def test_book_returns_conflict_when_pool_is_full(tmp_path):
    client = TestClient(create_app(_build_test_settings(tmp_path, "api.csv", max_slots=2)))
    client.post("/book", json=_payload("One"))
    client.post("/book", json=_payload("Two"))

    response = client.post("/book", json=_payload("Three"))

    assert response.status_code == 409
    assert client.get("/bookings").json()["slots_left"] == 0


def test_book_reports_unpersisted_booking(tmp_path):
    settings = replace(get_settings(), record_path=tmp_path)
    client = TestClient(create_app(settings))

    response = client.post("/book", json=_payload("Kickoff"))

    assert response.status_code == 201
    assert response.json()["persisted"] is False
    assert client.get("/history").json()["records"] == []
