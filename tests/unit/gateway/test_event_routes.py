"""
Alnwick Community Center - Tests for the public read routes.

GET /api/events, /api/events/upcoming, /api/rooms, /api/calendar, /api/health
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient


class TestMonthEvents:
    """GET /api/events?year&month"""

    def test_may_2025(self, seeded_app: TestClient) -> None:
        response = seeded_app.get("/api/events", params={"year": 2025, "month": 5})
        assert response.status_code == 200
        events = response.json()
        assert len(events) == 11
        assert all(e["date"].startswith("2025-05-") for e in events)
        assert {"id", "title", "startTime", "endTime", "roomId", "category"} <= set(events[0])

    def test_empty_month(self, seeded_app: TestClient) -> None:
        response = seeded_app.get("/api/events", params={"year": 2030, "month": 1})
        assert response.status_code == 200
        assert response.json() == []

    def test_month_out_of_range_returns_400(self, app: TestClient) -> None:
        response = app.get("/api/events", params={"year": 2025, "month": 13})
        assert response.status_code == 400
        assert "month" in response.json()["errors"]

    def test_month_required(self, app: TestClient) -> None:
        assert app.get("/api/events", params={"year": 2025}).status_code == 400


class TestUpcomingEvents:
    """GET /api/events/upcoming"""

    def test_sorted_from_today(self, app: TestClient, repository, event_payload) -> None:
        today = date.today()
        repository.create_event(dict(event_payload, date=(today - timedelta(days=1)).isoformat(), title="Past"))
        repository.create_event(dict(event_payload, date=(today + timedelta(days=3)).isoformat(), title="Later"))
        repository.create_event(dict(event_payload, date=today.isoformat(), title="Today"))

        response = app.get("/api/events/upcoming")
        assert response.status_code == 200
        assert [e["title"] for e in response.json()] == ["Today", "Later"]

    def test_limit(self, app: TestClient, repository, event_payload) -> None:
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        for i in range(4):
            repository.create_event(dict(event_payload, date=tomorrow, title=f"E{i}"))
        response = app.get("/api/events/upcoming", params={"limit": 2})
        assert len(response.json()) == 2


class TestRooms:
    """GET /api/rooms"""

    def test_lists_seven_rooms(self, app: TestClient) -> None:
        response = app.get("/api/rooms")
        assert response.status_code == 200
        rooms = response.json()
        assert [r["id"] for r in rooms] == [1, 2, 3, 4, 5, 6, 7]
        assert rooms[0]["name"] == "Gymnasium"
        assert rooms[0]["capacity"] == 200


class TestHealth:
    """GET /api/health"""

    def test_counts(self, seeded_app: TestClient, seeded_repository) -> None:
        response = seeded_app.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["events"] == seeded_repository.count()
        assert data["rooms"] == 7
        assert "timestamp" in data


class TestCalendar:
    """GET /api/calendar"""

    def test_grid(self, seeded_app: TestClient) -> None:
        response = seeded_app.get("/api/calendar", params={"year": 2025, "month": 5})
        assert response.status_code == 200
        data = response.json()
        assert data["view"] == "grid"
        assert data["title"] == "May 2025"
        assert data["daysOfWeek"][0] == "Sun"
        assert len(data["days"]) == 42
        assert data["days"][0]["date"] == "2025-04-27"
        assert data["days"][0]["inCurrentMonth"] is False

        friday = next(d for d in data["days"] if d["date"] == "2025-05-09")
        assert [e["title"] for e in friday["events"]] == ["Borderline Band Dance", "New Sounds Karaoke"]
        assert friday["events"][0]["timeRange"] == "6:00 PM - 10:00 PM"
        assert friday["events"][0]["roomName"] == "Gymnasium"
        assert friday["overflowCount"] == 0
        assert friday["overflowLabel"] is None

    def test_grid_overflow(self, app: TestClient, repository, event_payload) -> None:
        for i in range(3):
            repository.create_event(dict(event_payload, title=f"E{i}"))
        data = app.get("/api/calendar", params={"year": 2025, "month": 5}).json()
        cell = next(d for d in data["days"] if d["date"] == "2025-05-10")
        assert len(cell["visibleEvents"]) == 2
        assert cell["overflowLabel"] == "+1 more"
        assert cell["isWeekend"] is True

    def test_list(self, seeded_app: TestClient) -> None:
        response = seeded_app.get("/api/calendar", params={"year": 2025, "month": 5, "view": "list"})
        assert response.status_code == 200
        data = response.json()
        assert data["view"] == "list"
        dates = [g["date"] for g in data["groups"]]
        assert dates == sorted(dates)
        assert dates[0] == "2025-05-02"
        assert data["groups"][0]["label"] == "Friday, May 2"
        assert len(data["legend"]) == 5

    def test_unknown_view_returns_400(self, app: TestClient) -> None:
        response = app.get("/api/calendar", params={"year": 2025, "month": 5, "view": "week"})
        assert response.status_code == 400

    @pytest.mark.parametrize("year,month", [(1, 1), (9999, 12)])
    def test_grid_outside_date_range_returns_400(self, app: TestClient, year: int, month: int) -> None:
        response = app.get("/api/calendar", params={"year": year, "month": month})
        assert response.status_code == 400
        assert "out of the supported date range" in response.json()["detail"]

    def test_list_at_date_range_edge(self, app: TestClient) -> None:
        response = app.get("/api/calendar", params={"year": 9999, "month": 12, "view": "list"})
        assert response.status_code == 200
        assert response.json()["groups"] == []
