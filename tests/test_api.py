"""
Tests for the ChequeFlow API.

Validates:
- Health and info endpoints report the loaded holiday pack
- Holiday listing and date classification
- Reminder resolution and notification text
- Calendar export downloads
- Domain errors mapped to JSON error bodies
"""
import pytest
from datetime import date

from chequeflow.calendars import NoHolidayCalendar
from chequeflow.engine import ReminderResolver

from tests.conftest import event_dates


CHEQUE_PAYLOAD = {
    "id": "4f6c2a1e",
    "cheque_number": "000123",
    "bank_name": "Commercial Bank",
    "payee_name": "Lanka Traders",
    "amount": "150000",
    "due_date": "2025-01-13",
    "branch": "Colombo 03",
    "reminder_date": "2025-01-14",
    "is_holiday_adjusted": True,
    "holiday_skipped": ["Duruthu Full Moon Poya Day"],
}


@pytest.fixture(scope="module")
def client():
    from fastapi.testclient import TestClient
    from api.main import app

    # Entering the context runs the lifespan, which loads the holiday pack
    with TestClient(app) as test_client:
        yield test_client


class TestHealth:
    """Tests for health and info endpoints."""

    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["holiday_pack_id"] == "LK-BANK"
        assert data["holiday_years"] == [2024, 2025, 2026]
        assert len(data["holiday_pack_hash"]) == 64

    def test_api_info(self, client):
        resp = client.get("/api")

        assert resp.status_code == 200
        assert resp.json()["status"] == "running"

    def test_request_id_header(self, client):
        resp = client.get("/health")

        assert len(resp.headers["X-Request-ID"]) == 8


class TestHolidayEndpoints:
    """Tests for /holidays endpoints."""

    def test_month(self, client):
        resp = client.get("/holidays", params={"year": 2025, "month": 1})

        assert resp.status_code == 200
        assert resp.json()["holidays"] == [
            {"date": "01-01", "name": "New Year's Day", "year": None},
            {"date": "01-15", "name": "Thai Pongal", "year": None},
            {"date": "01-13", "name": "Duruthu Full Moon Poya Day", "year": 2025},
        ]

    def test_month_out_of_range(self, client):
        resp = client.get("/holidays", params={"year": 2025, "month": 13})

        assert resp.status_code == 422

    def test_upcoming(self, client):
        resp = client.get("/holidays/upcoming", params={"count": 2, "today": "2025-12-01"})

        assert resp.status_code == 200
        assert resp.json() == [
            {"date": "2025-12-04", "name": "Unduvap Full Moon Poya Day"},
            {"date": "2025-12-25", "name": "Christmas Day"},
        ]

    def test_check_holiday(self, client):
        resp = client.get("/holidays/check/2025-01-13")

        assert resp.json() == {
            "date": "2025-01-13",
            "weekday": "Monday",
            "is_weekend": False,
            "is_holiday": True,
            "holiday_name": "Duruthu Full Moon Poya Day",
            "is_bank_working_day": False,
        }

    def test_check_working_day(self, client):
        data = client.get("/holidays/check/2025-03-14").json()

        assert data["is_bank_working_day"] is True
        assert data["holiday_name"] is None


class TestReminderEndpoints:
    """Tests for /reminders endpoints."""

    def test_resolve_weekend(self, client):
        resp = client.post("/reminders/resolve", json={"due_date": "2025-02-08"})

        assert resp.status_code == 200
        assert resp.json() == {
            "reminder_date": "2025-02-10",
            "is_adjusted": True,
            "original_date": "2025-02-08",
            "skipped_days": ["Saturday", "Sunday"],
            "message": "Due date falls on Saturday, Sunday. Reminder set for next working day.",
        }

    def test_resolve_working_day(self, client):
        data = client.post("/reminders/resolve", json={"due_date": "2025-03-14"}).json()

        assert data["is_adjusted"] is False
        assert data["message"] == "Cheque has been saved successfully."

    def test_resolve_batch(self, client):
        resp = client.post(
            "/reminders/resolve/batch",
            json={"due_dates": ["2025-01-13", "2025-03-14"]},
        )

        assert [r["reminder_date"] for r in resp.json()] == ["2025-01-14", "2025-03-14"]

    def test_invalid_date(self, client):
        resp = client.post("/reminders/resolve", json={"due_date": "2025-02-30"})

        assert resp.status_code == 422

    def test_domain_error_body(self, client):
        """A calendar with no working days yields a coded 500 response."""
        from api.routes import reminders

        original = reminders.resolver
        reminders.set_resolver(ReminderResolver(
            calendar=NoHolidayCalendar(weekend_days=frozenset(range(7)), max_roll_days=5),
        ))
        try:
            resp = client.post("/reminders/resolve", json={"due_date": "2025-02-08"})
        finally:
            reminders.set_resolver(original)

        assert resp.status_code == 500
        data = resp.json()
        assert data["code"] == "CF_WORKING_DAY_NOT_FOUND"
        assert data["request_id"]


class TestExportEndpoints:
    """Tests for /export endpoints."""

    def test_single(self, client):
        resp = client.post("/export/ics", json=CHEQUE_PAYLOAD)

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/calendar")
        assert 'filename="cheque-000123.ics"' in resp.headers["content-disposition"]
        assert event_dates(resp.text) == [date(2025, 1, 14)]
        assert "UID:cheque-4f6c2a1e@chequeflow.app" in resp.text

    def test_batch_pending_only(self, client):
        cleared = {**CHEQUE_PAYLOAD, "id": "b2", "cheque_number": "000124", "status": "cleared"}
        second = {
            **CHEQUE_PAYLOAD,
            "id": "c3",
            "cheque_number": "000125",
            "due_date": "2025-03-14",
            "reminder_date": None,
        }

        resp = client.post(
            "/export/ics/batch",
            json={"cheques": [CHEQUE_PAYLOAD, cleared, second]},
        )

        assert resp.status_code == 200
        assert "chequeflow-reminders-" in resp.headers["content-disposition"]
        assert event_dates(resp.text) == [date(2025, 1, 14), date(2025, 3, 14)]

    def test_batch_without_pending(self, client):
        cleared = {**CHEQUE_PAYLOAD, "status": "cleared"}

        resp = client.post("/export/ics/batch", json={"cheques": [cleared]})

        assert resp.status_code == 204
        assert resp.content == b""

    def test_non_positive_amount_rejected(self, client):
        resp = client.post("/export/ics", json={**CHEQUE_PAYLOAD, "amount": "0"})

        assert resp.status_code == 422

    @pytest.mark.parametrize("field", ["bank_name", "payee_name", "branch"])
    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_text_field_rejected(self, client, field, value):
        """Blank cheque fields are refused, as cheque creation refuses them."""
        resp = client.post("/export/ics", json={**CHEQUE_PAYLOAD, field: value})

        assert resp.status_code == 422
