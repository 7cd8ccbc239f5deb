"""Integration tests for work hours endpoints."""
import pytest
from sqlalchemy import select

from workhours.tables import work_hours


def entry_payload(**overrides) -> dict:
    payload = {
        "employeeName": "Alice",
        "date": "2024-01-01",
        "startTime": "09:00",
        "endTime": "17:00",
        "breakTime": 30,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
class TestLogHours:
    """Tests for POST /log-hours endpoint."""

    async def test_log_hours_success(self, app_client, app_context, alice):
        """Test a full day with a 30 minute break stores 7.5 net hours."""
        response = await app_client.post("/log-hours", json=entry_payload())

        assert response.status_code == 200
        assert response.json() == {"message": "Work hours logged successfully."}

        async with app_context.database.connection() as conn:
            row = (await conn.execute(select(work_hours))).one()
        assert row.employee_id == alice.id
        assert row.net_hours == 7.5

    async def test_log_hours_with_comment_and_string_break(self, app_client, app_context, alice):
        """Test form-style string values are accepted."""
        response = await app_client.post(
            "/log-hours",
            json=entry_payload(breakTime="45", comment="Client visit"),
        )

        assert response.status_code == 200

        async with app_context.database.connection() as conn:
            row = (await conn.execute(select(work_hours))).one()
        assert row.break_time == 45
        assert row.net_hours == 7.25
        assert row.comment == "Client visit"

    async def test_log_hours_missing_date(self, app_client, app_context, alice, count_work_hours):
        """Test a missing date returns 400 and writes no row."""
        payload = entry_payload()
        del payload["date"]

        response = await app_client.post("/log-hours", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields."}
        assert await count_work_hours(app_context.database) == 0

    async def test_log_hours_unknown_employee(
        self, app_client, app_context, alice, count_work_hours
    ):
        """Test an unknown employee returns 400 and writes no row."""
        response = await app_client.post(
            "/log-hours", json=entry_payload(employeeName="Mallory")
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Employee not found."}
        assert await count_work_hours(app_context.database) == 0

    async def test_log_hours_invalid_time(self, app_client, alice):
        response = await app_client.post("/log-hours", json=entry_payload(endTime="late"))

        assert response.status_code == 400
        assert "error" in response.json()

    async def test_log_hours_malformed_body(self, app_client):
        """Test an unparseable body is reported as a 400 error."""
        response = await app_client.post(
            "/log-hours",
            content="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    async def test_log_hours_non_numeric_break(self, app_client, alice):
        response = await app_client.post("/log-hours", json=entry_payload(breakTime="lunch"))

        assert response.status_code == 400

    async def test_log_hours_database_failure(self, app_client, app_context, alice):
        """Test database failures return a generic 500."""
        async with app_context.database.transaction() as conn:
            await conn.run_sync(work_hours.drop)

        response = await app_client.post("/log-hours", json=entry_payload())

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error."}


@pytest.mark.asyncio
class TestLandingPage:
    """Tests for GET / and GET /health."""

    async def test_landing_page(self, app_client):
        response = await app_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/log-hours" in response.text

    async def test_health(self, app_client):
        response = await app_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
