from __future__ import annotations

import importlib
from datetime import date

import pytest
from helpers import local_ts, punch

from guard_payroll.container import build_container
from guard_payroll.main import create_app
from guard_payroll.punches.repository import InMemoryPunchEventSource

MONDAY = date(2025, 1, 6)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = importlib.import_module("guard_payroll.config.testing")
    source = InMemoryPunchEventSource([punch("A", MONDAY, 6, 20), punch("B", MONDAY, 7, 1)])
    app = create_app(container=build_container(settings=settings, punch_source=source))
    return app.test_client()


def test_get_payroll_for_range(client):
    resp = client.get("/api/payroll?start=2025-01-06&end=2025-01-07")

    assert resp.status_code == 200
    data = resp.get_json()
    assert [s["guardName"] for s in data] == ["A", "B"]
    assert data[0]["netPayable"] == 420
    assert data[1]["totalDeduction"] == 35
    assert data[0]["details"][1]["note"] == "ขาดงาน"


def test_get_payroll_for_period_and_guard(client):
    resp = client.get("/api/payroll?month=2025-01&period=1&guard=B")

    data = resp.get_json()
    assert [s["guardName"] for s in data] == ["B"]
    assert len(data[0]["details"]) == 15


def test_bad_query_is_400(client):
    assert client.get("/api/payroll").status_code == 400
    resp = client.get("/api/payroll?month=2025-13")
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert client.get("/api/payroll?start=2025-01-06").status_code == 400


def test_post_payroll_uses_posted_events(client):
    body = {
        "start": "2025-01-06",
        "end": "2025-01-06",
        "events": [
            {"guardName": "C", "eventType": "Check-in", "timestamp": local_ts(MONDAY, 6, 46), "rowIndex": 2},
            {"guardName": "C", "eventType": "Check-out", "timestamp": "6-1-2568 18:30", "rowIndex": 3},
        ],
    }
    resp = client.post("/api/payroll", json=body)

    assert resp.status_code == 200
    data = resp.get_json()
    assert data[0]["guardName"] == "C"
    assert data[0]["details"][0]["lateMinutes"] == 16
    assert data[0]["details"][0]["checkOut"] == "2025-01-06T11:30:00.000Z"
    assert data[0]["netPayable"] == 402.5


def test_post_payroll_rejects_bad_body(client):
    assert client.post("/api/payroll", json={"start": "2025-01-06", "end": "2025-01-06"}).status_code == 400
    assert client.post("/api/payroll", data="nope").status_code == 400
    no_guard = {"start": "2025-01-06", "end": "2025-01-06", "events": [{"eventType": "x", "timestamp": "y"}]}
    assert client.post("/api/payroll", json=no_guard).status_code == 400


def test_csv_and_excel_downloads(client):
    csv_resp = client.get("/payroll/report.csv?month=2025-01&period=1")
    assert csv_resp.status_code == 200
    assert csv_resp.mimetype == "text/csv"
    assert "payroll_2025-01_1.csv" in csv_resp.headers["Content-Disposition"]

    xlsx_resp = client.get("/payroll/report.xlsx?start=2025-01-06&end=2025-01-06")
    assert xlsx_resp.status_code == 200
    assert xlsx_resp.data[:2] == b"PK"


def test_guards_and_status(client):
    assert client.get("/api/guards").get_json() == ["A", "B"]
    assert client.get("/api/guards/status").get_json()["status"] in {
        "HOLIDAY",
        "OUTSIDE_HOURS",
        "WORKING",
        "ABSENT",
    }
