from decimal import Decimal

from conftest import USER_ID


def test_stats_runs_one_count_per_table(client, fake_db, auth_headers):
    fake_db.on("FROM properties", {"count": 12})
    fake_db.on("FROM tenancies", {"count": 7})
    fake_db.on("FROM legal_cases", {"count": 2})
    fake_db.on("FROM compliance_checks", {"count": 4})
    fake_db.on("FROM maintenance_requests", {"count": 3})
    fake_db.on("FROM support_tickets", {"count": 1})
    fake_db.on("FROM notifications", {"count": 9})

    response = client.get("/api/dashboard/stats", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "total_properties": 12,
        "active_tenancies": 7,
        "open_legal_cases": 2,
        "pending_compliance_checks": 4,
        "open_maintenance_requests": 3,
        "open_tickets": 1,
        "unread_notifications": 9,
    }
    assert fake_db.args_for("FROM notifications") == (USER_ID,)
    assert len(fake_db.calls) == 7


def test_financial_summary_defaults_to_zero(client, fake_db, auth_headers):
    fake_db.on(
        "FROM rent_payments",
        {"total_payments": 3, "collected": Decimal("45000.00"), "pending": None, "overdue": Decimal("5000")},
    )
    fake_db.on("FROM property_expenses", {"total_expenses": 0, "total_amount": Decimal("0")})

    response = client.get("/api/dashboard/financial-summary", headers=auth_headers)

    assert response.json() == {
        "rent": {"total_payments": 3, "collected": 45000.0, "pending": 0.0, "overdue": 5000.0},
        "expenses": {"total_expenses": 0, "total_amount": 0.0},
        "subscription": None,
    }


def test_upcoming_groups(client, fake_db, auth_headers):
    fake_db.on("FROM inspections", [{"id": "i1"}])
    fake_db.on("FROM compliance_checks", [])
    fake_db.on("FROM rent_payments", [{"id": "r1"}, {"id": "r2"}])

    response = client.get("/api/dashboard/upcoming", headers=auth_headers)

    body = response.json()
    assert body["upcoming_inspections"] == [{"id": "i1"}]
    assert body["upcoming_compliance"] == []
    assert len(body["upcoming_rent"]) == 2


def test_recent_activity_is_capped(client, fake_db, auth_headers):
    response = client.get("/api/dashboard/recent-activity", headers=auth_headers)
    assert response.status_code == 200
    assert "LIMIT 10" in fake_db.sql_for("fetch_all")[0]
