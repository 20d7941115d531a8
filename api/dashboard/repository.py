"""
Read-only aggregate queries behind the dashboard.
"""

from __future__ import annotations

import asyncio

from core import db

STAT_QUERIES = {
    "total_properties": ("SELECT COUNT(*) AS count FROM properties", False),
    "active_tenancies": ("SELECT COUNT(*) AS count FROM tenancies WHERE agreement_status = 'active'", False),
    "open_legal_cases": (
        "SELECT COUNT(*) AS count FROM legal_cases WHERE status IN ('open', 'in_progress')",
        False,
    ),
    "pending_compliance_checks": (
        "SELECT COUNT(*) AS count FROM compliance_checks WHERE status = 'pending'",
        False,
    ),
    "open_maintenance_requests": (
        "SELECT COUNT(*) AS count FROM maintenance_requests WHERE status IN ('open', 'in_progress')",
        False,
    ),
    "open_tickets": (
        "SELECT COUNT(*) AS count FROM support_tickets WHERE status IN ('open', 'in_progress')",
        False,
    ),
    "unread_notifications": (
        "SELECT COUNT(*) AS count FROM notifications WHERE user_id = $1 AND is_read = false",
        True,
    ),
}


def _count(row: dict | None, key: str = "count") -> int:
    return int(row[key]) if row and row.get(key) is not None else 0


def _amount(row: dict | None, key: str) -> float:
    return float(row[key]) if row and row.get(key) is not None else 0.0


async def stats(user_id: str) -> dict:
    names = list(STAT_QUERIES)
    rows = await asyncio.gather(
        *(
            db.fetch_one(sql, user_id) if scoped else db.fetch_one(sql)
            for sql, scoped in STAT_QUERIES.values()
        )
    )
    return {name: _count(row) for name, row in zip(names, rows)}


async def recent_activity() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT al.*, u.first_name, u.last_name, u.email
        FROM audit_logs al
        LEFT JOIN app_users u ON u.id = al.actor_user_id
        ORDER BY al.created_at DESC
        LIMIT 10
        """
    )


async def financial_summary(user_id: str) -> dict:
    rent = await db.fetch_one(
        """
        SELECT COUNT(*) AS total_payments,
               SUM(CASE WHEN payment_status = 'paid' THEN amount_due ELSE 0 END) AS collected,
               SUM(CASE WHEN payment_status = 'due' THEN amount_due ELSE 0 END) AS pending,
               SUM(CASE WHEN payment_status = 'overdue' THEN amount_due ELSE 0 END) AS overdue
        FROM rent_payments
        WHERE due_date >= date_trunc('month', CURRENT_DATE)
          AND due_date < date_trunc('month', CURRENT_DATE) + interval '1 month'
        """
    )
    expenses = await db.fetch_one(
        """
        SELECT COUNT(*) AS total_expenses, COALESCE(SUM(amount), 0) AS total_amount
        FROM property_expenses
        WHERE expense_date >= date_trunc('month', CURRENT_DATE)
          AND expense_date < date_trunc('month', CURRENT_DATE) + interval '1 month'
        """
    )
    subscription = await db.fetch_one(
        """
        SELECT ps.*, sp.name AS plan_name, sp.plan_code, sp.base_price
        FROM property_subscriptions ps
        JOIN subscription_plans sp ON sp.id = ps.plan_id
        JOIN properties p ON p.id = ps.property_id
        JOIN property_owners po ON po.property_id = p.id AND po.user_id = $1
        WHERE ps.status = 'active'
        ORDER BY ps.created_at DESC
        LIMIT 1
        """,
        user_id,
    )
    return {
        "rent": {
            "total_payments": _count(rent, "total_payments"),
            "collected": _amount(rent, "collected"),
            "pending": _amount(rent, "pending"),
            "overdue": _amount(rent, "overdue"),
        },
        "expenses": {
            "total_expenses": _count(expenses, "total_expenses"),
            "total_amount": _amount(expenses, "total_amount"),
        },
        "subscription": subscription,
    }


async def upcoming() -> dict:
    inspections, compliance, rent = await asyncio.gather(
        db.fetch_all(
            """
            SELECT i.id, i.inspection_type, i.scheduled_at, i.status, p.title AS property_name
            FROM inspections i
            JOIN properties p ON p.id = i.property_id
            WHERE i.scheduled_at >= CURRENT_DATE AND i.status = 'scheduled'
            ORDER BY i.scheduled_at ASC
            LIMIT 10
            """
        ),
        db.fetch_all(
            """
            SELECT cc.id, cc.check_type, cc.due_date, cc.status, cc.notes, p.title AS property_name
            FROM compliance_checks cc
            LEFT JOIN properties p ON p.id = cc.property_id
            WHERE cc.due_date >= CURRENT_DATE AND cc.status IN ('pending', 'in_review')
            ORDER BY cc.due_date ASC
            LIMIT 10
            """
        ),
        db.fetch_all(
            """
            SELECT rp.id, rp.amount_due, rp.due_date, rp.payment_status, p.title AS property_name
            FROM rent_payments rp
            JOIN tenancies t ON t.id = rp.tenancy_id
            JOIN properties p ON p.id = t.property_id
            WHERE rp.due_date >= CURRENT_DATE AND rp.payment_status = 'due'
            ORDER BY rp.due_date ASC
            LIMIT 10
            """
        ),
    )
    return {
        "upcoming_inspections": inspections,
        "upcoming_compliance": compliance,
        "upcoming_rent": rent,
    }
