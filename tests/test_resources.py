"""
Route-level behavior of the record groups beyond properties: required fields,
defaults, filters, nested sub-resources, and static routes that sit next to
`/{id}` routes.
"""

from datetime import date

import pytest

from conftest import USER_ID

RECORD_ID = "66666666-6666-6666-6666-666666666666"
PROPERTY_ID = "33333333-3333-3333-3333-333333333333"


@pytest.mark.parametrize(
    "path, body, message",
    [
        ("/api/tenancies", {"property_id": PROPERTY_ID}, "property_id, tenant_id, lease_start, and monthly_rent are required"),
        ("/api/legal-cases", {"summary": "Boundary dispute"}, "summary and case_type are required"),
        ("/api/compliance", {}, "property_id and check_type are required"),
        ("/api/compliance/audit-cycles", {"audit_year": 2025}, "property_id, audit_year, and audit_label are required"),
        ("/api/inspections", {"property_id": PROPERTY_ID}, "property_id, inspection_type, and scheduled_at are required"),
        ("/api/maintenance", {"description": "Leaking tap"}, "property_id and description are required"),
        ("/api/support-tickets", {"subject": "Gate remote"}, "subject and ticket_type are required"),
        ("/api/documents", {"title": "Sale deed"}, "title and storage_key are required"),
        ("/api/expenses", {"property_id": PROPERTY_ID}, "property_id, expense_category, and amount are required"),
        ("/api/construction", {"title": "Compound wall"}, "property_id and title are required"),
        ("/api/obligations", {}, "property_id and obligation_type are required"),
        ("/api/revenue-records", {"record_type": "patta"}, "property_id and record_type are required"),
        ("/api/handovers", {"property_id": PROPERTY_ID}, "property_id and handover_type are required"),
        ("/api/poa", {"poa_scope": "sale"}, "owner_id, attorney_holder_id, and poa_scope are required"),
        ("/api/escalations", {"rule_name": "SLA"}, "rule_name, entity_type, and escalate_to_role are required"),
        ("/api/escalations/events", {"entity_type": "ticket"}, "entity_type and entity_id are required"),
    ],
)
def test_create_requires_fields(client, fake_db, auth_headers, path, body, message):
    response = client.post(path, json=body, headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert fake_db.calls == []


@pytest.mark.parametrize(
    "path, entity",
    [
        ("/api/tenancies", "Tenancy"),
        ("/api/legal-cases", "Legal case"),
        ("/api/compliance", "Compliance check"),
        ("/api/inspections", "Inspection"),
        ("/api/maintenance", "Maintenance request"),
        ("/api/support-tickets", "Support ticket"),
        ("/api/documents", "Document"),
        ("/api/expenses", "Expense"),
        ("/api/construction", "Construction project"),
        ("/api/obligations", "Obligation"),
        ("/api/revenue-records", "Revenue record"),
        ("/api/handovers", "Handover"),
        ("/api/poa", "Power of attorney"),
        ("/api/escalations", "Escalation rule"),
    ],
)
def test_missing_records(client, fake_db, auth_headers, path, entity):
    assert client.get(f"{path}/{RECORD_ID}", headers=auth_headers).json() == {"error": f"{entity} not found"}
    assert client.put(f"{path}/{RECORD_ID}", json={}, headers=auth_headers).status_code == 404
    assert client.delete(f"{path}/{RECORD_ID}", headers=auth_headers).status_code == 404


class TestTenancies:
    def test_payment_defaults(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": "p1"})
        response = client.post(
            f"/api/tenancies/{RECORD_ID}/payments",
            json={"amount_due": "25000", "due_date": "2025-07-05"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        args = fake_db.calls[0][2]
        assert args[3] == 0
        assert args[5] == "due"

    def test_payment_update_is_not_taken_for_a_tenancy_id(self, client, fake_db, auth_headers):
        response = client.put(f"/api/tenancies/payments/{RECORD_ID}", json={"amount_paid": "100"}, headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Payment not found"}
        assert "UPDATE rent_payments" in fake_db.calls[0][1]

    def test_payments_are_paginated(self, client, fake_db, auth_headers):
        client.get(f"/api/tenancies/{RECORD_ID}/payments?page=3&limit=10", headers=auth_headers)
        assert fake_db.calls[0][2][1:] == (10, 20)


class TestLegalCases:
    def test_create_sets_opener_and_defaults(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO legal_cases", {"id": RECORD_ID})
        response = client.post(
            "/api/legal-cases",
            json={"summary": "Boundary dispute", "case_type": "civil"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        args = fake_db.args_for("INSERT INTO legal_cases")
        assert args[4:6] == ("open", "medium")
        assert args[-1] == USER_ID

    def test_update_visible_to_owner_unless_false(self, client, fake_db, auth_headers):
        fake_db.one.extend([{"id": "u1"}, {"id": "u2"}])
        client.post(f"/api/legal-cases/{RECORD_ID}/updates", json={"content": "Hearing set"}, headers=auth_headers)
        client.post(
            f"/api/legal-cases/{RECORD_ID}/updates",
            json={"content": "Internal note", "is_visible_to_owner": False},
            headers=auth_headers,
        )
        first, second = [args for _, _, args in fake_db.calls]
        assert first[1] == "note" and first[3] is True
        assert second[3] is False

    def test_status_filter(self, client, fake_db, auth_headers):
        fake_db.one.append({"count": 0})
        client.get("/api/legal-cases?status=open&case_type=civil", headers=auth_headers)
        assert fake_db.calls[0][2] == ("open", "civil")


class TestCompliance:
    def test_audit_cycles_route_is_not_a_check_id(self, client, fake_db, auth_headers):
        fake_db.all.append([{"id": "c1"}])
        response = client.get("/api/compliance/audit-cycles", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == [{"id": "c1"}]

    def test_audit_cycle_default_status(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": "c1"})
        response = client.post(
            "/api/compliance/audit-cycles",
            json={"property_id": PROPERTY_ID, "audit_year": 2025, "audit_label": "FY25", "property_type_checklist": ["fire"]},
            headers=auth_headers,
        )
        assert response.status_code == 201
        args = fake_db.calls[0][2]
        assert args[3] == ["fire"]
        assert args[4] == "scheduled"

    def test_missing_audit_cycle(self, client, fake_db, auth_headers):
        response = client.get(f"/api/compliance/audit-cycles/{RECORD_ID}", headers=auth_headers)
        assert response.json() == {"error": "Audit cycle not found"}

    def test_checks_ordered_by_due_date(self, client, fake_db, auth_headers):
        fake_db.one.append({"count": 0})
        client.get("/api/compliance?check_type=fire_noc", headers=auth_headers)
        assert "ORDER BY cc.due_date ASC" in fake_db.calls[1][1]


class TestInspections:
    def test_type_filter_maps_to_inspection_type(self, client, fake_db, auth_headers):
        fake_db.one.append({"count": 0})
        client.get("/api/inspections?type=move_out&status=scheduled", headers=auth_headers)
        count_sql = fake_db.calls[0][1]
        assert "i.status = $1" in count_sql and "i.inspection_type = $2" in count_sql
        assert fake_db.calls[0][2] == ("scheduled", "move_out")

    def test_create_defaults_to_scheduled(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO inspections", {"id": RECORD_ID})
        response = client.post(
            "/api/inspections",
            json={"property_id": PROPERTY_ID, "inspection_type": "routine", "scheduled_at": "2025-08-01T10:00:00"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert fake_db.args_for("INSERT INTO inspections")[3] == "scheduled"

    def test_media(self, client, fake_db, auth_headers):
        assert client.post(f"/api/inspections/{RECORD_ID}/media", json={}, headers=auth_headers).json() == {
            "error": "storage_key is required"
        }
        fake_db.one.append({"id": "m1"})
        response = client.post(
            f"/api/inspections/{RECORD_ID}/media",
            json={"storage_key": "inspections/1/front.jpg", "latitude": 15.5},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert fake_db.calls[0][2][2] == "photo"


class TestMaintenanceAndTickets:
    def test_maintenance_raised_by_caller(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO maintenance_requests", {"id": RECORD_ID})
        client.post(
            "/api/maintenance",
            json={"property_id": PROPERTY_ID, "description": "Leaking tap"},
            headers=auth_headers,
        )
        args = fake_db.args_for("INSERT INTO maintenance_requests")
        assert args[3:5] == ("medium", "open")
        assert args[-1] == USER_ID

    def test_ticket_messages(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": "tm1"})
        response = client.post(
            f"/api/support-tickets/{RECORD_ID}/messages",
            json={"message_body": "Any update?"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert fake_db.calls[0][2][1:] == (USER_ID, "Any update?", False)

    def test_ticket_messages_oldest_first(self, client, fake_db, auth_headers):
        client.get(f"/api/support-tickets/{RECORD_ID}/messages", headers=auth_headers)
        assert "ORDER BY tm.created_at ASC" in fake_db.calls[0][1]


class TestDocumentsAndExpenses:
    def test_document_defaults(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO documents", {"id": RECORD_ID})
        client.post(
            "/api/documents",
            json={"title": "Sale deed", "storage_key": "docs/deed.pdf"},
            headers=auth_headers,
        )
        args = fake_db.args_for("INSERT INTO documents")
        assert args[2] == USER_ID
        assert args[3] == "other"
        assert args[9] is False

    def test_expense_defaults(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO property_expenses", {"id": RECORD_ID})
        response = client.post(
            "/api/expenses",
            json={"property_id": PROPERTY_ID, "expense_category": "repairs", "amount": "1200.50"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        args = fake_db.args_for("INSERT INTO property_expenses")
        assert args[5] == "INR"
        assert args[6] == date.today()
        assert args[8] == "pending"

    def test_summary_needs_property(self, client, fake_db, auth_headers):
        response = client.get("/api/expenses/summary", headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "property_id query parameter is required"}

    def test_summary_by_category(self, client, fake_db, auth_headers):
        fake_db.all.append([{"expense_category": "repairs", "count": 2}])
        response = client.get(f"/api/expenses/summary?property_id={PROPERTY_ID}", headers=auth_headers)
        assert response.json() == [{"expense_category": "repairs", "count": 2}]
        assert "GROUP BY expense_category" in fake_db.calls[0][1]


class TestNotifications:
    def test_unread_count(self, client, fake_db, auth_headers):
        fake_db.one.append({"count": 4})
        assert client.get("/api/notifications/unread-count", headers=auth_headers).json() == {"count": 4}

    def test_read_all(self, client, fake_db, auth_headers):
        response = client.put("/api/notifications/read-all", headers=auth_headers)
        assert response.json() == {"message": "All notifications marked as read"}
        assert fake_db.calls[0][2] == (USER_ID,)

    def test_list_is_scoped_and_filterable(self, client, fake_db, auth_headers):
        fake_db.one.append({"count": 1})
        client.get("/api/notifications?is_read=false", headers=auth_headers)
        assert fake_db.calls[0][2] == (USER_ID, False)

    def test_mark_read_only_own(self, client, fake_db, auth_headers):
        response = client.put(f"/api/notifications/{RECORD_ID}/read", headers=auth_headers)
        assert response.json() == {"error": "Notification not found"}
        assert fake_db.calls[0][2][1] == USER_ID


class TestConstructionAndObligations:
    def test_project_defaults(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO construction_projects", {"id": RECORD_ID})
        client.post("/api/construction", json={"property_id": PROPERTY_ID, "title": "Compound wall"}, headers=auth_headers)
        args = fake_db.args_for("INSERT INTO construction_projects")
        assert args[1] == USER_ID
        assert args[5] == "planned"
        assert args[10] == "INR"

    def test_milestones(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": "ms1"})
        client.post(f"/api/construction/{RECORD_ID}/milestones", json={"title": "Foundation"}, headers=auth_headers)
        assert fake_db.calls[0][2][3:6] == (0, None, "pending")

        response = client.put(f"/api/construction/milestones/{RECORD_ID}", json={"status": "done"}, headers=auth_headers)
        assert response.json() == {"error": "Milestone not found"}

    def test_obligation_active_by_default(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO property_obligations", {"id": RECORD_ID})
        client.post(
            "/api/obligations",
            json={"property_id": PROPERTY_ID, "obligation_type": "property_tax"},
            headers=auth_headers,
        )
        args = fake_db.args_for("INSERT INTO property_obligations")
        assert args[4] == "INR"
        assert args[-1] is True

    def test_obligation_payment_default_status(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": "op1"})
        client.post(f"/api/obligations/{RECORD_ID}/payments", json={"amount_due": "3400"}, headers=auth_headers)
        assert fake_db.calls[0][2][5] == "due"


class TestHandoversPoaEscalations:
    def test_handover_items(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": "hi1"})
        client.post(f"/api/handovers/{RECORD_ID}/items", json={"item_type": "keys"}, headers=auth_headers)
        assert fake_db.calls[0][2][4] == "pending"

        response = client.put(f"/api/handovers/items/{RECORD_ID}", json={"status": "done"}, headers=auth_headers)
        assert response.json() == {"error": "Handover item not found"}

    def test_handover_initiated_by_caller(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO service_handovers", {"id": RECORD_ID})
        client.post("/api/handovers", json={"property_id": PROPERTY_ID, "handover_type": "exit"}, headers=auth_headers)
        args = fake_db.args_for("INSERT INTO service_handovers")
        assert args[2] == USER_ID
        assert args[5] == "initiated"

    def test_poa_draft_by_default(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO powers_of_attorney", {"id": RECORD_ID})
        client.post(
            "/api/poa",
            json={"owner_id": USER_ID, "attorney_holder_id": RECORD_ID, "poa_scope": "sale"},
            headers=auth_headers,
        )
        assert fake_db.args_for("INSERT INTO powers_of_attorney")[5] == "draft"

    def test_rule_channels_stored_as_json(self, client, fake_db, auth_headers):
        fake_db.on("INSERT INTO escalation_rules", {"id": RECORD_ID})
        client.post(
            "/api/escalations",
            json={"rule_name": "SLA", "entity_type": "ticket", "escalate_to_role": "admin", "notify_channels": ["email", "sms"]},
            headers=auth_headers,
        )
        args = fake_db.args_for("INSERT INTO escalation_rules")
        assert args[6] == '["email", "sms"]'
        assert args[7] is True

    def test_events_route_is_not_a_rule_id(self, client, fake_db, auth_headers):
        fake_db.all.append([{"id": "e1"}])
        response = client.get("/api/escalations/events", headers=auth_headers)
        assert response.json() == [{"id": "e1"}]
        assert "FROM escalation_events" in fake_db.calls[0][1]

    def test_empty_channels_clear_the_rule(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": RECORD_ID, "notify_channels": []})
        response = client.put(f"/api/escalations/{RECORD_ID}", json={"notify_channels": []}, headers=auth_headers)
        assert response.status_code == 200
        args = fake_db.calls[0][2]
        assert args[6] == "[]"
        assert args[7] is None


class TestPartialUpdate:
    def test_status_only_touches_status(self, client, fake_db, auth_headers):
        fake_db.one.append({"id": RECORD_ID, "status": "closed"})
        response = client.put(f"/api/maintenance/{RECORD_ID}", json={"status": "closed"}, headers=auth_headers)

        assert response.status_code == 200
        sql, args = fake_db.calls[0][1], fake_db.calls[0][2]
        assert "updated_at = NOW()" in sql
        fields, record_id = args[:-1], args[-1]
        assert [value for value in fields if value is not None] == ["closed"]
        assert fields[3] == "closed"
        assert str(record_id) == RECORD_ID
