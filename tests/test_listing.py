import asyncio

import pytest

from core.listing import DEFAULT_LIMIT, MAX_LIMIT, ListQuery, Page, count_sql, paginate


class TestPaginate:
    def test_defaults(self):
        assert paginate() == Page(limit=DEFAULT_LIMIT, offset=0)

    def test_page_and_limit(self):
        assert paginate("3", "10") == Page(limit=10, offset=20)

    def test_limit_is_capped(self):
        assert paginate("1", "500") == Page(limit=MAX_LIMIT, offset=0)

    def test_zero_and_garbage_fall_back(self):
        assert paginate("0", "abc") == Page(limit=DEFAULT_LIMIT, offset=0)

    def test_negative_values_are_clamped(self):
        assert paginate("-2", "-5") == Page(limit=1, offset=0)

    def test_leading_digits_are_used(self):
        assert paginate("2abc", "15x") == Page(limit=15, offset=15)


class TestCountSql:
    def test_replaces_multiline_select_list(self):
        sql = """
            SELECT p.*, a.line1,
                   a.city
            FROM properties p
            LEFT JOIN addresses a ON a.id = p.address_id
            WHERE 1=1 AND p.property_type = $1
        """
        counted = count_sql(sql)
        assert counted.startswith("SELECT COUNT(*) FROM properties p")
        assert "AND p.property_type = $1" in counted

    def test_rejects_non_select(self):
        with pytest.raises(ValueError):
            count_sql("UPDATE properties SET title = $1")


class TestListQuery:
    def test_skips_absent_filters(self):
        query = ListQuery("SELECT * FROM inspections i WHERE 1=1")
        query.where("i.property_id", None).where("i.status", "").where("i.inspection_type", "fire")
        assert query.sql.endswith("AND i.inspection_type = $1")
        assert query.params == ["fire"]

    def test_false_is_a_real_filter(self):
        query = ListQuery("SELECT * FROM notifications WHERE user_id = $1", "u1")
        query.where("is_read", False)
        assert query.sql.endswith("AND is_read = $2")
        assert query.params == ["u1", False]

    def test_page_sql_appends_limit_and_offset_after_filters(self):
        query = ListQuery("SELECT * FROM documents d WHERE 1=1").where("d.document_type", "deed")
        assert query.page_sql("d.created_at DESC").endswith(
            "AND d.document_type = $1 ORDER BY d.created_at DESC LIMIT $2 OFFSET $3"
        )

    def test_fetch_page_counts_with_same_filters(self, fake_db):
        fake_db.one.append({"count": 42})
        fake_db.all.append([{"id": "a"}, {"id": "b"}])

        query = ListQuery("SELECT d.* FROM documents d WHERE 1=1").where("d.document_type", "deed")
        result = asyncio.run(query.fetch_page(order_by="d.created_at DESC", page=Page(limit=2, offset=4)))

        assert result == {"data": [{"id": "a"}, {"id": "b"}], "total": 42, "limit": 2, "offset": 4}
        (count_call, page_call) = fake_db.calls
        assert count_call[1].startswith("SELECT COUNT(*) FROM documents d")
        assert count_call[2] == ("deed",)
        assert page_call[2] == ("deed", 2, 4)

    def test_fetch_page_propagates_storage_errors(self, fake_db):
        fake_db.error = RuntimeError("connection lost")
        query = ListQuery("SELECT * FROM properties p WHERE 1=1")
        with pytest.raises(RuntimeError):
            asyncio.run(query.fetch_page(order_by="p.created_at DESC", page=Page(limit=20, offset=0)))
