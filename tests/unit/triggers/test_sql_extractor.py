"""Unit tests for SQL extraction from trigger text."""

from fmbconv.config import AnalyzerConfig
from fmbconv.models import SqlStatementKind
from fmbconv.triggers import extract_select_fields, extract_sql_statements, extract_tables


class TestHelpers:
    """Test table and column helpers."""

    def test_extract_tables(self):
        assert extract_tables("from Orders o, x where y in (select 1 from ORDERS)") == ["orders"]

    def test_extract_select_fields(self):
        assert extract_select_fields("distinct a.id, name as n, upper(x), *, name") == ["a.id", "name"]


class TestExtraction:
    """Test the four extraction passes."""

    def test_cursor_declaration(self):
        text = "cursor c1 is select d.dept_no, dept_name from gls_dept d where d.dept_no = :head.dept_no;\nbegin null; end;"
        statements = extract_sql_statements(text)

        assert len(statements) == 1
        cursor = statements[0]
        assert cursor.kind == SqlStatementKind.CURSOR
        assert cursor.statement.startswith("select d.dept_no")
        assert cursor.tables == ["gls_dept"]
        assert cursor.fields == ["d.dept_no", "dept_name"]

    def test_select_into(self):
        text = "select count(*), max(line_no) into v_count, v_max from GLS_DETAIL where voucher_no = :head.voucher_no;"
        statements = extract_sql_statements(text)

        assert [s.kind for s in statements] == [SqlStatementKind.SELECT]
        assert statements[0].tables == ["gls_detail"]
        assert statements[0].fields == []

    def test_cursor_is_not_reported_again_as_select(self):
        text = (
            "cursor c1 is select a from t1;\n"
            "begin\n"
            "  select b into v_b from t2 where id = 1;\n"
            "end;"
        )
        statements = extract_sql_statements(text)
        assert [s.kind for s in statements] == [SqlStatementKind.CURSOR, SqlStatementKind.SELECT]
        assert statements[1].tables == ["t2"]
        assert statements[1].fields == ["b"]

    def test_function_assignment(self):
        statements = extract_sql_statements(":b.slip_no := sf_ars_0012('TP', :b.slip_date);")

        assert len(statements) == 1
        assert statements[0].kind == SqlStatementKind.FUNCTION_CALL
        assert statements[0].fields == ["b.slip_no"]
        assert "sf_ars_0012" in statements[0].statement

    def test_builtin_conversions_are_ignored(self):
        text = ":b.d := to_date(:b.s, 'YYYYMMDD');\n:b.n := NVL(:b.n, 0);\n:b.x := null;"
        assert extract_sql_statements(text) == []

    def test_procedure_calls(self):
        text = "p_check_status;\np_recalc(:head.voucher_no);\nsf_log;"
        statements = extract_sql_statements(text)

        assert [s.statement for s in statements] == ["p_check_status", "p_recalc(...)", "sf_log"]
        assert all(s.kind == SqlStatementKind.FUNCTION_CALL for s in statements)

    def test_procedure_inside_identifier_is_ignored(self):
        assert extract_sql_statements("v_temp_x;\napp_x;") == []

    def test_configured_prefixes_and_builtins(self):
        config = AnalyzerConfig(procedure_prefixes=["pkg_"], builtin_functions=["sf_ars_0012"])
        text = ":b.slip_no := sf_ars_0012('TP');\npkg_post(:b.id);\np_other;"
        statements = extract_sql_statements(text, config)
        assert [s.statement for s in statements] == ["pkg_post(...)"]
