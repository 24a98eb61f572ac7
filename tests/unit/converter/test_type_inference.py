"""Unit tests for Maximo type inference."""

import pytest

from fmbconv.converter import TYPE_RULES, TypeRule, infer_max_type
from fmbconv.models import MaxType


class TestInferMaxType:
    """Test the ordered name rules."""

    def test_datetime_checked_before_date(self):
        assert infer_max_type("CREATE_DATETIME") == MaxType.DATETIME
        assert infer_max_type("CREATE_DATE") == MaxType.DATE

    def test_case_insensitive(self):
        assert infer_max_type("total_amount") == infer_max_type("TOTAL_AMOUNT") == MaxType.AMOUNT

    @pytest.mark.parametrize("name,expected", [
        ("UNIT_PRICE", MaxType.AMOUNT),
        ("LINE_AMT", MaxType.AMOUNT),
        ("COST_DATE", MaxType.AMOUNT),
        ("START_TIME", MaxType.DATETIME),
        ("DATE", MaxType.DATE),
        ("POST_FLAG", MaxType.YORN),
        ("IS_ACTIVE", MaxType.YORN),
        ("CLOSED_YN", MaxType.YORN),
        ("ORDER_QTY", MaxType.INTEGER),
        ("LINE_SEQ", MaxType.INTEGER),
        ("COUNT", MaxType.INTEGER),
        ("DEPT_NAME", MaxType.ALN),
        ("", MaxType.ALN),
    ])
    def test_rules(self, name, expected):
        assert infer_max_type(name) == expected

    def test_custom_rule_table(self):
        rules = (TypeRule("code", lambda n: n.endswith("_CODE"), MaxType.INTEGER),) + TYPE_RULES
        assert infer_max_type("DEPT_CODE", rules) == MaxType.INTEGER
        assert infer_max_type("DEPT_CODE") == MaxType.ALN
