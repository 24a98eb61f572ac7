"""Unit tests for the trigger analyzer."""

from fmb_parser import Block, Module, Trigger

from fmbconv.models import BusinessRuleType, SqlStatementKind, TriggerLevel
from fmbconv.triggers import TriggerAnalyzer, analyze_triggers


class TestTriggerAnalyzer:
    """Test module-wide trigger analysis."""

    def setup_method(self):
        self.analyzer = TriggerAnalyzer()

    def test_pre_insert_auto_populate(self, minimal_module):
        report = self.analyzer.analyze(minimal_module)
        trigger = report.block_triggers[0].triggers[0]

        assert trigger.name == "PRE-INSERT"
        assert trigger.level == TriggerLevel.BLOCK
        assert trigger.block_name == "B2"
        assert [r.type for r in trigger.business_rules] == [BusinessRuleType.AUTO_POPULATE]
        assert trigger.business_rules[0].affected_fields == ["b.slip_no"]
        assert not [s for s in trigger.sql_statements if s.kind == SqlStatementKind.CURSOR]
        assert trigger.summary == "auto-generate (slip_no)"
        assert trigger.maximo_location.startswith("Mbo.add()")

    def test_sequence_numbers_form_then_block(self, full_module):
        report = self.analyzer.analyze(full_module)
        numbers = [trigger.no for trigger in report.all_triggers]

        assert numbers == [1, 2, 3, 4]
        assert [t.level for t in report.form_triggers] == [TriggerLevel.FORM, TriggerLevel.FORM]
        assert all(t.block_name is None for t in report.form_triggers)

    def test_statistics_add_up(self, full_module):
        stats = self.analyzer.analyze(full_module).statistics

        assert stats.total_count == stats.form_level_count + stats.block_level_count == 4
        assert stats.form_level_count == 2
        assert sum(stats.by_event_type.values()) == stats.total_count
        assert stats.by_event_type["PRE-DELETE"] == 1

    def test_blocks_without_triggers_are_omitted(self, full_module):
        report = self.analyzer.analyze(full_module)
        assert [b.block_name for b in report.block_triggers] == ["HEAD"]

    def test_trivial_trigger_short_circuits(self, full_module):
        key_exit = self.analyzer.analyze(full_module).form_triggers[1]

        assert key_exit.name == "KEY-EXIT"
        assert key_exit.business_rules == []
        assert key_exit.sql_statements == []
        assert key_exit.summary == "System key operation"

    def test_decoded_text_is_reported(self, full_module):
        form_instance = self.analyzer.analyze(full_module).form_triggers[0]
        assert form_instance.trigger_text == "go_block('HEAD');\nexecute_query;"
        assert form_instance.summary == "navigation"

    def test_validation_and_delete_check(self, full_module):
        head = self.analyzer.analyze(full_module).block_triggers[0]
        validate_item, pre_delete = head.triggers

        assert validate_item.business_rules[0].description == "Validation rule: Department is required"
        assert validate_item.business_rules[0].affected_fields == ["head.dept_no"]
        assert [r.type for r in pre_delete.business_rules] == [
            BusinessRuleType.VALIDATION,
            BusinessRuleType.DELETE_CHECK,
        ]
        assert pre_delete.summary == "validation; delete-check"
        assert pre_delete.sql_statements[0].tables == ["gls_detail"]

    def test_null_trigger(self):
        module = Module(name="F", triggers=(Trigger(name="KEY-NXTREC", text="null;"),))
        trigger = analyze_triggers(module).form_triggers[0]
        assert trigger.business_rules == []
        assert trigger.summary == "No special handling"

    def test_missing_text_is_custom(self):
        module = Module(name="F", blocks=(Block(name="B", triggers=(Trigger(name="POST-QUERY"),)),))
        trigger = analyze_triggers(module).block_triggers[0].triggers[0]
        assert trigger.trigger_text == ""
        assert [r.type for r in trigger.business_rules] == [BusinessRuleType.CUSTOM]
        assert trigger.summary == "Query handling"

    def test_unknown_event(self):
        module = Module(name="F", triggers=(Trigger(name="my-event", text="null;"),))
        report = analyze_triggers(module)
        trigger = report.form_triggers[0]
        assert trigger.event_description == "MY-EVENT trigger"
        assert report.statistics.by_event_type == {"my-event": 1}

    def test_empty_module(self):
        report = analyze_triggers(Module(name="F"))
        assert report.all_triggers == []
        assert report.statistics.total_count == 0
        assert report.statistics.by_event_type == {}

    def test_json_dump_uses_camel_case(self, minimal_module):
        data = analyze_triggers(minimal_module).model_dump(mode="json", by_alias=True)
        trigger = data["blockTriggers"][0]["triggers"][0]
        assert trigger["businessRules"][0]["type"] == "AUTO_POPULATE"
        assert trigger["businessRules"][0]["affectedFields"] == ["b.slip_no"]
        assert data["statistics"]["totalCount"] == 1
