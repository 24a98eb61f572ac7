"""Trigger analysis: SQL extraction, business rules and event lookup."""

from .analyzer import TriggerAnalyzer, analyze_triggers, generate_trigger_summary
from .decoding import TrivialKind, classify_trivial, decode_trigger_text, is_trivial_trigger
from .events import TRIGGER_EVENTS, get_trigger_event_info
from .rules import RULE_DETECTORS, RuleClassifier, analyze_business_rules, extract_affected_fields
from .sql_extractor import SqlExtractor, extract_select_fields, extract_sql_statements, extract_tables
from .summary import summarize_rules

__all__ = [
    'TriggerAnalyzer',
    'analyze_triggers',
    'generate_trigger_summary',
    'TrivialKind',
    'classify_trivial',
    'decode_trigger_text',
    'is_trivial_trigger',
    'TRIGGER_EVENTS',
    'get_trigger_event_info',
    'RULE_DETECTORS',
    'RuleClassifier',
    'analyze_business_rules',
    'extract_affected_fields',
    'SqlExtractor',
    'extract_select_fields',
    'extract_sql_statements',
    'extract_tables',
    'summarize_rules',
]
