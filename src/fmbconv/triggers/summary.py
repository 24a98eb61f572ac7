"""One-line trigger summaries."""

from typing import Callable, Dict, List, Optional

from ..models.triggers import BusinessRule, BusinessRuleType
from .decoding import TrivialKind

TRIVIAL_SUMMARIES: Dict[TrivialKind, str] = {
    TrivialKind.NULL: 'No special handling',
    TrivialKind.DO_KEY: 'System key operation',
}
NO_RULES_SUMMARY = TRIVIAL_SUMMARIES[TrivialKind.NULL]
SUMMARY_SEPARATOR = '; '


def _auto_populate_phrase(rules: List[BusinessRule]) -> str:
    names = [
        field.split('.')[-1]
        for rule in rules
        for field in rule.affected_fields
    ]
    return f"auto-generate ({', '.join(names)})" if names else 'auto-generate'


# Phrase builders in summary order
SUMMARY_PHRASES: Dict[BusinessRuleType, Callable[[List[BusinessRule]], str]] = {
    BusinessRuleType.VALIDATION: lambda rules: 'validation',
    BusinessRuleType.AUTO_POPULATE: _auto_populate_phrase,
    BusinessRuleType.CALCULATION: lambda rules: 'calculation',
    BusinessRuleType.NAVIGATION: lambda rules: 'navigation',
    BusinessRuleType.MASTER_DETAIL: lambda rules: 'master-detail',
    BusinessRuleType.DELETE_CHECK: lambda rules: 'delete-check',
}


def summarize_rules(rules: List[BusinessRule], trivial: Optional[TrivialKind] = None) -> str:
    """Build the summary line for a trigger's rules.

    Examples:
        >>> summarize_rules([], TrivialKind.DO_KEY)
        'System key operation'
    """
    if trivial is not None:
        return TRIVIAL_SUMMARIES[trivial]
    if not rules:
        return NO_RULES_SUMMARY

    parts = []
    for rule_type, phrase in SUMMARY_PHRASES.items():
        matching = [rule for rule in rules if rule.type == rule_type]
        if matching:
            parts.append(phrase(matching))

    if parts:
        return SUMMARY_SEPARATOR.join(parts)

    custom = next((rule for rule in rules if rule.type == BusinessRuleType.CUSTOM), None)
    return custom.description if custom is not None else NO_RULES_SUMMARY
