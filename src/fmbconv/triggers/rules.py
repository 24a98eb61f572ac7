"""Business rule classification of trigger text.

Each category is a detector in ``RULE_DETECTORS``; detectors run in table
order and every match contributes rules, so one trigger may carry several
categories. CUSTOM is only emitted when no detector fired.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..config import AnalyzerConfig
from ..models.triggers import BusinessRule, BusinessRuleType
from .decoding import is_trivial_trigger
from .sql_extractor import FUNCTION_ASSIGN_PATTERN, SqlExtractor, unique

BIND_FIELD_PATTERN = re.compile(r':(\w+\.\w+)')
SYSTEM_FIELD_PREFIXES = ('system.', 'global.')

VALIDATION_PATTERN = re.compile(r'raise\s+form_trigger_failure|\bs_alert\b|\bshow_alert', re.IGNORECASE)
ALERT_MESSAGE_PATTERNS = (
    re.compile(r"\bs_alert\s*\([^,]+,\s*'([^']+)'", re.IGNORECASE),
    re.compile(r"\bshow_alert\s*\([^,]+,\s*'([^']+)'", re.IGNORECASE),
    re.compile(r"\bshow_alert_message\s*\(\s*'([^']+)'", re.IGNORECASE),
)
CONDITION_PATTERN = re.compile(r'\bif\s+([\s\S]+?)\s+then\b', re.IGNORECASE)
MAX_CONDITION_LENGTH = 50

CALCULATION_PATTERN = re.compile(r':(\w+\.\w+)\s*:=\s*:[\w.]+\s*[+\-*/]\s*:[\w.]+', re.IGNORECASE)
NAVIGATION_PATTERN = re.compile(
    r'\b(?:go_block|go_item|go_record|next_block|previous_block|next_item|previous_item)\b',
    re.IGNORECASE,
)
MASTER_DETAIL_PATTERN = re.compile(
    r'cursor\s+\w+\s+is\s+select\b[^;]*?\bwhere\b[^;]*?=\s*:\w+\.\w+',
    re.IGNORECASE,
)
ROW_COUNT_PATTERN = re.compile(r'\bselect\b[^;]*?\bcount\s*\(', re.IGNORECASE)
PRE_DELETE = 'PRE-DELETE'

# (trigger name fragment, CUSTOM description), first match wins
CUSTOM_DESCRIPTIONS: Tuple[Tuple[str, str], ...] = (
    ('BUTTON', 'Button event handling'),
    ('QUERY', 'Query handling'),
    ('INSERT', 'Insert pre/post processing'),
    ('UPDATE', 'Update pre/post processing'),
    ('DELETE', 'Delete pre/post processing'),
)
DEFAULT_CUSTOM_DESCRIPTION = 'Custom logic'


@dataclass(frozen=True)
class RuleContext:
    """Decoded trigger text plus what detectors need to interpret it."""
    text: str
    trigger_name: str
    extractor: SqlExtractor


RuleDetector = Callable[[RuleContext], List[BusinessRule]]


def extract_affected_fields(text: str) -> List[str]:
    """``:block.field`` references in order, without ``:system.*``/``:global.*``."""
    return unique(
        field for field in BIND_FIELD_PATTERN.findall(text)
        if not field.lower().startswith(SYSTEM_FIELD_PREFIXES)
    )


def extract_validation_description(text: str) -> str:
    for pattern in ALERT_MESSAGE_PATTERNS:
        match = pattern.search(text)
        if match:
            return f'Validation rule: {match.group(1)}'

    match = CONDITION_PATTERN.search(text)
    if match:
        return f'Validation condition: {match.group(1).strip()[:MAX_CONDITION_LENGTH]}'

    return 'Data validation'


def custom_description(trigger_name: str) -> str:
    name = trigger_name.upper()
    for fragment, description in CUSTOM_DESCRIPTIONS:
        if fragment in name:
            return description
    return DEFAULT_CUSTOM_DESCRIPTION


def detect_validation(context: RuleContext) -> List[BusinessRule]:
    if not VALIDATION_PATTERN.search(context.text):
        return []
    return [BusinessRule(
        type=BusinessRuleType.VALIDATION,
        description=extract_validation_description(context.text),
        affected_fields=extract_affected_fields(context.text),
    )]


def detect_auto_populate(context: RuleContext) -> List[BusinessRule]:
    return [
        BusinessRule(
            type=BusinessRuleType.AUTO_POPULATE,
            description=f'Auto-generate value of {match.group(1)}',
            affected_fields=[match.group(1)],
        )
        for match in FUNCTION_ASSIGN_PATTERN.finditer(context.text)
        if context.extractor.is_populating_function(match.group(2))
    ]


def detect_calculation(context: RuleContext) -> List[BusinessRule]:
    return [
        BusinessRule(
            type=BusinessRuleType.CALCULATION,
            description=f'Calculate value of {match.group(1)}',
            affected_fields=[match.group(1)],
        )
        for match in CALCULATION_PATTERN.finditer(context.text)
    ]


def detect_navigation(context: RuleContext) -> List[BusinessRule]:
    if not NAVIGATION_PATTERN.search(context.text):
        return []
    return [BusinessRule(
        type=BusinessRuleType.NAVIGATION,
        description='Navigate to a block or item',
    )]


def detect_master_detail(context: RuleContext) -> List[BusinessRule]:
    if not MASTER_DETAIL_PATTERN.search(context.text):
        return []
    return [BusinessRule(
        type=BusinessRuleType.MASTER_DETAIL,
        description='Master-detail data handling',
        affected_fields=extract_affected_fields(context.text),
    )]


def detect_delete_check(context: RuleContext) -> List[BusinessRule]:
    if context.trigger_name.upper() != PRE_DELETE or not ROW_COUNT_PATTERN.search(context.text):
        return []
    return [BusinessRule(
        type=BusinessRuleType.DELETE_CHECK,
        description='Check related data before delete',
    )]


RULE_DETECTORS: Tuple[Tuple[BusinessRuleType, RuleDetector], ...] = (
    (BusinessRuleType.VALIDATION, detect_validation),
    (BusinessRuleType.AUTO_POPULATE, detect_auto_populate),
    (BusinessRuleType.CALCULATION, detect_calculation),
    (BusinessRuleType.NAVIGATION, detect_navigation),
    (BusinessRuleType.MASTER_DETAIL, detect_master_detail),
    (BusinessRuleType.DELETE_CHECK, detect_delete_check),
)


class RuleClassifier:
    """Applies the detector table to decoded trigger text."""

    def __init__(self, config: Optional[AnalyzerConfig] = None, extractor: Optional[SqlExtractor] = None):
        self.extractor = extractor or SqlExtractor(config)

    def classify(self, text: str, trigger_name: str) -> List[BusinessRule]:
        """Return the business rules of one trigger.

        Trivial bodies (``null;`` or a bare ``do_key(...)``) have no rules.
        """
        if is_trivial_trigger(text):
            return []

        context = RuleContext(text=text, trigger_name=trigger_name, extractor=self.extractor)
        rules: List[BusinessRule] = []
        for _, detector in RULE_DETECTORS:
            rules.extend(detector(context))

        if not rules:
            rules.append(BusinessRule(
                type=BusinessRuleType.CUSTOM,
                description=custom_description(trigger_name),
                affected_fields=extract_affected_fields(text),
            ))
        return rules


def analyze_business_rules(text: str, trigger_name: str, config: Optional[AnalyzerConfig] = None) -> List[BusinessRule]:
    """Convenience function to classify decoded trigger text."""
    return RuleClassifier(config).classify(text, trigger_name)
