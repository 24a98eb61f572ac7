"""Maximo data type inference from field names.

Rules are an ordered table evaluated top to bottom; the first matching rule
wins. Order matters: amount-like names beat everything, and the DATETIME
family must be checked before DATE so that CREATE_DATETIME is not read as a
plain date.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

from ..models.fields import MaxType

AMOUNT_PATTERNS: Tuple[str, ...] = ('AMT', 'AMOUNT', 'PRICE', 'COST')
DATETIME_SUFFIXES: Tuple[str, ...] = ('_DATETIME', '_TIME', '_TIMESTAMP')
BOOLEAN_SUFFIXES: Tuple[str, ...] = ('_YN', '_FLAG')
BOOLEAN_PREFIXES: Tuple[str, ...] = ('IS_', 'HAS_')
COUNT_SUFFIXES: Tuple[str, ...] = ('_QTY', '_NUM', '_COUNT', '_SEQ')
COUNT_NAMES: Tuple[str, ...] = ('QTY', 'COUNT', 'SEQ')


@dataclass(frozen=True)
class TypeRule:
    """Name predicate and the type it implies."""
    name: str
    matches: Callable[[str], bool]
    max_type: MaxType


TYPE_RULES: Tuple[TypeRule, ...] = (
    TypeRule('amount', lambda n: any(p in n for p in AMOUNT_PATTERNS), MaxType.AMOUNT),
    TypeRule('datetime', lambda n: n == 'DATETIME' or n.endswith(DATETIME_SUFFIXES), MaxType.DATETIME),
    TypeRule('date', lambda n: n == 'DATE' or n.endswith('_DATE'), MaxType.DATE),
    TypeRule(
        'boolean',
        lambda n: n == 'FLAG' or n.endswith(BOOLEAN_SUFFIXES) or n.startswith(BOOLEAN_PREFIXES),
        MaxType.YORN,
    ),
    TypeRule('count', lambda n: n in COUNT_NAMES or n.endswith(COUNT_SUFFIXES), MaxType.INTEGER),
)


def infer_max_type(field_name: str, rules: Tuple[TypeRule, ...] = TYPE_RULES) -> MaxType:
    """Infer the Maximo type of a field from its name (case-insensitive).

    Examples:
        >>> infer_max_type('CREATE_DATETIME')
        <MaxType.DATETIME: 'DATETIME'>
        >>> infer_max_type('create_date')
        <MaxType.DATE: 'DATE'>
    """
    name = (field_name or '').strip().upper()
    for rule in rules:
        if rule.matches(name):
            return rule.max_type
    return MaxType.ALN
