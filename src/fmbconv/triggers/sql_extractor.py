"""Textual SQL extraction from PL/SQL trigger bodies.

Four independent passes run over decoded trigger text: cursor
declarations, ``SELECT ... INTO`` statements, function-call assignments to
bind variables and procedure calls that follow a naming convention. Table
and field names are taken from the text as written, nothing is resolved
against a schema.
"""

import re
from typing import Iterable, List, Optional

from ..config import AnalyzerConfig
from ..models.triggers import ExtractedSql, SqlStatementKind

CURSOR_PATTERN = re.compile(
    r'cursor\s+\w+\s+is\s+(select\s+([\s\S]*?)\s+from\s+([\s\S]*?))(?:;|$)',
    re.IGNORECASE,
)
SELECT_INTO_PATTERN = re.compile(
    r'\bselect\s+([^;]*?)\s+into\s+[^;]*?\s+from\s+(\w+)',
    re.IGNORECASE,
)
CURSOR_HEAD_PATTERN = re.compile(r'cursor\s+\w+\s+is\s*$', re.IGNORECASE)
FROM_TABLE_PATTERN = re.compile(r'\bfrom\s+(\w+)', re.IGNORECASE)
FUNCTION_ASSIGN_PATTERN = re.compile(r':(\w+\.\w+)\s*:=\s*(\w+)\s*\(', re.IGNORECASE)
DISTINCT_PATTERN = re.compile(r'^\s*distinct\s+', re.IGNORECASE)
ALIASED_COLUMN_PATTERN = re.compile(r'^(\w+(?:\.\w+)?)\s+(?:as\s+)?\w+$', re.IGNORECASE)
PLAIN_COLUMN_PATTERN = re.compile(r'^(\w+(?:\.\w+)?)$')

# Right-hand sides that are literals, never function names
LITERAL_NAMES = frozenset({'null', 'true', 'false'})


def unique(values: Iterable[str]) -> List[str]:
    """Deduplicate keeping the order of first appearance."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def extract_tables(sql: str) -> List[str]:
    """Lower-cased table names following each ``FROM``."""
    return unique(match.lower() for match in FROM_TABLE_PATTERN.findall(sql))


def extract_select_fields(select_clause: str) -> List[str]:
    """Column names of a select list.

    Plain and aliased columns are kept (the column, not the alias);
    expressions and ``*`` are dropped.

    Examples:
        >>> extract_select_fields('distinct a.id, name as n, count(*), *')
        ['a.id', 'name']
    """
    fields = []
    for part in DISTINCT_PATTERN.sub('', select_clause).split(','):
        column = part.strip()
        if not column or column == '*':
            continue
        match = ALIASED_COLUMN_PATTERN.match(column) or PLAIN_COLUMN_PATTERN.match(column)
        if match:
            fields.append(match.group(1))
    return unique(fields)


def build_procedure_pattern(prefixes: Iterable[str]) -> re.Pattern:
    alternatives = '|'.join(re.escape(prefix) + r'\w*' for prefix in prefixes)
    return re.compile(
        rf'(?<![\w.:$#])({alternatives})\s*(\([^)]*\))?\s*;',
        re.IGNORECASE,
    )


class SqlExtractor:
    """Runs the extraction passes for one analyzer configuration."""

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()
        self._excluded_functions = LITERAL_NAMES | set(self.config.builtin_functions)
        self._procedure_pattern = (
            build_procedure_pattern(self.config.procedure_prefixes)
            if self.config.procedure_prefixes else None
        )

    def is_populating_function(self, name: str) -> bool:
        """True unless ``name`` is a literal or a built-in conversion function."""
        return name.lower() not in self._excluded_functions

    def extract(self, text: str) -> List[ExtractedSql]:
        """Extract statements from decoded trigger text, pass by pass."""
        statements: List[ExtractedSql] = []
        statements.extend(self._cursors(text))
        statements.extend(self._select_into(text))
        statements.extend(self._function_assignments(text))
        statements.extend(self._procedure_calls(text, statements))
        return statements

    def _cursors(self, text: str) -> List[ExtractedSql]:
        return [
            ExtractedSql(
                kind=SqlStatementKind.CURSOR,
                statement=match.group(1).strip(),
                tables=extract_tables('from ' + match.group(3)),
                fields=extract_select_fields(match.group(2)),
            )
            for match in CURSOR_PATTERN.finditer(text)
        ]

    def _select_into(self, text: str) -> List[ExtractedSql]:
        statements = []
        for match in SELECT_INTO_PATTERN.finditer(text):
            # Already reported as the body of a cursor declaration
            if CURSOR_HEAD_PATTERN.search(text[:match.start()]):
                continue
            statements.append(ExtractedSql(
                kind=SqlStatementKind.SELECT,
                statement=match.group(0).strip(),
                tables=[match.group(2).lower()],
                fields=extract_select_fields(match.group(1)),
            ))
        return statements

    def _function_assignments(self, text: str) -> List[ExtractedSql]:
        return [
            ExtractedSql(
                kind=SqlStatementKind.FUNCTION_CALL,
                statement=match.group(0).strip(),
                fields=[match.group(1)],
            )
            for match in FUNCTION_ASSIGN_PATTERN.finditer(text)
            if self.is_populating_function(match.group(2))
        ]

    def _procedure_calls(self, text: str, found: List[ExtractedSql]) -> List[ExtractedSql]:
        if self._procedure_pattern is None:
            return []
        statements = []
        for match in self._procedure_pattern.finditer(text):
            name = match.group(1)
            known = found + statements
            if any(name.lower() in existing.statement.lower() for existing in known):
                continue
            statements.append(ExtractedSql(
                kind=SqlStatementKind.FUNCTION_CALL,
                statement=f'{name}(...)' if match.group(2) else name,
            ))
        return statements


def extract_sql_statements(text: str, config: Optional[AnalyzerConfig] = None) -> List[ExtractedSql]:
    """Convenience function to run all extraction passes over decoded text."""
    return SqlExtractor(config).extract(text)
