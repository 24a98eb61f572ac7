"""Exceptions raised by the FMB structural parser.

Only two failure modes are fatal: the document is not well-formed XML, or
its root is not an Oracle Forms ``Module``. Everything else degrades to
defaults.
"""

from typing import Optional


class FmbParserError(Exception):
    """Base class for all parser failures."""


class ParseError(FmbParserError):
    """Raised when the input cannot be read as well-formed XML."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class MissingRootError(FmbParserError):
    """Raised when the top-level element is not a ``Module``."""

    def __init__(self, found: str):
        self.found = found
        super().__init__(f'Expected root element "Module", got "{found}"')
