"""Trigger text decoding and no-op detection."""

import re
from enum import Enum
from typing import Dict, Optional

# Entities frmf2xml leaves in trigger text
HTML_ENTITIES: Dict[str, str] = {
    '&amp;': '&',
    '&lt;': '<',
    '&gt;': '>',
    '&quot;': '"',
    '&#39;': "'",
    '&#10;': '\n',
    '&#13;': '\r',
}

_ENTITY_PATTERN = re.compile('|'.join(re.escape(entity) for entity in HTML_ENTITIES))

_NULL_BODY = re.compile(r'^\s*null\s*;?\s*$', re.IGNORECASE)
_DO_KEY_BODY = re.compile(r'^\s*do_key\s*\([^)]+\)\s*;?\s*$', re.IGNORECASE)


class TrivialKind(str, Enum):
    """Trigger bodies that need no analysis."""
    NULL = "null"
    DO_KEY = "do_key"


def decode_trigger_text(text: Optional[str]) -> str:
    """Replace the fixed set of HTML entities with their characters.

    Decoding is a single pass, so ``&amp;lt;`` becomes ``&lt;`` and not ``<``.

    Examples:
        >>> decode_trigger_text('a &lt; b &amp; c &gt; d')
        'a < b & c > d'
        >>> decode_trigger_text(None)
        ''
    """
    if not text:
        return ''
    return _ENTITY_PATTERN.sub(lambda m: HTML_ENTITIES[m.group(0)], text)


def classify_trivial(text: str) -> Optional[TrivialKind]:
    """Return the trivial body kind (``null;`` or a bare ``do_key(...)``), if any."""
    if _NULL_BODY.match(text):
        return TrivialKind.NULL
    if _DO_KEY_BODY.match(text):
        return TrivialKind.DO_KEY
    return None


def is_trivial_trigger(text: str) -> bool:
    return classify_trivial(text) is not None
