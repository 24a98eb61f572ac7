"""Namespace-agnostic element tree for frmf2xml documents.

The export binds all of its layer prefixes (``X_default``, ``X_overridden``,
``Y_inherited``...) to a single namespace URI, so a namespace-aware parser
would either collapse or reject attributes that only differ by prefix. The
document is therefore read with a namespace-unaware SAX pass that keeps raw
qualified names, and the parser logic only ever talks to ``ElementView``.
"""

import logging
import re
from typing import Dict, Iterator, List, Mapping, Optional, Union
from xml.sax import SAXParseException
from xml.sax.handler import ContentHandler, ErrorHandler

from defusedxml import DefusedXmlException
from defusedxml.sax import parseString as defused_parse_string

from .attributes import resolve_attribute, resolve_first, resolve_flag, resolve_int, split_qualified_name
from .errors import ParseError

logger = logging.getLogger(__name__)

_ENCODING_DECLARATION = re.compile(r'(<\?xml[^>]*?encoding\s*=\s*)(["\'])[^"\']*\2', re.IGNORECASE)


class ElementView:
    """Read-only view over one XML element.

    Exposes only what the structural parser needs: the local tag name, child
    lookup by local name and layered attribute resolution.
    """

    __slots__ = ('tag', 'attributes', 'children')

    def __init__(self, tag: str, attributes: Mapping[str, str]):
        self.tag = tag
        self.attributes: Dict[str, str] = dict(attributes)
        self.children: List['ElementView'] = []

    @property
    def local_name(self) -> str:
        return split_qualified_name(self.tag)[1]

    def children_by_local_name(self, name: str) -> List['ElementView']:
        """Direct children with the given local tag name, in document order."""
        return [child for child in self.children if child.local_name == name]

    def child_by_local_name(self, name: str) -> Optional['ElementView']:
        """First direct child with the given local tag name."""
        for child in self.children:
            if child.local_name == name:
                return child
        return None

    def resolve_attribute(self, name: str) -> Optional[str]:
        return resolve_attribute(self.attributes, name)

    def resolve_first(self, *names: str) -> Optional[str]:
        return resolve_first(self.attributes, names)

    def resolve_int(self, name: str) -> Optional[int]:
        return resolve_int(self.attributes, name)

    def resolve_flag(self, name: str, default: bool) -> bool:
        return resolve_flag(self.attributes, name, default)

    def iter(self) -> Iterator['ElementView']:
        """Depth-first iteration over this element and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()

    def __repr__(self) -> str:
        return f"<ElementView {self.tag} attrs={len(self.attributes)} children={len(self.children)}>"


class _TreeBuilder(ContentHandler):
    """SAX content handler that assembles ElementView nodes."""

    def __init__(self):
        super().__init__()
        self.root: Optional[ElementView] = None
        self._stack: List[ElementView] = []

    def startElement(self, name, attrs):
        element = ElementView(name, {key: attrs.getValue(key) for key in attrs.getNames()})
        if self._stack:
            self._stack[-1].children.append(element)
        else:
            self.root = element
        self._stack.append(element)

    def endElement(self, name):
        self._stack.pop()


class _StrictErrorHandler(ErrorHandler):
    """Treat recoverable SAX errors as fatal; only warnings are logged."""

    def warning(self, exception):
        logger.warning(f"XML warning: {exception}")


def build_tree(content: Union[str, bytes]) -> ElementView:
    """Parse XML text into an ElementView tree.

    Args:
        content: XML document as text or raw bytes. Text input is encoded
            as UTF-8 and any encoding declaration is rewritten to match.

    Returns:
        Root ElementView

    Raises:
        ParseError: If the document is empty, malformed or uses forbidden
            constructs (entity expansion, external references)
    """
    if isinstance(content, str):
        if not content.strip():
            raise ParseError("XML parse error: document is empty")
        content = _ENCODING_DECLARATION.sub(r'\1\2UTF-8\2', content, count=1).encode('utf-8')
    elif not content.strip():
        raise ParseError("XML parse error: document is empty")

    builder = _TreeBuilder()
    try:
        defused_parse_string(content, builder, errorHandler=_StrictErrorHandler())
    except SAXParseException as e:
        raise ParseError(f"XML parse error: {e.getMessage()}", e.getLineNumber(), e.getColumnNumber()) from e
    except DefusedXmlException as e:
        raise ParseError(f"XML parse error: forbidden construct: {e}") from e

    if builder.root is None:
        raise ParseError("XML parse error: no root element")
    return builder.root
