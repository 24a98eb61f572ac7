"""Layered attribute resolution for frmf2xml exports.

frmf2xml writes one logical property as several physical attributes, each
carrying a namespace prefix that names the layer it came from::

    <Item ODGLS144_overridden:Prompt="Code"
          FORM_STD_inherited:Prompt="Code:"
          ODGLS144_default:Prompt="" />

The prefix itself (not its namespace URI) encodes the layer, and real
exports bind every prefix to the same URI, so resolution works on the raw
qualified attribute names.
"""

import re
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .constants import DEFAULT_MARKER, INHERITED_MARKERS, OVERRIDDEN_MARKER

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


class AttributeLayer(str, Enum):
    """Override layer an attribute was exported from."""
    PLAIN = "plain"
    OVERRIDDEN = "overridden"
    INHERITED = "inherited"
    OTHER = "other"
    DEFAULT = "default"


# Resolution order for prefixed attributes, most specific first
LAYER_PRIORITY: Tuple[AttributeLayer, ...] = (
    AttributeLayer.OVERRIDDEN,
    AttributeLayer.INHERITED,
    AttributeLayer.OTHER,
    AttributeLayer.DEFAULT,
)


def split_qualified_name(qualified_name: str) -> Tuple[str, str]:
    """Split an attribute name into (prefix, local name).

    Accepts raw ``prefix:Name`` names as well as ElementTree's
    ``{uri}Name`` Clark notation, in which case the URI is the prefix.

    Examples:
        >>> split_qualified_name('MYFORM_overridden:Name')
        ('MYFORM_overridden', 'Name')
        >>> split_qualified_name('Name')
        ('', 'Name')
    """
    if qualified_name.startswith('{') and '}' in qualified_name:
        uri, _, local = qualified_name[1:].partition('}')
        return uri, local
    if ':' in qualified_name:
        prefix, _, local = qualified_name.partition(':')
        return prefix, local
    return '', qualified_name


def classify_prefix(prefix: str) -> AttributeLayer:
    """Determine override layer from a namespace prefix."""
    if not prefix:
        return AttributeLayer.PLAIN
    lowered = prefix.lower()
    if any(marker in lowered for marker in INHERITED_MARKERS):
        return AttributeLayer.INHERITED
    if OVERRIDDEN_MARKER in lowered:
        return AttributeLayer.OVERRIDDEN
    if DEFAULT_MARKER in lowered:
        return AttributeLayer.DEFAULT
    return AttributeLayer.OTHER


def collect_layers(attributes: Mapping[str, str], name: str) -> Dict[AttributeLayer, str]:
    """Bucket every attribute whose local name is ``name`` by layer.

    Within a layer the first non-empty value in document order is kept; an
    empty value is only kept when the layer has nothing better.
    """
    layers: Dict[AttributeLayer, str] = {}
    for qualified_name, value in attributes.items():
        prefix, local = split_qualified_name(qualified_name)
        if local != name:
            continue
        layer = classify_prefix(prefix)
        if layer not in layers or (not layers[layer] and value):
            layers[layer] = value
    return layers


def resolve_attribute(attributes: Mapping[str, str], name: str) -> Optional[str]:
    """Return the effective value of a logical attribute.

    A plain (unprefixed) attribute is returned as-is when present. Otherwise
    the first non-empty value in overridden > inherited > other > default
    order wins; if every layer is empty an empty string is returned, and
    None when the attribute does not appear at all.
    """
    if name in attributes:
        return attributes[name]

    layers = collect_layers(attributes, name)
    if not layers:
        return None

    for layer in LAYER_PRIORITY:
        value = layers.get(layer)
        if value:
            return value
    return ''


def resolve_first(attributes: Mapping[str, str], names: Iterable[str]) -> Optional[str]:
    """Resolve the first of several alternative spellings with a non-empty value."""
    fallback = None
    for name in names:
        value = resolve_attribute(attributes, name)
        if value:
            return value
        if value is not None and fallback is None:
            fallback = value
    return fallback


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse leading integer digits; None for missing or non-numeric text."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


def resolve_int(attributes: Mapping[str, str], name: str) -> Optional[int]:
    """Resolve attribute and parse it as an integer.

    Returns None (never 0) when the attribute is missing or non-numeric.
    """
    return parse_int(resolve_attribute(attributes, name))


def resolve_flag(attributes: Mapping[str, str], name: str, default: bool) -> bool:
    """Resolve a true/false attribute, falling back to ``default``.

    Only the literals ``true``/``false`` (any case) change the outcome, so a
    required flag defaults to False and enabled/visible flags to True.
    """
    value = resolve_attribute(attributes, name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    return default
