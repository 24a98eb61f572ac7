"""Standalone structural parser for Oracle Forms frmf2xml exports.

Turns the layered, namespace-prefixed XML written by frmf2xml into an
immutable module tree (blocks, items, canvases, tab pages, LOVs, record
groups and triggers). Its only dependency is defusedxml.

Basic usage:
    from fmb_parser import parse_fmb_xml

    module = parse_fmb_xml(xml_text)
    for block in module.blocks:
        print(block.name, [item.name for item in block.items])
"""

from pathlib import Path
from typing import Union

from .attributes import AttributeLayer, resolve_attribute, resolve_int
from .elements import ElementView, build_tree
from .errors import FmbParserError, MissingRootError, ParseError
from .models import (
    Block,
    Canvas,
    Item,
    ItemKind,
    Lov,
    LovColumnMapping,
    Module,
    RecordGroup,
    RecordGroupColumn,
    TabPage,
    Trigger,
)
from .parser import FmbParser, normalize_item_kind

__version__ = "0.3.0"

__all__ = [
    '__version__',

    # Main parser
    'FmbParser',
    'parse_fmb_xml',
    'parse_fmb_file',
    'normalize_item_kind',

    # Attribute resolution and element view
    'AttributeLayer',
    'resolve_attribute',
    'resolve_int',
    'ElementView',
    'build_tree',

    # Data models
    'Module',
    'Block',
    'Item',
    'ItemKind',
    'Canvas',
    'TabPage',
    'Lov',
    'LovColumnMapping',
    'RecordGroup',
    'RecordGroupColumn',
    'Trigger',

    # Errors
    'FmbParserError',
    'ParseError',
    'MissingRootError',
]


def parse_fmb_xml(content: Union[str, bytes]) -> Module:
    """Convenience function to parse frmf2xml content directly.

    Args:
        content: XML content as string or bytes

    Returns:
        Parsed Module tree
    """
    return FmbParser().parse_content(content)


def parse_fmb_file(file_path: Union[str, Path]) -> Module:
    """Convenience function to parse a frmf2xml file directly.

    Args:
        file_path: Path to the XML export (string or Path object)

    Returns:
        Parsed Module tree
    """
    return FmbParser().parse_file(Path(file_path))
