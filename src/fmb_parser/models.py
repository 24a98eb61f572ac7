"""Data models for the parsed Oracle Forms module tree.

All models are frozen dataclasses: the tree is built once per document and
never mutated afterwards. Child collections are tuples and raw attribute
bags are read-only mappings. Raw attribute bags are excluded from equality
so that the same content exported with and without namespace layers
compares equal.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


def _empty_attributes() -> Mapping[str, str]:
    return MappingProxyType({})


class ItemKind(str, Enum):
    """Oracle Forms item types."""
    TEXT_ITEM = "TEXT_ITEM"
    CHECK_BOX = "CHECK_BOX"
    LIST_ITEM = "LIST_ITEM"
    PUSH_BUTTON = "PUSH_BUTTON"
    DISPLAY_ITEM = "DISPLAY_ITEM"
    RADIO_GROUP = "RADIO_GROUP"
    IMAGE = "IMAGE"
    BEAN_AREA = "BEAN_AREA"
    CHART_ITEM = "CHART_ITEM"
    USER_AREA = "USER_AREA"


@dataclass(frozen=True)
class Trigger:
    """PL/SQL trigger attached to a module or a block."""
    name: str                           # Event name, e.g. PRE-INSERT
    kind: str = ""                      # TriggerType / TriggerStyle
    text: Optional[str] = None          # Raw text, still entity-encoded


@dataclass(frozen=True)
class Item:
    """Single UI item inside a block."""
    name: str
    kind: ItemKind = ItemKind.TEXT_ITEM
    prompt: Optional[str] = None
    label: Optional[str] = None         # Mostly used by push buttons
    canvas: Optional[str] = None
    tab_page: Optional[str] = None
    data_type: Optional[str] = None
    maximum_length: Optional[int] = None
    required: bool = False
    enabled: bool = True
    visible: bool = True
    lov_name: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes, compare=False, repr=False)


@dataclass(frozen=True)
class Block:
    """Data block: an ordered group of items bound to one data source."""
    name: str
    query_data_source: Optional[str] = None
    single_record: bool = False
    items: Tuple[Item, ...] = ()
    triggers: Tuple[Trigger, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes, compare=False, repr=False)

    def get_item(self, name: str) -> Optional[Item]:
        """Find item by name (case-insensitive)."""
        upper_name = name.upper()
        for item in self.items:
            if item.name.upper() == upper_name:
                return item
        return None


@dataclass(frozen=True)
class TabPage:
    """Tab page owned by a tab canvas."""
    name: str
    label: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes, compare=False, repr=False)


@dataclass(frozen=True)
class Canvas:
    """Canvas (content, tab, stacked, toolbar...) with its tab pages."""
    name: str
    kind: str = "CONTENT"
    tab_pages: Tuple[TabPage, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes, compare=False, repr=False)


@dataclass(frozen=True)
class LovColumnMapping:
    """LOV column and the item that receives its value."""
    name: str
    return_item: str = ""
    title: Optional[str] = None
    display_width: Optional[int] = None


@dataclass(frozen=True)
class Lov:
    """List of values definition."""
    name: str
    title: Optional[str] = None
    record_group_name: Optional[str] = None
    column_mappings: Tuple[LovColumnMapping, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes, compare=False, repr=False)


@dataclass(frozen=True)
class RecordGroupColumn:
    """Column declared by a record group."""
    name: str
    data_type: str = ""
    max_length: Optional[int] = None


@dataclass(frozen=True)
class RecordGroup:
    """Record group backing an LOV: a SQL query or static rows."""
    name: str
    kind: str = "Static"                # Query / Static
    query: Optional[str] = None
    columns: Tuple[RecordGroupColumn, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes, compare=False, repr=False)


@dataclass(frozen=True)
class Module:
    """Complete parsed form module.

    This is the main result object of the structural parser, consumed
    independently by the field converter and the trigger analyzer.
    """
    name: str
    title: Optional[str] = None
    blocks: Tuple[Block, ...] = ()
    canvases: Tuple[Canvas, ...] = ()
    lovs: Tuple[Lov, ...] = ()
    record_groups: Tuple[RecordGroup, ...] = ()
    triggers: Tuple[Trigger, ...] = ()
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes, compare=False, repr=False)

    def get_block(self, name: str) -> Optional[Block]:
        """Find block by name (case-insensitive)."""
        upper_name = name.upper()
        for block in self.blocks:
            if block.name.upper() == upper_name:
                return block
        return None

    def get_record_group(self, name: str) -> Optional[RecordGroup]:
        """Find record group by name (case-insensitive)."""
        upper_name = name.upper()
        for group in self.record_groups:
            if group.name.upper() == upper_name:
                return group
        return None

    @property
    def total_items(self) -> int:
        return sum(len(block.items) for block in self.blocks)

    @property
    def total_triggers(self) -> int:
        return len(self.triggers) + sum(len(block.triggers) for block in self.blocks)
