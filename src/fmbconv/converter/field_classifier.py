"""Field classifier: Oracle Forms items to target field definitions.

Decides, for every item of every block, which area of the target
application it belongs to (header, detail table column or list column) and
which control it becomes, using canvas, tab page and adjacency heuristics.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from fmb_parser.constants import RECORD_GROUP_QUERY
from fmb_parser.models import Block, Item, ItemKind, Module

from ..config import ConverterConfig
from ..models.fields import (
    Area,
    ConversionResult,
    FieldDefinition,
    FieldKind,
    FormMetadata,
    InputMode,
    LovColumnSummary,
    LovSummary,
    RecordGroupColumnSummary,
    RecordGroupSummary,
)
from .type_inference import infer_max_type

logger = logging.getLogger(__name__)

ITEM_KIND_MAP: Dict[ItemKind, FieldKind] = {
    ItemKind.TEXT_ITEM: FieldKind.TEXTBOX,
    ItemKind.CHECK_BOX: FieldKind.CHECKBOX,
    ItemKind.LIST_ITEM: FieldKind.COMBOBOX,
    ItemKind.DISPLAY_ITEM: FieldKind.STATIC,
    ItemKind.PUSH_BUTTON: FieldKind.BUTTON,
}

# Kinds that never become list columns
NON_LIST_KINDS = (FieldKind.BUTTON, FieldKind.STATIC)


def map_item_kind(kind: ItemKind) -> FieldKind:
    """Map parser item kind to target field kind (textbox by default)."""
    return ITEM_KIND_MAP.get(kind, FieldKind.TEXTBOX)


@dataclass
class CanvasIndex:
    """Tab page labels and canvas roles collected from the module."""
    tab_page_labels: Dict[str, str] = field(default_factory=dict)
    tab_canvases: Set[str] = field(default_factory=set)
    visible_canvases: Set[str] = field(default_factory=set)

    def tab_label(self, tab_page: Optional[str]) -> str:
        if not tab_page:
            return ""
        return self.tab_page_labels.get(tab_page) or tab_page


def build_canvas_index(module: Module, config: ConverterConfig) -> CanvasIndex:
    """Index tab page labels and work out which canvases are visible.

    Visible canvases are the default body and tab canvases plus every
    canvas owning at least one tab page, so forms that navigate with a
    differently named tab canvas are still recognised.
    """
    index = CanvasIndex()
    for canvas in module.canvases:
        for page in canvas.tab_pages:
            if page.label:
                index.tab_page_labels[page.name] = page.label
            index.tab_canvases.add(canvas.name)
    index.visible_canvases = set(config.default_visible_canvases) | index.tab_canvases
    return index


def is_description_item(current: Item, following: Item) -> bool:
    """Check whether ``following`` is the description half of ``current``.

    A description is a display item, or a text item without prompt, placed
    right after a text item on the same canvas.
    """
    return (
        current.kind == ItemKind.TEXT_ITEM
        and following.kind in (ItemKind.DISPLAY_ITEM, ItemKind.TEXT_ITEM)
        and not following.prompt
        and current.canvas == following.canvas
    )


def pair_multipart_items(items) -> Dict[int, int]:
    """Map index of each leading text item to the index of its description item."""
    pairs: Dict[int, int] = {}
    for i in range(len(items) - 1):
        if is_description_item(items[i], items[i + 1]):
            pairs[i] = i + 1
    return pairs


def resolve_input_mode(item: Item) -> InputMode:
    if item.required:
        return InputMode.REQUIRED
    if not item.enabled:
        return InputMode.READONLY
    return InputMode.OPTIONAL


def resolve_label(item: Item) -> str:
    """Push buttons prefer their label; everything else its prompt."""
    if item.kind == ItemKind.PUSH_BUTTON:
        return item.label or item.prompt or item.name
    return item.prompt or item.name


class FieldClassifier:
    """Converts a parsed module into a flat list of field definitions."""

    def __init__(self, config: Optional[ConverterConfig] = None):
        """Initialize classifier with configuration.

        Args:
            config: Converter configuration, defaults if None
        """
        self.config = config or ConverterConfig()
        self._skip_blocks = {name.upper() for name in self.config.skip_blocks}
        self._summary_tables = {name.upper() for name in self.config.summary_tables}

    def convert(self, module: Module) -> ConversionResult:
        """Classify every item of the module.

        Args:
            module: Parsed module tree

        Returns:
            ConversionResult with header/detail fields followed by the
            generated list columns
        """
        index = build_canvas_index(module, self.config)

        fields: List[FieldDefinition] = []
        for block in module.blocks:
            if block.name.upper() in self._skip_blocks:
                logger.debug(f"Skipping block {block.name}")
                continue
            fields.extend(self._convert_block(block, index))

        fields.extend(self._generate_list_fields(fields))

        result = ConversionResult(fields=fields, metadata=self._build_metadata(module))
        logger.info(
            f"Converted module {module.name}: {len(result.header_fields)} header, "
            f"{len(result.detail_fields)} detail, {len(result.list_fields)} list fields"
        )
        return result

    def _convert_block(self, block: Block, index: CanvasIndex) -> List[FieldDefinition]:
        items = block.items
        pairs = pair_multipart_items(items)
        merged = set(pairs.values())

        fields: List[FieldDefinition] = []
        for position, item in enumerate(items):
            if not item.canvas or item.canvas not in index.visible_canvases:
                continue
            if not item.visible or position in merged:
                continue

            area = self._resolve_area(item, index)
            if area == Area.DETAIL and (block.query_data_source or '').upper() in self._summary_tables:
                logger.debug(f"Skipping {block.name}.{item.name}: summary table {block.query_data_source}")
                continue

            descr_attribute = items[pairs[position]].name if position in pairs else ""
            tab_label = index.tab_label(item.tab_page)

            fields.append(FieldDefinition(
                field_name=item.name,
                label=resolve_label(item),
                kind=FieldKind.MULTIPART if descr_attribute else map_item_kind(item.kind),
                area=area,
                input_mode=resolve_input_mode(item),
                relationship=(block.query_data_source or '') if area == Area.DETAIL else '',
                tab_name=tab_label if area == Area.HEADER else '',
                sub_tab_name=tab_label if area == Area.DETAIL else '',
                lookup=item.lov_name or '',
                length=item.maximum_length if item.maximum_length is not None else self.config.default_length,
                descr_attribute=descr_attribute,
                max_type=infer_max_type(item.name),
            ))
        return fields

    def _resolve_area(self, item: Item, index: CanvasIndex) -> Area:
        """Body canvas items, and tabbed items on a non-default tab canvas, are header fields."""
        if item.canvas == self.config.header_canvas:
            return Area.HEADER
        is_non_default_tab_canvas = (
            item.canvas in index.tab_canvases
            and item.canvas not in self.config.default_visible_canvases
        )
        if is_non_default_tab_canvas and item.tab_page:
            return Area.HEADER
        return Area.DETAIL

    def _generate_list_fields(self, fields: List[FieldDefinition]) -> List[FieldDefinition]:
        """Copy the first N non-button, non-static fields into the list area."""
        candidates = [f for f in fields if f.kind not in NON_LIST_KINDS]
        return [
            candidate.model_copy(update={
                'area': Area.LIST,
                'kind': FieldKind.TEXTBOX,
                'input_mode': InputMode.READONLY,
                'relationship': '',
                'tab_name': '',
                'sub_tab_name': '',
                'descr_attribute': '',
            })
            for candidate in candidates[:self.config.max_list_fields]
        ]

    @staticmethod
    def _build_metadata(module: Module) -> FormMetadata:
        record_groups = {group.name.upper(): group for group in module.record_groups}

        lovs = []
        for lov in module.lovs:
            group = record_groups.get((lov.record_group_name or '').upper())
            query = group.query if group is not None and group.kind == RECORD_GROUP_QUERY else None
            lovs.append(LovSummary(
                name=lov.name,
                title=lov.title or '',
                record_group_name=lov.record_group_name or '',
                record_group_query=query or '',
                columns=[
                    LovColumnSummary(column_name=mapping.name, return_item=mapping.return_item)
                    for mapping in lov.column_mappings
                ],
            ))

        return FormMetadata(
            app_name=module.name,
            app_title=module.title or module.name,
            lovs=lovs,
            record_groups=[
                RecordGroupSummary(
                    name=group.name,
                    kind=group.kind,
                    query=group.query or '',
                    columns=[
                        RecordGroupColumnSummary(name=c.name, data_type=c.data_type, max_length=c.max_length)
                        for c in group.columns
                    ],
                )
                for group in module.record_groups
            ],
        )


def convert_module(module: Module, config: Optional[ConverterConfig] = None) -> ConversionResult:
    """Convenience function to classify a module with optional configuration."""
    return FieldClassifier(config).convert(module)
