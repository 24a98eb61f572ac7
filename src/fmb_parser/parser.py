"""Structural parser for Oracle Forms frmf2xml exports.

Turns the layered, namespace-prefixed XML into an immutable ``Module`` tree.
Two document shapes are accepted:

* a bare ``<Module>`` with blocks, canvases, LOVs... as direct children
  (simple hand-written or pre-normalized exports), and
* ``<Module><FormModule>...</FormModule></Module>`` as written by frmf2xml.

Only malformed XML and a wrong root element are fatal. Unknown or missing
per-element data falls back to defaults so that one odd item never aborts
the rest of the document.
"""

import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import List, Optional, Tuple, Union

from .constants import (
    ATTRIBUTE_ALIASES,
    BLOCK_TAG,
    CANVAS_TAG,
    DEFAULT_CANVAS_KIND,
    DEFAULT_ITEM_KIND_TEXT,
    FORM_MODULE_TAG,
    ITEM_KIND_ALIASES,
    ITEM_TAG,
    LOV_COLUMN_MAPPING_TAG,
    LOV_TAG,
    MODULE_TAG,
    RECORD_GROUP_COLUMN_TAG,
    RECORD_GROUP_QUERY,
    RECORD_GROUP_STATIC,
    RECORD_GROUP_TAG,
    TAB_PAGE_TAG,
    TRIGGER_TAG,
)
from .elements import ElementView, build_tree
from .errors import MissingRootError, ParseError
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

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')


def normalize_item_kind(raw: Optional[str]) -> ItemKind:
    """Map an item type spelling to ItemKind.

    Case, underscores and spacing are ignored, so ``Text Item``,
    ``TEXT_ITEM`` and ``text  item`` are equivalent. Unknown spellings
    default to TEXT_ITEM.
    """
    if not raw:
        return ItemKind.TEXT_ITEM
    key = _WHITESPACE.sub(' ', raw.replace('_', ' ')).strip().lower()
    kind = ITEM_KIND_ALIASES.get(key)
    if kind is None:
        logger.warning(f"Unknown item type '{raw}', treating as {ItemKind.TEXT_ITEM.value}")
        return ItemKind.TEXT_ITEM
    return kind


def _optional(value: Optional[str]) -> Optional[str]:
    """Empty strings count as absent for optional references."""
    return value if value else None


def _attributes(element: ElementView):
    return MappingProxyType(dict(element.attributes))


class FmbParser:
    """Oracle Forms module parser.

    Example usage:
        parser = FmbParser()
        module = parser.parse_file(Path('odgls144_fmb.xml'))
        for block in module.blocks:
            print(block.name, len(block.items))
    """

    def parse_content(self, xml_content: Union[str, bytes]) -> Module:
        """Parse frmf2xml content.

        Args:
            xml_content: Raw XML as text or bytes

        Returns:
            Parsed Module tree

        Raises:
            ParseError: If the content is not well-formed XML
            MissingRootError: If the root element is not ``Module``
        """
        root = build_tree(xml_content)
        if root.local_name != MODULE_TAG:
            raise MissingRootError(root.local_name)

        module = self._parse_module(root)
        logger.debug(
            f"Parsed module {module.name}: {len(module.blocks)} blocks, "
            f"{module.total_items} items, {module.total_triggers} triggers"
        )
        return module

    def parse_file(self, file_path: Path) -> Module:
        """Parse frmf2xml file.

        The file is handed to the XML layer as bytes so that its own
        encoding declaration is honoured.
        """
        logger.debug(f"Parsing FMB export: {file_path}")
        content = Path(file_path).read_bytes()
        try:
            return self.parse_content(content)
        except UnicodeDecodeError as e:
            raise ParseError(f"Encoding error in {file_path}: {e}") from e

    def _parse_module(self, root: ElementView) -> Module:
        form_module = root.child_by_local_name(FORM_MODULE_TAG)
        container = form_module if form_module is not None else root

        return Module(
            name=self._module_attribute(form_module, root, 'Name') or '',
            title=self._module_attribute(form_module, root, 'Title'),
            blocks=self._parse_blocks(container),
            canvases=self._parse_canvases(container),
            lovs=self._parse_lovs(container),
            record_groups=self._parse_record_groups(container),
            triggers=self._parse_triggers(container),
            attributes=_attributes(container),
        )

    @staticmethod
    def _module_attribute(form_module: Optional[ElementView], root: ElementView, name: str) -> Optional[str]:
        """Read name/title from whichever of FormModule/Module carries it."""
        if form_module is not None:
            value = form_module.resolve_attribute(name)
            if value:
                return value
        return _optional(root.resolve_attribute(name))

    def _parse_blocks(self, parent: ElementView) -> Tuple[Block, ...]:
        blocks: List[Block] = []
        for element in parent.children_by_local_name(BLOCK_TAG):
            name = element.resolve_attribute('Name') or ''
            blocks.append(Block(
                name=name,
                query_data_source=_optional(element.resolve_attribute('QueryDataSourceName')),
                single_record=element.resolve_flag('SingleRecord', False),
                items=self._parse_items(element, name),
                triggers=self._parse_triggers(element),
                attributes=_attributes(element),
            ))
        return tuple(blocks)

    def _parse_items(self, parent: ElementView, block_name: str) -> Tuple[Item, ...]:
        items: List[Item] = []
        for element in parent.children_by_local_name(ITEM_TAG):
            name = element.resolve_attribute('Name') or ''
            if not name:
                logger.warning(f"Item without name in block {block_name or '<unnamed>'}")

            items.append(Item(
                name=name,
                kind=normalize_item_kind(element.resolve_attribute('ItemType') or DEFAULT_ITEM_KIND_TEXT),
                prompt=element.resolve_attribute('Prompt'),
                label=element.resolve_attribute('Label'),
                canvas=_optional(element.resolve_first(*ATTRIBUTE_ALIASES['canvas'])),
                tab_page=_optional(element.resolve_first(*ATTRIBUTE_ALIASES['tab_page'])),
                data_type=_optional(element.resolve_attribute('DataType')),
                maximum_length=element.resolve_int('MaximumLength'),
                required=element.resolve_flag('Required', False),
                enabled=element.resolve_flag('Enabled', True),
                visible=element.resolve_flag('Visible', True),
                lov_name=_optional(element.resolve_first(*ATTRIBUTE_ALIASES['lov'])),
                attributes=_attributes(element),
            ))
        return tuple(items)

    def _parse_triggers(self, parent: ElementView) -> Tuple[Trigger, ...]:
        return tuple(
            Trigger(
                name=element.resolve_attribute('Name') or '',
                kind=element.resolve_first(*ATTRIBUTE_ALIASES['trigger_kind']) or '',
                text=element.resolve_attribute('TriggerText'),
            )
            for element in parent.children_by_local_name(TRIGGER_TAG)
        )

    def _parse_canvases(self, parent: ElementView) -> Tuple[Canvas, ...]:
        return tuple(
            Canvas(
                name=element.resolve_attribute('Name') or '',
                kind=element.resolve_attribute('CanvasType') or DEFAULT_CANVAS_KIND,
                tab_pages=tuple(
                    TabPage(
                        name=page.resolve_attribute('Name') or '',
                        label=_optional(page.resolve_attribute('Label')),
                        attributes=_attributes(page),
                    )
                    for page in element.children_by_local_name(TAB_PAGE_TAG)
                ),
                attributes=_attributes(element),
            )
            for element in parent.children_by_local_name(CANVAS_TAG)
        )

    def _parse_lovs(self, parent: ElementView) -> Tuple[Lov, ...]:
        return tuple(
            Lov(
                name=element.resolve_attribute('Name') or '',
                title=_optional(element.resolve_attribute('Title')),
                record_group_name=_optional(element.resolve_attribute('RecordGroupName')),
                column_mappings=tuple(
                    LovColumnMapping(
                        name=mapping.resolve_attribute('Name') or '',
                        return_item=mapping.resolve_attribute('ReturnItem') or '',
                        title=_optional(mapping.resolve_attribute('Title')),
                        display_width=mapping.resolve_int('DisplayWidth'),
                    )
                    for mapping in element.children_by_local_name(LOV_COLUMN_MAPPING_TAG)
                ),
                attributes=_attributes(element),
            )
            for element in parent.children_by_local_name(LOV_TAG)
        )

    def _parse_record_groups(self, parent: ElementView) -> Tuple[RecordGroup, ...]:
        groups: List[RecordGroup] = []
        for element in parent.children_by_local_name(RECORD_GROUP_TAG):
            query = _optional(element.resolve_attribute('RecordGroupQuery'))
            groups.append(RecordGroup(
                name=element.resolve_attribute('Name') or '',
                kind=self._record_group_kind(element.resolve_first(*ATTRIBUTE_ALIASES['record_group_kind']), query),
                query=query,
                columns=tuple(
                    RecordGroupColumn(
                        name=column.resolve_attribute('Name') or '',
                        data_type=column.resolve_first(*ATTRIBUTE_ALIASES['column_data_type']) or '',
                        max_length=column.resolve_int('MaximumLength'),
                    )
                    for column in element.children_by_local_name(RECORD_GROUP_COLUMN_TAG)
                ),
                attributes=_attributes(element),
            ))
        return tuple(groups)

    @staticmethod
    def _record_group_kind(raw: Optional[str], query: Optional[str]) -> str:
        if raw:
            return RECORD_GROUP_QUERY if 'query' in raw.lower() else RECORD_GROUP_STATIC
        return RECORD_GROUP_QUERY if query else RECORD_GROUP_STATIC
