"""Constants for FMB XML parsing.

Tag names, attribute aliases and item kind spellings centralized for easy
maintenance.
"""

from typing import Dict, Tuple

from .models import ItemKind

# Element local names in the frmf2xml dialect
MODULE_TAG = 'Module'
FORM_MODULE_TAG = 'FormModule'
BLOCK_TAG = 'Block'
ITEM_TAG = 'Item'
TRIGGER_TAG = 'Trigger'
CANVAS_TAG = 'Canvas'
TAB_PAGE_TAG = 'TabPage'
LOV_TAG = 'LOV'
LOV_COLUMN_MAPPING_TAG = 'LOVColumnMapping'
RECORD_GROUP_TAG = 'RecordGroup'
RECORD_GROUP_COLUMN_TAG = 'RecordGroupColumn'

# Namespace prefix markers for the override layers, e.g.
# ODGLS144_overridden:Name, FORM_STD_inherited:Name, ODGLS144_default:Name.
# The inherited markers are checked before the overridden one so that
# FOO_inherited_overridden:Name lands in the inherited layer.
INHERITED_MARKERS: Tuple[str, ...] = ('_inherited_overridden', '_inherited')
OVERRIDDEN_MARKER = '_overridden'
DEFAULT_MARKER = '_default'

# Logical attributes that have more than one physical spelling.
# First spelling found (non-empty) wins.
ATTRIBUTE_ALIASES: Dict[str, Tuple[str, ...]] = {
    'canvas': ('CanvasName', 'Canvas'),
    'tab_page': ('TabPageName', 'TabPage'),
    'lov': ('LovName', 'LOVName'),
    'trigger_kind': ('TriggerType', 'TriggerStyle'),
    'column_data_type': ('ColumnDataType', 'DataType'),
    'record_group_kind': ('RecordGroupType', 'QueryDataSourceType'),
}

DEFAULT_ITEM_KIND_TEXT = 'Text Item'
DEFAULT_CANVAS_KIND = 'CONTENT'

# Item kind spellings keyed by the normalized form: lower case, underscores
# as spaces, whitespace collapsed. 'Text Item', 'TEXT_ITEM' and ' text  item'
# all normalize to 'text item'.
ITEM_KIND_ALIASES: Dict[str, ItemKind] = {
    'text item': ItemKind.TEXT_ITEM,
    'check box': ItemKind.CHECK_BOX,
    'checkbox': ItemKind.CHECK_BOX,
    'list item': ItemKind.LIST_ITEM,
    'push button': ItemKind.PUSH_BUTTON,
    'display item': ItemKind.DISPLAY_ITEM,
    'radio group': ItemKind.RADIO_GROUP,
    'image': ItemKind.IMAGE,
    'image item': ItemKind.IMAGE,
    'bean area': ItemKind.BEAN_AREA,
    'chart item': ItemKind.CHART_ITEM,
    'user area': ItemKind.USER_AREA,
}

RECORD_GROUP_QUERY = 'Query'
RECORD_GROUP_STATIC = 'Static'
