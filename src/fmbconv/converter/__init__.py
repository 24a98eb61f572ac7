"""Field classification of parsed Oracle Forms modules."""

from .field_classifier import FieldClassifier, convert_module, map_item_kind
from .type_inference import TYPE_RULES, TypeRule, infer_max_type

__all__ = [
    "FieldClassifier",
    "convert_module",
    "map_item_kind",
    "TYPE_RULES",
    "TypeRule",
    "infer_max_type",
]
