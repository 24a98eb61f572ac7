"""Pydantic data models for fmbconv results."""

from fmbconv.models.fields import (
    Area,
    ConversionResult,
    FieldDefinition,
    FieldKind,
    FormMetadata,
    InputMode,
    LovColumnSummary,
    LovSummary,
    MaxType,
    RecordGroupColumnSummary,
    RecordGroupSummary,
)
from fmbconv.models.triggers import (
    BlockTriggers,
    BusinessRule,
    BusinessRuleType,
    ExtractedSql,
    SqlStatementKind,
    TriggerEventInfo,
    TriggerLevel,
    TriggerReport,
    TriggerSectionReport,
    TriggerStatistics,
)

__all__ = [
    "Area",
    "ConversionResult",
    "FieldDefinition",
    "FieldKind",
    "FormMetadata",
    "InputMode",
    "LovColumnSummary",
    "LovSummary",
    "MaxType",
    "RecordGroupColumnSummary",
    "RecordGroupSummary",
    "BlockTriggers",
    "BusinessRule",
    "BusinessRuleType",
    "ExtractedSql",
    "SqlStatementKind",
    "TriggerEventInfo",
    "TriggerLevel",
    "TriggerReport",
    "TriggerSectionReport",
    "TriggerStatistics",
]
