"""Models for trigger analysis reports."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SqlStatementKind(str, Enum):
    """Kinds of SQL-like statements found in trigger text."""
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    CURSOR = "CURSOR"
    FUNCTION_CALL = "FUNCTION_CALL"


class BusinessRuleType(str, Enum):
    """Business rule taxonomy."""
    VALIDATION = "VALIDATION"
    AUTO_POPULATE = "AUTO_POPULATE"
    CALCULATION = "CALCULATION"
    NAVIGATION = "NAVIGATION"
    MASTER_DETAIL = "MASTER_DETAIL"
    DELETE_CHECK = "DELETE_CHECK"
    CUSTOM = "CUSTOM"


class TriggerLevel(str, Enum):
    FORM = "Form"
    BLOCK = "Block"


class ExtractedSql(BaseModel):
    """Statement extracted from trigger text; names are textual, not resolved."""
    kind: SqlStatementKind
    statement: str
    tables: list[str] = Field(default_factory=list)
    fields: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class BusinessRule(BaseModel):
    """Business rule intent recognised in a trigger."""
    type: BusinessRuleType
    description: str
    affected_fields: list[str] = Field(alias="affectedFields", default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TriggerEventInfo(BaseModel):
    """Static description of an Oracle Forms trigger event."""
    description: str
    java_use: str = Field(alias="javaUse")
    maximo_location: str = Field(alias="maximoLocation")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TriggerReport(BaseModel):
    """Analysis of a single trigger."""
    no: int
    name: str
    event_description: str = Field(alias="eventDescription")
    java_use: str = Field(alias="javaUse")
    maximo_location: str = Field(alias="maximoLocation")
    level: TriggerLevel
    block_name: str | None = Field(alias="blockName", default=None)
    trigger_text: str = Field(alias="triggerText", default="")
    sql_statements: list[ExtractedSql] = Field(alias="sqlStatements", default_factory=list)
    business_rules: list[BusinessRule] = Field(alias="businessRules", default_factory=list)
    summary: str = ""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class BlockTriggers(BaseModel):
    """Trigger reports of one block."""
    block_name: str = Field(alias="blockName")
    triggers: list[TriggerReport] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TriggerStatistics(BaseModel):
    """Aggregate trigger counters."""
    total_count: int = Field(alias="totalCount", default=0)
    form_level_count: int = Field(alias="formLevelCount", default=0)
    block_level_count: int = Field(alias="blockLevelCount", default=0)
    by_event_type: dict[str, int] = Field(alias="byEventType", default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TriggerSectionReport(BaseModel):
    """Trigger analysis for a complete module."""
    form_triggers: list[TriggerReport] = Field(alias="formTriggers", default_factory=list)
    block_triggers: list[BlockTriggers] = Field(alias="blockTriggers", default_factory=list)
    statistics: TriggerStatistics = Field(default_factory=TriggerStatistics)

    @property
    def all_triggers(self) -> list[TriggerReport]:
        """Form-level then block-level reports, in sequence order."""
        reports = list(self.form_triggers)
        for block in self.block_triggers:
            reports.extend(block.triggers)
        return reports

    model_config = ConfigDict(populate_by_name=True, frozen=True)
