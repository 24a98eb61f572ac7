"""Models for converted field definitions and form metadata."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FieldKind(str, Enum):
    """Target field control types."""
    TEXTBOX = "textbox"
    CHECKBOX = "checkbox"
    COMBOBOX = "combobox"
    STATIC = "static"
    BUTTON = "button"
    MULTIPART = "multipart"


class Area(str, Enum):
    """Field placement in the target application."""
    HEADER = "header"
    DETAIL = "detail"
    LIST = "list"


class InputMode(str, Enum):
    """Field input modes."""
    REQUIRED = "required"
    READONLY = "readonly"
    OPTIONAL = "optional"


class MaxType(str, Enum):
    """Maximo attribute data types inferred from field names."""
    ALN = "ALN"
    AMOUNT = "AMOUNT"
    DATE = "DATE"
    DATETIME = "DATETIME"
    YORN = "YORN"
    INTEGER = "INTEGER"


class FieldDefinition(BaseModel):
    """Normalized field produced from one source item."""
    field_name: str = Field(alias="fieldName")
    label: str
    kind: FieldKind
    area: Area
    input_mode: InputMode = Field(alias="inputMode", default=InputMode.OPTIONAL)
    relationship: str = ""  # Owning detail table; empty for header/list
    tab_name: str = Field(alias="tabName", default="")
    sub_tab_name: str = Field(alias="subTabName", default="")
    lookup: str = ""  # LOV name
    length: int = 100
    descr_attribute: str = Field(alias="descrAttribute", default="")  # Trailing item of a multipart pair
    max_type: MaxType = Field(alias="maxType", default=MaxType.ALN)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class LovColumnSummary(BaseModel):
    """LOV column to return item mapping."""
    column_name: str = Field(alias="columnName")
    return_item: str = Field(alias="returnItem", default="")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class LovSummary(BaseModel):
    """LOV with its record group query, for documentation collaborators."""
    name: str
    title: str = ""
    record_group_name: str = Field(alias="recordGroupName", default="")
    record_group_query: str = Field(alias="recordGroupQuery", default="")  # Empty for static groups
    columns: list[LovColumnSummary] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RecordGroupColumnSummary(BaseModel):
    name: str
    data_type: str = Field(alias="dataType", default="")
    max_length: int | None = Field(alias="maxLength", default=None)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RecordGroupSummary(BaseModel):
    """Record group declaration."""
    name: str
    kind: str = "Static"
    query: str = ""
    columns: list[RecordGroupColumnSummary] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class FormMetadata(BaseModel):
    """Form-level data handed to the target XML assemblers."""
    app_name: str = Field(alias="appName")
    app_title: str = Field(alias="appTitle")
    lovs: list[LovSummary] = Field(default_factory=list)
    record_groups: list[RecordGroupSummary] = Field(alias="recordGroups", default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ConversionResult(BaseModel):
    """Flat field list plus metadata for one converted form."""
    fields: list[FieldDefinition] = Field(default_factory=list)
    metadata: FormMetadata

    @property
    def header_fields(self) -> list[FieldDefinition]:
        return self.by_area(Area.HEADER)

    @property
    def detail_fields(self) -> list[FieldDefinition]:
        return self.by_area(Area.DETAIL)

    @property
    def list_fields(self) -> list[FieldDefinition]:
        return self.by_area(Area.LIST)

    @property
    def relationships(self) -> list[str]:
        """Detail relationships in order of first appearance."""
        seen: list[str] = []
        for field in self.detail_fields:
            if field.relationship and field.relationship not in seen:
                seen.append(field.relationship)
        return seen

    def by_area(self, area: Area | str) -> list[FieldDefinition]:
        area = Area(area)
        return [field for field in self.fields if field.area == area]

    model_config = ConfigDict(populate_by_name=True, frozen=True)
