"""Configuration management for fmbconv using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILE_NAME = ".fmbconv.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ConverterConfig(BaseModel):
    """Field classifier configuration section."""
    skip_blocks: list[str] = Field(alias="skipBlocks", default_factory=lambda: ["TOOL_BUTTON", "HEAD_BLOCK"])
    header_canvas: str = Field(alias="headerCanvas", default="CANVAS_BODY")
    tab_canvas: str = Field(alias="tabCanvas", default="CANVAS_TAB")
    # Denormalized rollup tables that must not become detail relationships
    summary_tables: list[str] = Field(alias="summaryTables", default_factory=lambda: ["PCS1005"])
    max_list_fields: int = Field(alias="maxListFields", default=10)
    default_length: int = Field(alias="defaultLength", default=100)

    @field_validator("max_list_fields")
    @classmethod
    def validate_max_list_fields(cls, v):
        if v < 0:
            raise ValueError("max_list_fields must be >= 0")
        return v

    @field_validator("default_length")
    @classmethod
    def validate_default_length(cls, v):
        if v < 1:
            raise ValueError("default_length must be >= 1")
        return v

    @property
    def default_visible_canvases(self) -> tuple[str, str]:
        return (self.header_canvas, self.tab_canvas)

    model_config = ConfigDict(populate_by_name=True)


class AnalyzerConfig(BaseModel):
    """Trigger analyzer configuration section."""
    # Assignments from these are conversions, not auto-populated values
    builtin_functions: list[str] = Field(
        alias="builtinFunctions",
        default_factory=lambda: ["nvl", "trunc", "to_char", "to_date", "to_number"],
    )
    procedure_prefixes: list[str] = Field(alias="procedurePrefixes", default_factory=lambda: ["p_", "sf_"])

    @field_validator("builtin_functions", "procedure_prefixes")
    @classmethod
    def lowercase_names(cls, v):
        return [name.lower() for name in v]

    @field_validator("procedure_prefixes")
    @classmethod
    def validate_procedure_prefixes(cls, v):
        for prefix in v:
            if not prefix or not prefix.replace("_", "a").isalnum():
                raise ValueError(f"procedure prefix must be an identifier fragment, got: {prefix!r}")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(use_enum_values=True)


class FmbconvConfig(BaseModel):
    """Complete fmbconv configuration model."""
    converter: ConverterConfig = Field(default_factory=ConverterConfig)
    analyzer: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> FmbconvConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .fmbconv.json

    Returns:
        FmbconvConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return FmbconvConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .fmbconv.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> FmbconvConfig:
    """Create default configuration."""
    return FmbconvConfig()
