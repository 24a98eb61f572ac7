"""Facade running parser, field classifier and trigger analyzer together."""

import logging
from dataclasses import dataclass
from pathlib import Path

from fmb_parser import FmbParser, Module

from fmbconv.config import FmbconvConfig, create_default_config
from fmbconv.converter import FieldClassifier
from fmbconv.models import ConversionResult, TriggerSectionReport
from fmbconv.triggers import TriggerAnalyzer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormAnalysis:
    """Everything derived from one FMB export."""
    module: Module
    conversion: ConversionResult
    triggers: TriggerSectionReport


def analyze_module(module: Module, config: FmbconvConfig | None = None) -> FormAnalysis:
    config = config or create_default_config()
    return FormAnalysis(
        module=module,
        conversion=FieldClassifier(config.converter).convert(module),
        triggers=TriggerAnalyzer(config.analyzer).analyze(module),
    )


def analyze_xml(xml_content: str | bytes, config: FmbconvConfig | None = None) -> FormAnalysis:
    """Parse frmf2xml content and run both analyses.

    Raises:
        FmbParserError: If the content is malformed or not a module export
    """
    return analyze_module(FmbParser().parse_content(xml_content), config)


def analyze_file(file_path: str | Path, config: FmbconvConfig | None = None) -> FormAnalysis:
    """Parse a frmf2xml file and run both analyses."""
    logger.debug(f"Analyzing {file_path}")
    return analyze_module(FmbParser().parse_file(Path(file_path)), config)
