"""Trigger analyzer: per-trigger reports and module statistics."""

import logging
from collections import Counter
from typing import Optional

from fmb_parser.models import Module, Trigger

from ..config import AnalyzerConfig
from ..models.triggers import (
    BlockTriggers,
    TriggerLevel,
    TriggerReport,
    TriggerSectionReport,
    TriggerStatistics,
)
from .decoding import classify_trivial, decode_trigger_text
from .events import get_trigger_event_info, is_known_event
from .rules import RuleClassifier
from .sql_extractor import SqlExtractor
from .summary import summarize_rules

logger = logging.getLogger(__name__)


class TriggerAnalyzer:
    """Analyzes form-level and block-level triggers of a module.

    Example usage:
        analyzer = TriggerAnalyzer()
        report = analyzer.analyze(module)
        for trigger in report.all_triggers:
            print(trigger.no, trigger.name, trigger.summary)
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()
        self.extractor = SqlExtractor(self.config)
        self.classifier = RuleClassifier(extractor=self.extractor)

    def analyze(self, module: Module) -> TriggerSectionReport:
        """Analyze every trigger, form level first, numbering them from 1.

        Args:
            module: Parsed module tree

        Returns:
            TriggerSectionReport with statistics over all reports
        """
        sequence = 1

        form_triggers = []
        for trigger in module.triggers:
            form_triggers.append(self.analyze_trigger(trigger, sequence, TriggerLevel.FORM))
            sequence += 1

        block_triggers = []
        for block in module.blocks:
            if not block.triggers:
                continue
            reports = []
            for trigger in block.triggers:
                reports.append(self.analyze_trigger(trigger, sequence, TriggerLevel.BLOCK, block.name))
                sequence += 1
            block_triggers.append(BlockTriggers(block_name=block.name, triggers=reports))

        by_event_type = Counter(trigger.name for trigger in module.triggers)
        for block in module.blocks:
            by_event_type.update(trigger.name for trigger in block.triggers)

        block_level_count = sum(len(block.triggers) for block in block_triggers)
        statistics = TriggerStatistics(
            total_count=len(form_triggers) + block_level_count,
            form_level_count=len(form_triggers),
            block_level_count=block_level_count,
            by_event_type=dict(by_event_type),
        )
        logger.info(
            f"Analyzed {statistics.total_count} triggers in {module.name} "
            f"({statistics.form_level_count} form, {statistics.block_level_count} block)"
        )
        return TriggerSectionReport(
            form_triggers=form_triggers,
            block_triggers=block_triggers,
            statistics=statistics,
        )

    def analyze_trigger(
        self,
        trigger: Trigger,
        no: int,
        level: TriggerLevel,
        block_name: Optional[str] = None,
    ) -> TriggerReport:
        """Decode, extract, classify and summarize a single trigger."""
        text = decode_trigger_text(trigger.text)
        trivial = classify_trivial(text)

        if trivial is None:
            sql_statements = self.extractor.extract(text)
            rules = self.classifier.classify(text, trigger.name)
        else:
            sql_statements, rules = [], []

        if not is_known_event(trigger.name):
            logger.debug(f"Unknown trigger event {trigger.name}, using generic description")
        event = get_trigger_event_info(trigger.name)

        return TriggerReport(
            no=no,
            name=trigger.name,
            event_description=event.description,
            java_use=event.java_use,
            maximo_location=event.maximo_location,
            level=level,
            block_name=block_name,
            trigger_text=text,
            sql_statements=sql_statements,
            business_rules=rules,
            summary=summarize_rules(rules, trivial),
        )


def analyze_triggers(module: Module, config: Optional[AnalyzerConfig] = None) -> TriggerSectionReport:
    """Convenience function to analyze a module with optional configuration."""
    return TriggerAnalyzer(config).analyze(module)


def generate_trigger_summary(text: str, trigger_name: str, config: Optional[AnalyzerConfig] = None) -> str:
    """Summary line for raw (still encoded) trigger text."""
    decoded = decode_trigger_text(text)
    trivial = classify_trivial(decoded)
    if trivial is not None:
        return summarize_rules([], trivial)
    return summarize_rules(RuleClassifier(config).classify(decoded, trigger_name))
