"""Table format output formatter"""

import textwrap
from typing import Iterable, List, Optional, Sequence

import click

from ...core.metrics import EXPLOITABILITY_METRICS, IMPACT_METRICS, VECTOR_PLACEHOLDER, MetricDefinition
from ...core.models import CVELog, CVSSFactors, ScoreResult, StatCard, TrendPoint
from ...data.knowledge import KnowledgeTopic


class TableFormatter:
    """Plain text formatter for terminal output"""

    GAUGE_WIDTH = 20
    BAR_WIDTH = 10
    CHART_WIDTH = 40
    PATCH_ADVISORY = "WARNING: Very high risk. Administrators should fix this right away (Patch Immediately)"

    @staticmethod
    def format_score(result: ScoreResult, factors: CVSSFactors, color: bool = False) -> str:
        """Format a score with its gauge, subscores and selected options"""
        lines = []

        severity_text = result.severity.value.upper()
        if color:
            severity_text = click.style(severity_text, fg=result.severity.terminal_color, bold=True)

        lines.append(f"Base Score: {result.display_score} / 10.0  [{severity_text}]")
        lines.append(f"  {TableFormatter._gauge(result.score)}")
        lines.append(f"  Vector String: {VECTOR_PLACEHOLDER}")
        if result.patch_immediately:
            lines.append(f"  {TableFormatter.PATCH_ADVISORY}")
        lines.append("")

        lines.append("SUBSCORES:")
        lines.append(f"  Impact:         {result.impact:.4f}")
        lines.append(f"  Exploitability: {result.exploitability:.4f}")
        lines.append("")

        lines.append("EXPLOITABILITY METRICS:")
        lines.extend(TableFormatter._metric_lines(EXPLOITABILITY_METRICS, factors))
        lines.append("")

        lines.append("IMPACT METRICS:")
        lines.extend(TableFormatter._metric_lines(IMPACT_METRICS, factors))

        return "\n".join(lines)

    @staticmethod
    def format_simulation_step(step: int, change: str, result: ScoreResult) -> str:
        """One line of a simulate run"""
        return f"{step:>3}. {change:<20} -> {result.display_score:>4} {result.severity.value}"

    @staticmethod
    def format_metrics(metrics: Iterable[MetricDefinition]) -> str:
        """Format metric option tables"""
        lines = []

        for metric in metrics:
            lines.append(f"{metric.title} [{metric.group}]")
            lines.append(textwrap.fill(metric.tooltip, width=70,
                                       initial_indent="  ", subsequent_indent="  "))
            for option in metric.options:
                lines.append(
                    f"    {option.code}  {option.label:<10} {option.weight:<5g} {option.description}"
                )
            lines.append("")

        return "\n".join(lines).rstrip()

    @staticmethod
    def format_dashboard(cards: Sequence[StatCard], trend: Sequence[TrendPoint],
                         cves: Sequence[CVELog], query: Optional[str] = None) -> str:
        """Format stat cards, discovery trend and recent alerts"""
        lines = []

        lines.append("CVE OVERVIEW")
        lines.append("=" * 50)
        for card in cards:
            lines.append(f"  {card.title}: {card.value} {card.caption}")
        lines.append("")

        lines.append("CVE DISCOVERY TREND:")
        lines.extend(TableFormatter._trend_lines(trend))
        lines.append("")

        header = "RECENT ALERTS (Filtered):" if query else "RECENT ALERTS:"
        lines.append(header)
        lines.extend(TableFormatter.format_alerts(cves, query))

        return "\n".join(lines)

    @staticmethod
    def format_alerts(cves: Sequence[CVELog], query: Optional[str] = None) -> List[str]:
        if not cves:
            return [f'  No CVEs found matching "{query}"']

        lines = []
        for cve in cves:
            lines.append(f"  [{cve.cve_id}] {cve.severity.value} {cve.score} - {cve.system}")
            lines.append(f"    {cve.description} ({cve.published.isoformat()})")
        return lines

    @staticmethod
    def format_topics(topics: Sequence[KnowledgeTopic]) -> str:
        """Format knowledge base topics"""
        if not topics:
            return "No topics found"

        lines = []
        for topic in topics:
            lines.append(topic.title)
            lines.append("-" * len(topic.title))
            lines.append(textwrap.fill(topic.body, width=70))
            for item in topic.items:
                lines.append(f"  * {item}")
            lines.append("")

        return "\n".join(lines).rstrip()

    @staticmethod
    def _gauge(score: float) -> str:
        filled = int(round(score / 10.0 * TableFormatter.GAUGE_WIDTH))
        return "[" + "#" * filled + "." * (TableFormatter.GAUGE_WIDTH - filled) + "]"

    @staticmethod
    def _metric_lines(metrics: Iterable[MetricDefinition], factors: CVSSFactors) -> List[str]:
        lines = []
        for metric in metrics:
            weight = getattr(factors, metric.key)
            option = metric.option_for_weight(weight)
            label = option.label if option else f"Custom ({weight:g})"
            filled = int(round(metric.risk_ratio(weight) * TableFormatter.BAR_WIDTH))
            bar = "#" * filled + "." * (TableFormatter.BAR_WIDTH - filled)
            lines.append(f"  {metric.title:<26} {label:<10} {bar}")
        return lines

    @staticmethod
    def _trend_lines(trend: Sequence[TrendPoint]) -> List[str]:
        if not trend:
            return ["  No data"]

        peak = max(point.cve_count for point in trend) or 1
        lines = []
        for point in trend:
            width = int(round(point.cve_count / peak * TableFormatter.CHART_WIDTH))
            lines.append(f"  {point.year} {'#' * width} {point.cve_count:,}")
        return lines
