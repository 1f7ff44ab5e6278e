"""JSON format output formatter"""

import json
from dataclasses import asdict
from typing import Dict, Sequence

from ...core.metrics import METRICS, MetricDefinition
from ...core.models import CVELog, CVSSFactors, ScoreResult, StatCard, TrendPoint


class JSONFormatter:
    """JSON format output formatter"""

    @staticmethod
    def score_data(result: ScoreResult, factors: CVSSFactors) -> Dict:
        """Build the serialisable form of a score"""
        selected = {}
        for metric in METRICS:
            weight = getattr(factors, metric.key)
            option = metric.option_for_weight(weight)
            selected[metric.code] = {
                'weight': weight,
                'label': option.label if option else None,
            }

        return {
            'score': result.score,
            'severity': result.severity.value,
            'color': result.color,
            'patch_immediately': result.patch_immediately,
            'impact': round(result.impact, 6),
            'exploitability': round(result.exploitability, 6),
            'factors': selected,
        }

    @staticmethod
    def format_score(result: ScoreResult, factors: CVSSFactors) -> str:
        """Format a single score as JSON"""
        return json.dumps(JSONFormatter.score_data(result, factors), indent=2)

    @staticmethod
    def format_metrics(metrics: Sequence[MetricDefinition]) -> str:
        """Format metric option tables as JSON"""
        return json.dumps([asdict(metric) for metric in metrics], indent=2)

    @staticmethod
    def format_dashboard(cards: Sequence[StatCard], trend: Sequence[TrendPoint],
                         cves: Sequence[CVELog]) -> str:
        """Format dashboard content as JSON"""
        alerts = []
        for cve in cves:
            data = asdict(cve)

            # Convert enum and date to strings
            data['severity'] = cve.severity.value
            data['published'] = cve.published.isoformat()
            alerts.append(data)

        return json.dumps({
            'stats': [asdict(card) for card in cards],
            'trend': [asdict(point) for point in trend],
            'alerts': alerts,
        }, indent=2)
