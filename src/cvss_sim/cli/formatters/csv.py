"""CSV format output formatter"""

import csv
import io
from typing import Iterable, List

from ...core.metrics import METRICS
from ...core.models import CVELog, CVSSFactors, ScoreResult


class CSVFormatter:
    """CSV format output formatter"""

    @staticmethod
    def get_score_headers() -> List[str]:
        """Get CSV headers for score rows"""
        return ['score', 'severity', 'impact', 'exploitability'] + [metric.code for metric in METRICS]

    @staticmethod
    def format_score_row(result: ScoreResult, factors: CVSSFactors) -> List[str]:
        """Format single score as CSV row"""
        return [
            result.display_score,
            result.severity.value,
            f"{result.impact:.6f}",
            f"{result.exploitability:.6f}",
        ] + [f"{getattr(factors, metric.key):g}" for metric in METRICS]

    @staticmethod
    def get_alert_headers() -> List[str]:
        """Get CSV headers for dashboard alerts"""
        return ['cve_id', 'system', 'severity', 'score', 'published', 'description']

    @staticmethod
    def format_alert_row(cve: CVELog) -> List[str]:
        """Format single alert as CSV row"""
        return [
            cve.cve_id,
            cve.system,
            cve.severity.value,
            str(cve.score),
            cve.published.isoformat(),
            cve.description.replace('\n', ' ').replace('\r', ' '),
        ]

    @staticmethod
    def to_text(headers: List[str], rows: Iterable[List[str]]) -> str:
        """Render headers and rows as CSV text"""
        output_buffer = io.StringIO()
        writer = csv.writer(output_buffer)
        writer.writerow(headers)
        for row in rows:
            writer.writerow(row)
        return output_buffer.getvalue().strip()
