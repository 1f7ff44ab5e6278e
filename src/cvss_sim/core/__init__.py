"""Core data models and metric tables"""

from .models import Severity, CVSSFactors, ScoreResult, CVELog, TrendPoint, StatCard
from .metrics import MetricOption, MetricDefinition, InvalidFactorError

__all__ = [
    'Severity', 'CVSSFactors', 'ScoreResult', 'CVELog', 'TrendPoint', 'StatCard',
    'MetricOption', 'MetricDefinition', 'InvalidFactorError',
]
