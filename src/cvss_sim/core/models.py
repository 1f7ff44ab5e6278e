"""Core data models for the CVSS simulator"""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum


class Severity(Enum):
    """CVSS Severity Levels"""
    NONE = "None"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def color(self) -> str:
        """Hex display colour for this severity"""
        return SEVERITY_COLORS[self]

    @property
    def terminal_color(self) -> str:
        """Closest ANSI colour name understood by click.style"""
        return SEVERITY_TERMINAL_COLORS[self]


SEVERITY_COLORS = {
    Severity.NONE: "#94a3b8",
    Severity.LOW: "#22c55e",
    Severity.MEDIUM: "#eab308",
    Severity.HIGH: "#f97316",
    Severity.CRITICAL: "#ef4444",
}

SEVERITY_TERMINAL_COLORS = {
    Severity.NONE: "white",
    Severity.LOW: "green",
    Severity.MEDIUM: "yellow",
    Severity.HIGH: "bright_red",
    Severity.CRITICAL: "red",
}


@dataclass(frozen=True)
class CVSSFactors:
    """Selected metric weights for a single base score calculation.

    Each field holds the numeric weight of the chosen option, not its label.
    The defaults describe a network reachable, trivially exploitable flaw
    with no impact at all, which scores 0.0.
    """
    attack_vector: float = 0.85
    complexity: float = 0.77
    privileges: float = 0.85
    user_interaction: float = 0.85
    confidentiality: float = 0.0
    integrity: float = 0.0
    availability: float = 0.0

    def replace(self, **changes) -> 'CVSSFactors':
        """Return a copy with the given fields changed"""
        return replace(self, **changes)


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of a base score calculation"""
    score: float
    severity: Severity
    impact: float = 0.0
    exploitability: float = 0.0

    @property
    def display_score(self) -> str:
        return f"{self.score:.1f}"

    @property
    def color(self) -> str:
        return self.severity.color

    @property
    def patch_immediately(self) -> bool:
        """Critical findings carry an urgent patch advisory"""
        return self.severity == Severity.CRITICAL


@dataclass(frozen=True)
class CVELog:
    """A recent vulnerability alert shown on the dashboard"""
    cve_id: str
    system: str
    description: str
    severity: Severity
    score: float
    published: date


@dataclass(frozen=True)
class TrendPoint:
    """Number of CVEs registered in a given year"""
    year: int
    cve_count: int


@dataclass(frozen=True)
class StatCard:
    """Headline figure on the dashboard"""
    title: str
    value: str
    caption: str
    tooltip: str
