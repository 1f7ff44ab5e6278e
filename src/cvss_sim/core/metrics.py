"""CVSS metric option tables

Every metric is described once here, with its ordered options, weights and
display text. The scoring engine only ever sees the weights; labels, codes and
colours exist for the CLI and for optional validation.
"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, List, Mapping, Optional, Tuple

from .models import CVSSFactors


class InvalidFactorError(ValueError):
    """Raised when a metric or option code is not part of the tables"""


@dataclass(frozen=True)
class MetricOption:
    """One selectable value of a metric"""
    weight: float
    label: str
    code: str
    description: str
    color: str


@dataclass(frozen=True)
class MetricDefinition:
    """A CVSS base metric and its allowed options"""
    key: str
    code: str
    title: str
    group: str
    tooltip: str
    options: Tuple[MetricOption, ...]

    @property
    def max_weight(self) -> float:
        return max(option.weight for option in self.options)

    @property
    def codes(self) -> List[str]:
        return [option.code for option in self.options]

    def option_for_code(self, code: str) -> MetricOption:
        """Look up an option by its one-letter code (case-insensitive)"""
        wanted = code.strip().upper()
        for option in self.options:
            if option.code == wanted:
                return option
        raise InvalidFactorError(
            f"Unknown value '{code}' for {self.code}; expected one of {', '.join(self.codes)}"
        )

    def option_for_weight(self, weight: float) -> Optional[MetricOption]:
        """Find the option carrying this weight, if any"""
        for option in self.options:
            if abs(option.weight - weight) < 1e-9:
                return option
        return None

    def risk_ratio(self, weight: float) -> float:
        """Share of this metric's maximum weight, capped at 1.0"""
        if self.max_weight <= 0:
            return 0.0
        return min(1.0, weight / self.max_weight)


EXPLOITABILITY = "exploitability"
IMPACT = "impact"

RED = "#ef4444"
ORANGE = "#f97316"
YELLOW = "#eab308"
GREEN = "#22c55e"

ATTACK_VECTOR = MetricDefinition(
    key="attack_vector",
    code="AV",
    title="Attack Vector (AV)",
    group=EXPLOITABILITY,
    tooltip="How remote the attacker can be. Network access scores highest "
            "because no physical access to the device is needed.",
    options=(
        MetricOption(0.85, "Network", "N", "Exploitable remotely over the internet (most dangerous)", RED),
        MetricOption(0.62, "Adjacent", "A", "Attacker must share the LAN or logical network", ORANGE),
        MetricOption(0.55, "Local", "L", "Attacker needs local access or must deliver a file to the victim", YELLOW),
        MetricOption(0.20, "Physical", "P", "Attacker must physically touch the device", GREEN),
    ),
)

ATTACK_COMPLEXITY = MetricDefinition(
    key="complexity",
    code="AC",
    title="Attack Complexity (AC)",
    group=EXPLOITABILITY,
    tooltip="How hard the attack is. Low complexity attacks with no special "
            "conditions score higher than ones that depend on timing or setup.",
    options=(
        MetricOption(0.77, "Low", "L", "Easy to exploit and repeatable", RED),
        MetricOption(0.44, "High", "H", "Requires special conditions or precise timing", GREEN),
    ),
)

PRIVILEGES_REQUIRED = MetricDefinition(
    key="privileges",
    code="PR",
    title="Privileges Required (PR)",
    group=EXPLOITABILITY,
    tooltip="Starting privileges. No privileges scores highest; the more "
            "privilege an attacker needs, the lower the risk.",
    options=(
        MetricOption(0.85, "None", "N", "Anyone can attack without logging in", RED),
        MetricOption(0.62, "Low", "L", "Requires an ordinary user account", ORANGE),
        MetricOption(0.27, "High", "H", "Requires administrator or other elevated rights", GREEN),
    ),
)

USER_INTERACTION = MetricDefinition(
    key="user_interaction",
    code="UI",
    title="User Interaction (UI)",
    group=EXPLOITABILITY,
    tooltip="Whether a victim has to do something. Attacks that succeed "
            "without any victim action score higher.",
    options=(
        MetricOption(0.85, "None", "N", "The system is compromised without any victim action", RED),
        MetricOption(0.62, "Required", "R", "The victim must be tricked into clicking or installing something", GREEN),
    ),
)

CONFIDENTIALITY = MetricDefinition(
    key="confidentiality",
    code="C",
    title="Confidentiality (C)",
    group=IMPACT,
    tooltip="Impact on secrecy. Total disclosure of sensitive data raises the "
            "score sharply.",
    options=(
        MetricOption(0.56, "High", "H", "All sensitive or secret data is disclosed", RED),
        MetricOption(0.22, "Low", "L", "Some data leaks, or the data is of limited value", YELLOW),
        MetricOption(0.0, "None", "N", "No data is disclosed", GREEN),
    ),
)

INTEGRITY = MetricDefinition(
    key="integrity",
    code="I",
    title="Integrity (I)",
    group=IMPACT,
    tooltip="Impact on trustworthiness. Data modified to the point of total "
            "loss of integrity scores high.",
    options=(
        MetricOption(0.56, "High", "H", "Complete loss of trust, core system data modified", RED),
        MetricOption(0.22, "Low", "L", "Minor modification with no effect on the core system", YELLOW),
        MetricOption(0.0, "None", "N", "Data remains complete and correct", GREEN),
    ),
)

AVAILABILITY = MetricDefinition(
    key="availability",
    code="A",
    title="Availability (A)",
    group=IMPACT,
    tooltip="Impact on service. A system that goes down completely is the "
            "most severe outcome.",
    options=(
        MetricOption(0.56, "High", "H", "The system is down and entirely unusable", RED),
        MetricOption(0.22, "Low", "L", "Degraded performance or some functions unavailable", YELLOW),
        MetricOption(0.0, "None", "N", "The system keeps working normally", GREEN),
    ),
)

METRICS: Tuple[MetricDefinition, ...] = (
    ATTACK_VECTOR,
    ATTACK_COMPLEXITY,
    PRIVILEGES_REQUIRED,
    USER_INTERACTION,
    CONFIDENTIALITY,
    INTEGRITY,
    AVAILABILITY,
)

EXPLOITABILITY_METRICS = tuple(m for m in METRICS if m.group == EXPLOITABILITY)
IMPACT_METRICS = tuple(m for m in METRICS if m.group == IMPACT)

METRICS_BY_KEY: Dict[str, MetricDefinition] = {m.key: m for m in METRICS}
METRICS_BY_CODE: Dict[str, MetricDefinition] = {m.code: m for m in METRICS}

# Shown next to the score; intentionally not derived from the selected factors
VECTOR_PLACEHOLDER = "CVSS:3.1/AV:N/AC:L..."


def get_metric(name: str) -> MetricDefinition:
    """Resolve a metric by field name (``attack_vector``) or code (``AV``)"""
    if name in METRICS_BY_KEY:
        return METRICS_BY_KEY[name]
    code = name.strip().upper()
    if code in METRICS_BY_CODE:
        return METRICS_BY_CODE[code]
    raise InvalidFactorError(
        f"Unknown metric '{name}'; expected one of {', '.join(METRICS_BY_CODE)}"
    )


def factors_from_codes(selection: Mapping[str, str],
                       base: Optional[CVSSFactors] = None) -> CVSSFactors:
    """Build factors from metric code to option code pairs.

    Metrics not present in ``selection`` keep their value from ``base``
    (or the defaults), so this doubles as a field-by-field edit.
    """
    changes = {}
    for metric_name, option_code in selection.items():
        metric = get_metric(metric_name)
        changes[metric.key] = metric.option_for_code(option_code).weight

    factors = (base or CVSSFactors()).replace(**changes)
    logging.debug(f"Built factors from {dict(selection)}: {factors}")
    return factors


def validate_factors(factors: CVSSFactors) -> List[str]:
    """Validate factor weights against the tables and return list of issues"""
    issues = []

    for field in fields(factors):
        metric = METRICS_BY_KEY[field.name]
        weight = getattr(factors, field.name)
        if metric.option_for_weight(weight) is None:
            allowed = ", ".join(f"{option.weight:g}" for option in metric.options)
            issues.append(f"{metric.code} weight {weight!r} is not one of {allowed}")

    return issues


def describe_factors(factors: CVSSFactors) -> Dict[str, str]:
    """Map each metric code to the label of its selected option"""
    described = {}
    for metric in METRICS:
        option = metric.option_for_weight(getattr(factors, metric.key))
        described[metric.code] = option.label if option else "Custom"
    return described
