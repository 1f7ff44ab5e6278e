"""Simplified CVSS base score engine

This is a simulation of the CVSS 3.1 base score for teaching purposes. It
keeps the round-up convention and the subscore coefficients of the real
standard but combines them by plain addition, without the scope handling of
the official formula.
"""

import logging
import math

from ..core.models import CVSSFactors, ScoreResult, Severity


class CVSSScorer:
    """Stateless base score calculator"""

    IMPACT_COEFFICIENT = 6.42
    EXPLOITABILITY_COEFFICIENT = 8.22
    MAX_SCORE = 10.0

    @staticmethod
    def round_up(value: float) -> float:
        """Round up to one decimal place"""
        return math.ceil(value * 10) / 10

    @staticmethod
    def calculate_severity(score: float) -> Severity:
        """Calculate severity level from a rounded base score"""
        if score <= 0:
            return Severity.NONE
        elif score < 4.0:
            return Severity.LOW
        elif score < 7.0:
            return Severity.MEDIUM
        elif score < 9.0:
            return Severity.HIGH
        else:
            return Severity.CRITICAL

    @classmethod
    def calculate_impact(cls, factors: CVSSFactors) -> float:
        """Impact subscore from the confidentiality, integrity and availability weights"""
        c, i, a = factors.confidentiality, factors.integrity, factors.availability
        if c == 0 and i == 0 and a == 0:
            return 0.0

        impact_base = 1 - ((1 - c) * (1 - i) * (1 - a))
        return cls.IMPACT_COEFFICIENT * impact_base

    @classmethod
    def calculate_exploitability(cls, factors: CVSSFactors) -> float:
        """Exploitability subscore from the four exploitability weights"""
        return (
            cls.EXPLOITABILITY_COEFFICIENT
            * factors.attack_vector
            * factors.complexity
            * factors.privileges
            * factors.user_interaction
        )

    @classmethod
    def compute(cls, factors: CVSSFactors) -> ScoreResult:
        """Calculate the base score and severity for a set of factors"""
        impact = cls.calculate_impact(factors)
        exploitability = cls.calculate_exploitability(factors)

        # No impact means no score, however easy the exploit is
        if impact <= 0:
            raw_score = 0.0
        else:
            raw_score = min(cls.MAX_SCORE, impact + exploitability)

        final_score = cls.round_up(raw_score)
        severity = cls.calculate_severity(final_score)

        logging.debug(
            f"CVSS impact={impact:.4f} exploitability={exploitability:.4f} "
            f"raw={raw_score:.4f} final={final_score} severity={severity.value}"
        )

        return ScoreResult(
            score=final_score,
            severity=severity,
            impact=impact,
            exploitability=exploitability,
        )
