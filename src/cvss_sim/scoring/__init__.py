"""Scoring engines"""

from .cvss_scorer import CVSSScorer

__all__ = ['CVSSScorer']
