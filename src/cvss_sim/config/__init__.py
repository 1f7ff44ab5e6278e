"""Configuration management"""

from .settings import CVSSSimConfig

__all__ = ['CVSSSimConfig']
