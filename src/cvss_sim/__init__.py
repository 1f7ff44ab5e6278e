"""CVSS Simulator package"""

__version__ = "1.0.0"
__author__ = "CVSS Simulator Team"
__description__ = "Educational CVE dashboard and simplified CVSS base score simulator"
