"""Mock dashboard content: headline stats, discovery trend and recent alerts

All figures are illustrative and hardcoded. Nothing here talks to NVD.
"""

import logging
from typing import Iterable, List, Optional

from dateutil import parser as date_parser

from ..core.models import CVELog, Severity, StatCard, TrendPoint


STAT_CARDS = (
    StatCard(
        title="Total Published CVEs",
        value="226,104+",
        caption="Updated Today",
        tooltip="Cumulative total since NVD started keeping statistics",
    ),
    StatCard(
        title="Critical Severity (2023)",
        value="14.2%",
        caption="of total",
        tooltip="Share of vulnerabilities scored CVSS 9.0-10.0",
    ),
    StatCard(
        title="Avg. Analysis Time",
        value="5.4",
        caption="Days",
        tooltip="Average time NVD takes to analyse and score a CVE",
    ),
)

CVE_TREND = (
    TrendPoint(2019, 17305),
    TrendPoint(2020, 18351),
    TrendPoint(2021, 20161),
    TrendPoint(2022, 25081),
    TrendPoint(2023, 28961),
)


def _alert(cve_id, system, description, severity, score, published):
    return CVELog(
        cve_id=cve_id,
        system=system,
        description=description,
        severity=severity,
        score=score,
        published=date_parser.parse(published).date(),
    )


RECENT_CVES = (
    _alert('CVE-2024-21412', 'Windows', 'Internet Shortcut Files Security Feature Bypass',
           Severity.HIGH, 8.1, '2024-02-13'),
    _alert('CVE-2024-21410', 'Exchange', 'Exchange Server Privilege Escalation Vulnerability',
           Severity.CRITICAL, 9.8, '2024-02-14'),
    _alert('CVE-2024-21413', 'Outlook', 'Microsoft Outlook Remote Code Execution Vulnerability',
           Severity.CRITICAL, 9.8, '2024-02-14'),
    _alert('CVE-2024-0012', 'Palo Alto', 'PAN-OS: Authentication Bypass in Management Interface',
           Severity.HIGH, 8.8, '2024-11-05'),
)


def filter_cves(query: Optional[str] = None,
                cves: Iterable[CVELog] = RECENT_CVES) -> List[CVELog]:
    """Case-insensitive substring search over CVE id, system and description"""
    needle = (query or '').lower()
    if not needle:
        return list(cves)

    matches = [
        cve for cve in cves
        if needle in cve.cve_id.lower()
        or needle in cve.system.lower()
        or needle in cve.description.lower()
    ]
    logging.debug(f"Alert search '{query}' matched {len(matches)} entries")
    return matches
