"""Knowledge base topics about the CVE ecosystem"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class KnowledgeTopic:
    key: str
    title: str
    body: str
    keywords: str
    items: Tuple[str, ...] = ()


LIFECYCLE_STEPS = (
    ("Discovery", "A researcher finds the vulnerability"),
    ("Reporting", "It is reported to a CNA or to MITRE"),
    ("CVE ID", "MITRE assigns a CVE ID"),
    ("Analysis", "NVD publishes and scores it"),
)

CNA_PARTNERS = (
    'Adobe', 'Apple', 'Google', 'IBM', 'Microsoft', 'Oracle',
    'Red Hat', 'Cisco', 'Mozilla', 'Linux', 'HP', 'Intel',
)

TOPICS = (
    KnowledgeTopic(
        key="intro",
        title="What is a CVE?",
        body=(
            "Common Vulnerabilities and Exposures (CVE) works like a dictionary of "
            "security vulnerabilities. Its goal is a single standard name for each "
            "vulnerability worldwide. It is sponsored by the U.S. Department of "
            "Homeland Security and maintained by the MITRE Corporation."
        ),
        keywords="CVE Common Vulnerabilities and Exposures what is dictionary vulnerability MITRE Corporation",
    ),
    KnowledgeTopic(
        key="nvd",
        title="The role of NVD",
        body=(
            "Once a CVE is created, the National Vulnerability Database (NVD) "
            "analyses it further, adding detail and a CVSS severity score. It is "
            "the most complete national vulnerability database."
        ),
        keywords="NVD National Vulnerability Database role CVSS score analysis",
    ),
    KnowledgeTopic(
        key="workflow",
        title="Vulnerability Lifecycle",
        body="How a newly found vulnerability becomes a published, scored CVE.",
        keywords="Discovery Reporting CVE ID Analysis lifecycle process report vulnerability",
        items=tuple(f"{step}: {description}" for step, description in LIFECYCLE_STEPS),
    ),
    KnowledgeTopic(
        key="cna",
        title="CVE Numbering Authorities (CNA)",
        body="Organisations authorised to assign CVE IDs themselves. 90+ Organizations.",
        keywords="CVE Numbering Authorities CNA organisation assign " + " ".join(CNA_PARTNERS),
        items=CNA_PARTNERS,
    ),
)


def search_topics(query: Optional[str] = None) -> List[KnowledgeTopic]:
    """Return topics whose keywords contain the query (case-insensitive)"""
    needle = (query or '').lower()
    return [topic for topic in TOPICS if not needle or needle in topic.keywords.lower()]
