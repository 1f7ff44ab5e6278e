"""CVSS Simulator configuration management with .env file support"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
OUTPUT_FORMATS = ('table', 'json', 'csv')
DEFAULT_ALERT_LIMIT = 10

ENV_VARS = (
    'CVSS_SIM_LOG_LEVEL',
    'CVSS_SIM_FORMAT',
    'CVSS_SIM_ALERT_LIMIT',
    'CVSS_SIM_COLOR',
)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _parse_alert_limit(value: str, issues: list) -> int:
    try:
        return int(value)
    except ValueError:
        logging.warning(f"CVSS_SIM_ALERT_LIMIT={value!r} is not an integer, using {DEFAULT_ALERT_LIMIT}")
        issues.append(f"Alert limit must be an integer (got {value!r})")
        return DEFAULT_ALERT_LIMIT


@dataclass
class CVSSSimConfig:
    """CVSS Simulator Configuration"""
    log_level: str = "WARNING"
    default_format: str = "table"
    alert_limit: int = DEFAULT_ALERT_LIMIT
    color: bool = True
    load_issues: list = field(default_factory=list, repr=False)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'CVSSSimConfig':
        """Load configuration from environment variables and .env file"""

        if env_file:
            env_path = Path(env_file)
        else:
            # Look for .env in current directory and up to 3 parent directories
            current_dir = Path.cwd()
            env_path = None

            for path in [current_dir] + list(current_dir.parents)[:3]:
                potential_env = path / ".env"
                if potential_env.exists():
                    env_path = potential_env
                    break

        if env_path and env_path.exists():
            load_dotenv(env_path)
            logging.info(f"Loaded configuration from {env_path}")
        elif env_file:
            logging.warning(f"Specified .env file not found: {env_file}")

        load_issues = []
        alert_limit = _parse_alert_limit(os.getenv('CVSS_SIM_ALERT_LIMIT', str(DEFAULT_ALERT_LIMIT)), load_issues)

        return cls(
            log_level=os.getenv('CVSS_SIM_LOG_LEVEL', 'WARNING'),
            default_format=os.getenv('CVSS_SIM_FORMAT', 'table'),
            alert_limit=alert_limit,
            color=_parse_bool(os.getenv('CVSS_SIM_COLOR', 'true')),
            load_issues=load_issues,
        )

    def validate(self) -> list[str]:
        """Validate configuration and return list of issues"""
        issues = list(self.load_issues)

        if self.log_level.upper() not in LOG_LEVELS:
            issues.append(f"Unknown log level '{self.log_level}'")

        if self.default_format not in OUTPUT_FORMATS:
            issues.append(
                f"Unknown output format '{self.default_format}' "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )

        if self.alert_limit <= 0:
            issues.append("Alert limit must be positive")

        return issues
