"""CLI commands package"""

from .score import score, simulate
from .metrics import metrics
from .dashboard import dashboard
from .learn import learn
from .config import config_cmd
from .version import version

__all__ = ['score', 'simulate', 'metrics', 'dashboard', 'learn', 'config_cmd', 'version']
