"""Version information command"""

import click
import sys
import platform

from ... import __version__
from ...scoring.cvss_scorer import CVSSScorer


@click.command()
def version():
    """Show CVSS Simulator version and system information"""
    click.echo("CVSS SIMULATOR")
    click.echo("=" * 50)

    click.echo(f"\nVersion Information:")
    click.echo(f"   cvss-sim Version: {__version__}")

    click.echo(f"\nScoring Model (simplified CVSS 3.1 base score):")
    click.echo(f"   Impact = {CVSSScorer.IMPACT_COEFFICIENT} x (1 - (1-C)(1-I)(1-A))")
    click.echo(f"   Exploitability = {CVSSScorer.EXPLOITABILITY_COEFFICIENT} x AV x AC x PR x UI")
    click.echo(f"   Score = roundup(min(10, Impact + Exploitability)), 0 when Impact is 0")

    click.echo(f"\nSystem Information:")
    click.echo(f"   Python Version: {sys.version.split()[0]}")
    click.echo(f"   Platform: {platform.platform()}")

    # Check dependencies
    try:
        from importlib.metadata import version as dist_version

        click.echo(f"\nDependencies:")
        for dist in ('click', 'python-dotenv', 'python-dateutil'):
            click.echo(f"   * {dist}: {dist_version(dist)}")

    except ImportError as e:
        click.echo(f"\nMissing dependency: {e}")
