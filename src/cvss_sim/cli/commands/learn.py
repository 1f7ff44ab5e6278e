"""Knowledge base command"""

import click

from ...data.knowledge import search_topics
from ..formatters.table import TableFormatter


@click.command()
@click.option('--search', '-s', default='', help='Only show topics matching this keyword')
def learn(search):
    """Read about CVE, NVD, the vulnerability lifecycle and CNAs

    Examples:
        cvss-sim learn
        cvss-sim learn --search mitre
    """
    click.echo(TableFormatter.format_topics(search_topics(search)))
