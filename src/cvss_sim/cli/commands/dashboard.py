"""Mock CVE dashboard command"""

import click

from ...data.dashboard import CVE_TREND, RECENT_CVES, STAT_CARDS, filter_cves
from ..formatters.table import TableFormatter
from ..formatters.json import JSONFormatter
from ..formatters.csv import CSVFormatter


@click.command()
@click.option('--search', '-s', default='', help='Filter alerts by CVE id, system or description')
@click.option('--format', type=click.Choice(['json', 'table', 'csv']), default=None,
              help='Output format (default from configuration)')
@click.option('--limit', type=click.IntRange(min=1), default=None,
              help='Maximum number of alerts to show (default from configuration)')
@click.pass_context
def dashboard(ctx, search, format, limit):
    """Show CVE statistics, the discovery trend and recent alerts

    All figures are illustrative sample data.

    Examples:
        cvss-sim dashboard
        cvss-sim dashboard --search outlook
        cvss-sim dashboard --format csv
    """
    config = ctx.obj['config']
    format = format or config.default_format
    if limit is None:
        if config.alert_limit <= 0:
            raise click.UsageError(
                f"Configured alert limit must be positive, got {config.alert_limit} "
                f"(set CVSS_SIM_ALERT_LIMIT or pass --limit)"
            )
        limit = config.alert_limit

    alerts = filter_cves(search, RECENT_CVES)[:limit]

    if format == 'json':
        click.echo(JSONFormatter.format_dashboard(STAT_CARDS, CVE_TREND, alerts))
    elif format == 'csv':
        rows = [CSVFormatter.format_alert_row(cve) for cve in alerts]
        click.echo(CSVFormatter.to_text(CSVFormatter.get_alert_headers(), rows))
    else:
        click.echo(TableFormatter.format_dashboard(STAT_CARDS, CVE_TREND, alerts, search))
