"""Metric option table listing command"""

import click

from ...core.metrics import METRICS, InvalidFactorError, get_metric
from ..formatters.table import TableFormatter
from ..formatters.json import JSONFormatter


@click.command()
@click.argument('metric_code', required=False)
@click.option('--format', type=click.Choice(['json', 'table']), default='table', help='Output format')
def metrics(metric_code, format):
    """List the selectable options and weights of each metric

    Examples:
        cvss-sim metrics
        cvss-sim metrics AV
        cvss-sim metrics --format json
    """
    if metric_code:
        try:
            selected = [get_metric(metric_code)]
        except InvalidFactorError as e:
            raise click.BadParameter(str(e), param_hint="'METRIC_CODE'")
    else:
        selected = list(METRICS)

    if format == 'json':
        click.echo(JSONFormatter.format_metrics(selected))
    else:
        click.echo(TableFormatter.format_metrics(selected))
