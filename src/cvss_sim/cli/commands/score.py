"""Base score calculation commands"""

import logging
import click

from ...core.metrics import (
    ATTACK_COMPLEXITY, ATTACK_VECTOR, AVAILABILITY, CONFIDENTIALITY, INTEGRITY,
    PRIVILEGES_REQUIRED, USER_INTERACTION, InvalidFactorError, factors_from_codes,
)
from ...core.models import CVSSFactors
from ...scoring.cvss_scorer import CVSSScorer
from ..formatters.table import TableFormatter
from ..formatters.json import JSONFormatter
from ..formatters.csv import CSVFormatter


def _choice(metric):
    return click.Choice(metric.codes, case_sensitive=False)


@click.command()
@click.option('--av', '--attack-vector', 'av', type=_choice(ATTACK_VECTOR), default='N',
              show_default=True, help='Attack Vector: Network, Adjacent, Local, Physical')
@click.option('--ac', '--attack-complexity', 'ac', type=_choice(ATTACK_COMPLEXITY), default='L',
              show_default=True, help='Attack Complexity: Low, High')
@click.option('--pr', '--privileges-required', 'pr', type=_choice(PRIVILEGES_REQUIRED), default='N',
              show_default=True, help='Privileges Required: None, Low, High')
@click.option('--ui', '--user-interaction', 'ui', type=_choice(USER_INTERACTION), default='N',
              show_default=True, help='User Interaction: None, Required')
@click.option('-C', '--confidentiality', 'c', type=_choice(CONFIDENTIALITY), default='N',
              show_default=True, help='Confidentiality impact: High, Low, None')
@click.option('-I', '--integrity', 'i', type=_choice(INTEGRITY), default='N',
              show_default=True, help='Integrity impact: High, Low, None')
@click.option('-A', '--availability', 'a', type=_choice(AVAILABILITY), default='N',
              show_default=True, help='Availability impact: High, Low, None')
@click.option('--format', type=click.Choice(['json', 'table', 'csv']), default=None,
              help='Output format (default from configuration)')
@click.option('--output', '-o', help='Output file path')
@click.option('--no-color', is_flag=True, help='Disable coloured severity')
@click.pass_context
def score(ctx, av, ac, pr, ui, c, i, a, format, output, no_color):
    """Calculate a simulated CVSS base score

    Examples:
        cvss-sim score -C H -I H -A H               # 9.8 Critical
        cvss-sim score --av P --ac H --pr H --ui R -C L
        cvss-sim score -C H --format json
    """
    config = ctx.obj['config']
    format = format or config.default_format

    factors = factors_from_codes({
        'AV': av, 'AC': ac, 'PR': pr, 'UI': ui, 'C': c, 'I': i, 'A': a,
    })
    result = CVSSScorer.compute(factors)
    logging.info(f"Computed base score {result.display_score} ({result.severity.value})")

    if format == 'json':
        output_text = JSONFormatter.format_score(result, factors)
    elif format == 'csv':
        output_text = CSVFormatter.to_text(
            CSVFormatter.get_score_headers(),
            [CSVFormatter.format_score_row(result, factors)],
        )
    else:
        color = config.color and not no_color and not output
        output_text = TableFormatter.format_score(result, factors, color=color)

    if output:
        with open(output, 'w') as f:
            f.write(output_text)
        click.echo(f"Results saved to {output}")
    else:
        click.echo(output_text)


@click.command()
@click.option('--set', 'edits', type=(str, str), multiple=True, metavar='METRIC VALUE',
              help='Change one metric, e.g. --set C H (repeatable, applied in order)')
def simulate(edits):
    """Recalculate the score after each metric change

    Starts from the default factors (AV:N AC:L PR:N UI:N C:N I:N A:N) and
    applies the edits one at a time, the way the interactive calculator does.

    Example:
        cvss-sim simulate --set C H --set I H --set AV P
    """
    factors = CVSSFactors()
    click.echo(TableFormatter.format_simulation_step(0, "defaults", CVSSScorer.compute(factors)))

    for step, (metric, value) in enumerate(edits, 1):
        try:
            factors = factors_from_codes({metric: value}, base=factors)
        except InvalidFactorError as e:
            raise click.BadParameter(str(e), param_hint="'--set'")

        result = CVSSScorer.compute(factors)
        click.echo(TableFormatter.format_simulation_step(step, f"{metric.upper()} -> {value.upper()}", result))
