"""Configuration management commands"""

import os
import click

from ...config.settings import ENV_VARS, CVSSSimConfig


@click.command('config')
@click.option('--show-env', is_flag=True, help='Show all environment variables')
@click.option('--validate', is_flag=True, help='Validate configuration')
@click.option('--env-file', help='Specify custom .env file path')
def config_cmd(show_env, validate, env_file):
    """Show current CVSS Simulator configuration

    Example:
        cvss-sim config
        cvss-sim config --show-env
        cvss-sim config --validate
        cvss-sim config --env-file /path/to/custom.env
    """
    config = CVSSSimConfig.from_env(env_file)

    click.echo("CVSS SIMULATOR CONFIGURATION")
    click.echo("=" * 50)

    click.echo(f"\nSettings:")
    click.echo(f"   Log Level: {config.log_level}")
    click.echo(f"   Default Format: {config.default_format}")
    click.echo(f"   Alert Limit: {config.alert_limit}")
    click.echo(f"   Colour Output: {'on' if config.color else 'off'}")

    if show_env:
        click.echo(f"\nEnvironment Variables:")
        for var in ENV_VARS:
            click.echo(f"   {var}: {os.getenv(var) or 'Not Set'}")

    if validate:
        click.echo(f"\nConfiguration Validation:")
        issues = config.validate()

        if not issues:
            click.echo("   Configuration looks good!")
        else:
            click.echo("   Issues found:")
            for issue in issues:
                click.echo(f"      - {issue}")
