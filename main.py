"""WorkWatch CLI entry point."""

import click

from workwatch.cli.commands import run_command


@click.command()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              default=None, help='Path to workwatch.toml')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Log level for the session log file')
def cli(config_path, log_level):
    """WorkWatch - clock in, log what you did, clock out."""
    run_command(config_path=config_path, log_level=log_level)


if __name__ == '__main__':
    cli()
