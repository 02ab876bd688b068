"""
Init-config command for BlurWatch CLI
"""

from pathlib import Path

import click
from colorama import Fore, Style

from blurwatch.core.config import CONFIG_FILE_NAME, default_config_path
from blurwatch.cli.utils import handle_cli_exception


@click.command()
@click.argument('config_path', type=click.Path(), default=CONFIG_FILE_NAME)
def init_config_command(config_path: str):
    """Create a TOML configuration file. Defaults to 'blurwatch.config.toml' if no path specified."""

    try:
        if not config_path.endswith('.toml'):
            click.echo(f"{Fore.YELLOW}Warning: Config file should have .toml extension. Adding .toml{Style.RESET_ALL}")
            config_path = config_path + '.toml'

        toml_content = default_config_path().read_text(encoding='utf-8')
        Path(config_path).write_text(toml_content, encoding='utf-8')

        click.echo(f"{Fore.GREEN}Configuration file created: {config_path}{Style.RESET_ALL}")
        click.echo(f"{Fore.CYAN}Edit this file to customize the blur keys and output directory.{Style.RESET_ALL}")

    except OSError as e:
        handle_cli_exception(e)
