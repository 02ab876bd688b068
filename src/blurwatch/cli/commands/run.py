"""
Run command for BlurWatch CLI
"""

import sys
from typing import Optional

import click
from colorama import Fore, Style

from blurwatch.core.errors import BlurWatchError
from blurwatch.core.processor import STATUS_MESSAGES, process_settings_file
from blurwatch.utils.path_utils import resolve_path
from blurwatch.cli.utils import (
    load_config_with_fallback,
    apply_overrides,
    configure_logging,
    check_settings_file,
    handle_cli_exception,
)


@click.command()
@click.argument('path', type=click.Path())
@click.option('--config', '-c', type=click.Path(),
              help='Path to configuration file (TOML)')
@click.option('--output-dir', '-o', type=click.Path(file_okay=False),
              help='Directory for blurred images (default: system temp directory)')
@click.option('--dry-run', is_flag=True, help='Show what would be written without making changes')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def run_command(path: str, config: Optional[str], output_dir: Optional[str],
                dry_run: bool, verbose: bool):
    """Blur the background image of a settings file once.

    PATH: Settings file to process
    """
    settings_path = resolve_path(path)
    if not check_settings_file(settings_path):
        sys.exit(1)

    config_obj = load_config_with_fallback(config, settings_path.parent, verbose)
    apply_overrides(config_obj, output_dir=output_dir)
    configure_logging(config_obj, verbose)

    try:
        result = process_settings_file(settings_path, config_obj, dry_run=dry_run)
    except (BlurWatchError, OSError) as e:
        handle_cli_exception(e, verbose)
        return

    if not result.changed:
        click.echo(f"{Fore.YELLOW}{STATUS_MESSAGES[result.status]}; nothing to do{Style.RESET_ALL}")
    elif dry_run:
        click.echo(f"{Fore.CYAN}Would write {result.output_path}{Style.RESET_ALL}")
        click.echo(f"{Fore.CYAN}Would update {settings_path}{Style.RESET_ALL}")
    else:
        click.echo(f"{Fore.GREEN}Blurred image written: {result.output_path}{Style.RESET_ALL}")
        if result.settings_rewritten:
            click.echo(f"{Fore.GREEN}Updated {settings_path}{Style.RESET_ALL}")
