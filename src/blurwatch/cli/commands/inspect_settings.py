"""
Inspect command for BlurWatch CLI
"""

import sys
from typing import Optional

import click
from colorama import Fore, Style

from blurwatch.core.blur import blurred_file_name, image_format
from blurwatch.core.errors import BlurWatchError
from blurwatch.core.processor import STATUS_MESSAGES, check_settings, read_settings_text
from blurwatch.core.scanner import scan_settings
from blurwatch.utils.path_utils import file_name_from_setting, resolve_path
from blurwatch.cli.utils import load_config_with_fallback, check_settings_file, handle_cli_exception


def _mark(ok: bool) -> str:
    return f"{Fore.GREEN}✓{Style.RESET_ALL}" if ok else f"{Fore.YELLOW}○{Style.RESET_ALL}"


@click.command()
@click.argument('path', type=click.Path())
@click.option('--config', '-c', type=click.Path(),
              help='Path to configuration file (TOML)')
@click.option('--verbose', '-v', is_flag=True, help='Show detailed information')
def inspect_command(path: str, config: Optional[str], verbose: bool):
    """Show the blur settings read from a settings file.

    PATH: Settings file to inspect
    """
    settings_path = resolve_path(path)
    if not check_settings_file(settings_path):
        sys.exit(1)

    config_obj = load_config_with_fallback(config, settings_path.parent, verbose)

    try:
        settings = scan_settings(read_settings_text(settings_path), config_obj.keys)
    except (BlurWatchError, OSError) as e:
        handle_cli_exception(e, verbose)
        return

    click.echo(f"{Fore.GREEN}BlurWatch settings for: {settings_path}{Style.RESET_ALL}\n")
    click.echo(f"{_mark(settings.blur_enabled)} {config_obj.enable_key}: {settings.blur_enabled}")
    click.echo(f"{_mark(settings.blur_radius > 0)} {config_obj.radius_key}: {settings.blur_radius}")
    click.echo(f"{_mark(bool(settings.background_image))} {config_obj.image_key}: "
               f"{settings.background_image or '(not set)'}")

    status = check_settings(settings, config_obj.blurred_prefix)
    if status is not None:
        click.echo(f"\n{Fore.YELLOW}{STATUS_MESSAGES[status]}{Style.RESET_ALL}")
        return

    try:
        image_format(settings.background_image)
    except BlurWatchError as e:
        click.echo(f"\n{Fore.RED}{e}{Style.RESET_ALL}")
        return

    output = config_obj.resolve_output_dir() / blurred_file_name(
        file_name_from_setting(settings.background_image),
        settings.blur_radius,
        config_obj.blurred_prefix,
    )
    click.echo(f"\n{Fore.CYAN}Next change would write: {output}{Style.RESET_ALL}")
