"""
Watch command for BlurWatch CLI
"""

import sys
import time
from typing import Optional

import click
from colorama import Fore, Style

from blurwatch.core.watcher import SettingsFileWatcher
from blurwatch.core.processor import process_settings_file
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
@click.option('--cooldown', type=float,
              help='Seconds to ignore further changes after processing (default: 8)')
@click.option('--output-dir', '-o', type=click.Path(file_okay=False),
              help='Directory for blurred images (default: system temp directory)')
@click.option('--keep-going', is_flag=True,
              help='Log processing errors and keep watching instead of exiting')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
def watch_command(path: str, config: Optional[str], cooldown: Optional[float],
                  output_dir: Optional[str], keep_going: bool, verbose: bool):
    """Start watching a settings file and blur its background image on change.

    PATH: Settings file to watch
    """
    settings_path = resolve_path(path)
    if not check_settings_file(settings_path):
        sys.exit(1)

    config_obj = load_config_with_fallback(config, settings_path.parent, verbose)
    apply_overrides(config_obj, cooldown=cooldown, output_dir=output_dir)
    configure_logging(config_obj, verbose)

    click.echo(f"{Fore.GREEN}Starting BlurWatch...{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Watching: {settings_path}{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Cooldown: {config_obj.cooldown}s{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Output directory: {config_obj.resolve_output_dir()}{Style.RESET_ALL}")

    def on_change():
        result = process_settings_file(settings_path, config_obj)
        if result.changed:
            click.echo(f"{Fore.GREEN}Blurred image written: {result.output_path}{Style.RESET_ALL}")

    watcher = SettingsFileWatcher(
        settings_path=str(settings_path),
        callback=on_change,
        cooldown=config_obj.cooldown
    )

    try:
        watcher.start()
        click.echo(f"{Fore.YELLOW}Press Ctrl+C to stop watching...{Style.RESET_ALL}")

        while True:
            time.sleep(1)

            error = watcher.error
            if error is not None:
                if not keep_going:
                    watcher.stop()
                    handle_cli_exception(error, verbose)
                watcher.clear_error()

    except KeyboardInterrupt:
        click.echo(f"\n{Fore.YELLOW}Stopping BlurWatch...{Style.RESET_ALL}")
        watcher.stop()
        click.echo(f"{Fore.GREEN}BlurWatch stopped.{Style.RESET_ALL}")


# Alias command
@click.command()
@click.argument('path', type=click.Path())
@click.option('--config', '-c', type=click.Path(),
              help='Path to configuration file (TOML)')
@click.option('--cooldown', type=float,
              help='Seconds to ignore further changes after processing (default: 8)')
@click.option('--output-dir', '-o', type=click.Path(file_okay=False),
              help='Directory for blurred images (default: system temp directory)')
@click.option('--keep-going', is_flag=True,
              help='Log processing errors and keep watching instead of exiting')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.pass_context
def watch_alias(ctx, **kwargs):
    """Alias for 'watch' command."""
    ctx.invoke(watch_command, **kwargs)
