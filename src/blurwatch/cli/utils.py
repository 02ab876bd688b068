"""
Utility functions for CLI commands
"""

import sys
from pathlib import Path
from typing import Optional

import click
from colorama import Fore, Style

from blurwatch.core.config import CONFIG_FILE_NAME, Config, load_config, load_default_config
from blurwatch.utils.logging_utils import setup_logger
from blurwatch.utils.path_utils import is_settings_file


def load_config_with_fallback(config_file: Optional[str], search_dir: Path, verbose: bool = False) -> Config:
    """Load configuration with automatic fallback to default config file and default config."""
    config_obj = None

    if not config_file:
        # Look for a config file next to the watched settings file
        default_config = search_dir / CONFIG_FILE_NAME
        if default_config.exists():
            config_file = str(default_config)
            if verbose:
                click.echo(f"{Fore.CYAN}Using default config: {config_file}{Style.RESET_ALL}")

    if config_file:
        config_obj = load_config(config_file)
        if not config_obj:
            click.echo(f"{Fore.RED}Error: Could not load config file: {config_file}{Style.RESET_ALL}")
            sys.exit(1)

    if not config_obj:
        config_obj = load_default_config()

    return config_obj


def apply_overrides(config_obj: Config, cooldown: Optional[float] = None,
                    output_dir: Optional[str] = None) -> Config:
    """Apply command line options on top of the loaded configuration."""
    if cooldown is not None:
        config_obj.cooldown = cooldown
    if output_dir:
        config_obj.output_dir = output_dir
    return config_obj


def configure_logging(config_obj: Config, verbose: bool = False) -> None:
    setup_logger('blurwatch', 'DEBUG' if verbose else config_obj.log_level)


def check_settings_file(file_path: Path) -> bool:
    """Check that the settings file exists and is not a directory."""
    if not is_settings_file(file_path):
        click.echo(f"{Fore.RED}Error: File does not exist or is a directory: {file_path}{Style.RESET_ALL}")
        return False
    return True


def handle_cli_exception(e: BaseException, verbose: bool = False) -> None:
    """Handle exceptions in CLI commands consistently."""
    click.echo(f"{Fore.RED}Error: {e}{Style.RESET_ALL}")
    if verbose:
        import traceback
        traceback.print_exception(type(e), e, e.__traceback__)
    sys.exit(1)
