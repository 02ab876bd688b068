#!/usr/bin/env python3
"""
BlurWatch CLI - Main entry point
"""

import click
from colorama import init

from blurwatch.cli.commands.watch import watch_command, watch_alias
from blurwatch.cli.commands.run import run_command
from blurwatch.cli.commands.inspect_settings import inspect_command
from blurwatch.cli.commands.init_config import init_config_command

# Initialize colorama for cross-platform colored output
init()


@click.group()
@click.version_option(package_name='blurwatch')
def main():
    """BlurWatch - Keep the background image of a settings file blurred.

    Common workflows:

      # Watch a settings file and blur its background image on every change
      blurwatch watch ~/.config/Code/User/settings.json

      # Blur once without watching
      blurwatch run settings.json

      # Show what BlurWatch reads from a settings file
      blurwatch inspect settings.json

    Use 'blurwatch COMMAND --help' for detailed help on any command.
    """
    pass


main.add_command(watch_command, name='watch')
main.add_command(run_command, name='run')
main.add_command(inspect_command, name='inspect')
main.add_command(init_config_command, name='init-config')

main.add_command(watch_alias, name='w')


if __name__ == '__main__':
    main()
