"""
CLI commands package for BlurWatch
"""

from .watch import watch_command, watch_alias
from .run import run_command
from .inspect_settings import inspect_command
from .init_config import init_config_command

__all__ = [
    'watch_command', 'watch_alias',
    'run_command',
    'inspect_command',
    'init_config_command',
]
