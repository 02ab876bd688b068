"""
BlurWatch - Blur the background image referenced by a watched settings file
"""

__version__ = "0.1.0"
__description__ = "Watch an editor settings file and keep its background image blurred."

from .core.config import Config, load_config, load_default_config
from .core.processor import ProcessResult, process_settings_file
from .core.scanner import BlurSettings, scan_settings
from .core.watcher import SettingsFileWatcher

__all__ = [
    'Config',
    'load_config',
    'load_default_config',
    'ProcessResult',
    'process_settings_file',
    'BlurSettings',
    'scan_settings',
    'SettingsFileWatcher',
]
