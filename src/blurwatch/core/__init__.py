"""Core functionality for BlurWatch."""

from .config import Config, load_config, load_default_config
from .watcher import SettingsFileWatcher

__all__ = ['Config', 'load_config', 'load_default_config', 'SettingsFileWatcher']
