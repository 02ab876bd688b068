"""
Configuration management for BlurWatch
"""

import logging
import tempfile
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

import tomli

from .scanner import SettingsKeys

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = 'blurwatch.config.toml'


@dataclass
class Config:
    """Configuration class for BlurWatch"""
    cooldown: float = 8.0
    output_dir: str = ''
    blurred_prefix: str = 'blurred-'
    enable_key: str = 'blurEnable'
    radius_key: str = 'blurRadius'
    image_key: str = 'backgroundImage'
    log_level: str = 'info'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config instance from dictionary"""
        return cls(
            cooldown=float(data.get('cooldown', 8.0)),
            output_dir=data.get('output_dir', ''),
            blurred_prefix=data.get('blurred_prefix', 'blurred-'),
            enable_key=data.get('enable_key', 'blurEnable'),
            radius_key=data.get('radius_key', 'blurRadius'),
            image_key=data.get('image_key', 'backgroundImage'),
            log_level=data.get('log_level', 'info')
        )

    @property
    def keys(self) -> SettingsKeys:
        return SettingsKeys(enable=self.enable_key, radius=self.radius_key, image=self.image_key)

    def resolve_output_dir(self) -> Path:
        """Directory blurred images are written to"""
        if self.output_dir:
            return Path(self.output_dir).expanduser()
        return Path(tempfile.gettempdir())


def load_config(config_path: str) -> Optional[Config]:
    """Load configuration from TOML file"""
    try:
        config_file = Path(config_path)
        if not config_file.exists():
            return None

        with open(config_file, 'rb') as f:
            data = tomli.load(f)

        # Handle both flat and nested config formats
        if 'blurwatch' in data:
            config_data = data['blurwatch']
        else:
            config_data = data

        return Config.from_dict(config_data)

    except (OSError, ValueError, tomli.TOMLDecodeError) as e:
        log.error(f"Error loading config {config_path}: {e}")
        return None


def default_config_path() -> Path:
    """Path of the default configuration packaged with BlurWatch"""
    return Path(__file__).parent.parent / 'default.config.toml'


def load_default_config() -> Config:
    """Load the default configuration from the package"""
    try:
        with open(default_config_path(), 'rb') as f:
            data = tomli.load(f)
        return Config.from_dict(data.get('blurwatch', data))
    except (OSError, tomli.TOMLDecodeError):
        # Packaged defaults missing, e.g. in a frozen build
        return Config()
