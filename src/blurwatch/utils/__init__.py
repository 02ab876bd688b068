"""Utility functions for BlurWatch."""

from .path_utils import (
    resolve_path,
    file_name_from_setting,
    setting_path,
    is_settings_file,
)
from .logging_utils import setup_logger

__all__ = [
    # Path utilities
    'resolve_path',
    'file_name_from_setting',
    'setting_path',
    'is_settings_file',
    # Logging utilities
    'setup_logger',
]
