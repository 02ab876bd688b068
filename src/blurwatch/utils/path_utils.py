"""
Path utilities for BlurWatch
"""

from pathlib import Path
from typing import Union


def resolve_path(path: str) -> Path:
    """Resolve a path to an absolute Path object."""
    return Path(path).expanduser().resolve()


def file_name_from_setting(value: str) -> str:
    """Return the file name part of a path written in a settings file.

    Settings files may be shared between machines, so both ``/`` and
    ``\\`` separators are recognised whatever the host OS is.
    """
    if '/' in value:
        return value.split('/')[-1]
    if '\\' in value:
        return value.split('\\')[-1]
    return value


def setting_path(path: Union[str, Path]) -> str:
    """Render a path the way it is written back into a settings file."""
    return str(path).replace('\\', '/')


def is_settings_file(path: Union[str, Path]) -> bool:
    """Check that a path exists and is not a directory."""
    path = Path(path)
    return path.exists() and not path.is_dir()
