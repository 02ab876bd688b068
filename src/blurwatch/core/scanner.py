"""
Line scanner for the blur keys of a settings file.

The settings file is never parsed as JSON. Editors allow comments and
trailing commas in it, so each line is matched on its own by the quoted
key it starts with.
"""

import logging
from dataclasses import dataclass

from .errors import SettingsParseError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettingsKeys:
    """Names of the keys read from the settings file"""
    enable: str = 'blurEnable'
    radius: str = 'blurRadius'
    image: str = 'backgroundImage'


@dataclass
class BlurSettings:
    """Blur related values found in the settings file"""
    blur_enabled: bool = False
    blur_radius: int = 0
    background_image: str = ''


def _starts_with_key(line: str, key: str) -> bool:
    return line.strip().startswith(f'"{key}"')


def parse_value(line: str) -> str:
    """Return the raw value text of a ``"key": value,`` line."""
    key_end = line.find('":')
    if key_end == -1:
        raise SettingsParseError(f"No key/value separator in line: {line.strip()}")
    rest = line[key_end + 2:]
    comma = rest.find(',')
    if comma != -1:
        rest = rest[:comma]
    return rest.strip()


def parse_blur_radius(line: str) -> int:
    """Parse the integer radius of a radius line."""
    value = parse_value(line)
    log.debug(f"radius value: {value}")
    try:
        radius = int(value, 10)
    except ValueError:
        raise SettingsParseError(f"Blur radius is not an integer: {value!r}") from None
    if radius < 0:
        raise SettingsParseError(f"Blur radius must not be negative: {radius}")
    return radius


def parse_background_image(line: str) -> str:
    """Parse the quoted image path of an image line."""
    value = parse_value(line)
    log.debug(f"image value: {value}")
    if len(value) < 2 or value[0] != '"' or value[-1] != '"':
        raise SettingsParseError(f"Background image is not a quoted string: {value!r}")
    return value[1:-1]


def scan_settings(text: str, keys: SettingsKeys = SettingsKeys()) -> BlurSettings:
    """Scan settings text line by line for the blur keys.

    Args:
        text: Full text of the settings file
        keys: Key names to look for

    Returns:
        BlurSettings with the values found. When a key occurs several
        times the last occurrence wins, except for the enable flag which
        stays set once any enable line says ``true``.
    """
    settings = BlurSettings()

    for line in text.split('\n'):
        if _starts_with_key(line, keys.enable) and 'true' in line:
            settings.blur_enabled = True
        elif _starts_with_key(line, keys.radius):
            settings.blur_radius = parse_blur_radius(line)
        elif _starts_with_key(line, keys.image):
            settings.background_image = parse_background_image(line)

    return settings
