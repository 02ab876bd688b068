"""
Process step: scan the settings file, blur the image and point the settings at it
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .blur import blurred_file_name, image_format, write_blurred_image
from .config import Config
from .errors import SettingsParseError
from .rewriter import rewrite_image_setting
from .scanner import BlurSettings, scan_settings
from ..utils.path_utils import file_name_from_setting, setting_path

log = logging.getLogger(__name__)

DISABLED = 'disabled'
ZERO_RADIUS = 'zero_radius'
NO_IMAGE = 'no_image'
ALREADY_BLURRED = 'already_blurred'
BLURRED = 'blurred'

STATUS_MESSAGES = {
    DISABLED: 'Blur is disabled',
    ZERO_RADIUS: 'Blur radius is 0',
    NO_IMAGE: 'No background image set',
    ALREADY_BLURRED: 'Background image is already blurred',
}


@dataclass
class ProcessResult:
    """Outcome of one run of the process step"""
    status: str
    settings: BlurSettings
    output_path: Optional[Path] = None
    settings_rewritten: bool = False

    @property
    def changed(self) -> bool:
        return self.status == BLURRED


def read_settings_text(path: Union[str, Path]) -> str:
    """Read a settings file as UTF-8 text."""
    try:
        return Path(path).read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise SettingsParseError(f"Settings file is not valid UTF-8: {path}: {e}") from e


def check_settings(settings: BlurSettings, blurred_prefix: str = 'blurred-') -> Optional[str]:
    """Return the status that stops processing, or None if the image should be blurred."""
    status = None
    if not settings.blur_enabled:
        status = DISABLED
    elif settings.blur_radius == 0:
        status = ZERO_RADIUS
    elif not settings.background_image:
        status = NO_IMAGE
    elif blurred_prefix in settings.background_image:
        status = ALREADY_BLURRED

    if status is not None:
        log.info(STATUS_MESSAGES[status])
    return status


def process_settings_file(path: Union[str, Path], config: Optional[Config] = None,
                          dry_run: bool = False) -> ProcessResult:
    """Blur the background image referenced by a settings file.

    Args:
        path: Settings file to read and rewrite
        config: Tool configuration, defaults to ``Config()``
        dry_run: Only report what would be written

    Returns:
        ProcessResult describing what happened
    """
    config = config or Config()
    settings_path = Path(path)

    text = read_settings_text(settings_path)
    settings = scan_settings(text, config.keys)

    log.info(f"blurEnabled {settings.blur_enabled}")
    log.info(f"blurRadius {settings.blur_radius}")
    log.info(f"backgroundImage {settings.background_image}")

    status = check_settings(settings, config.blurred_prefix)
    if status is not None:
        return ProcessResult(status=status, settings=settings)

    image = settings.background_image
    log.info(f"format {image_format(image)}")

    file_name = file_name_from_setting(image)
    output_dir = config.resolve_output_dir()

    if dry_run:
        output_path = output_dir / blurred_file_name(file_name, settings.blur_radius, config.blurred_prefix)
        log.info(f"Would write {output_path} and update {settings_path}")
        return ProcessResult(status=BLURRED, settings=settings, output_path=output_path)

    output_path = write_blurred_image(
        image,
        settings.blur_radius,
        output_dir,
        prefix=config.blurred_prefix,
        file_name=file_name,
    )
    log.info(f"outputFile {output_path}")

    new_text, rewritten = rewrite_image_setting(
        text, file_name, setting_path(output_path), image_key=config.image_key
    )
    if not rewritten:
        log.warning(f"No line mentions {file_name}; settings left unchanged")
    else:
        with open(settings_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(new_text)

    return ProcessResult(
        status=BLURRED,
        settings=settings,
        output_path=output_path,
        settings_rewritten=rewritten,
    )
