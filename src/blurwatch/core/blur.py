"""
Blurring and encoding of the background image
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageFilter, UnidentifiedImageError

from .errors import ImageProcessingError, UnsupportedImageFormat

log = logging.getLogger(__name__)

# Extension (upper case) -> Pillow encoder name
SUPPORTED_FORMATS = {
    'JPEG': 'JPEG',
    'JPG': 'JPEG',
    'PNG': 'PNG',
    'GIF': 'GIF',
}


def image_format(path: str) -> str:
    """Return the upper-cased extension of an image path.

    Raises:
        UnsupportedImageFormat: if there is no extension or we cannot encode it
    """
    dot = path.rfind('.')
    extension = path[dot + 1:] if dot != -1 else ''
    if not extension:
        raise UnsupportedImageFormat(f"Could not determine image format: {path}")
    extension = extension.upper()
    if extension not in SUPPORTED_FORMATS:
        raise UnsupportedImageFormat(f"Unsupported image format: {extension}")
    return extension


def blurred_file_name(file_name: str, radius: int, prefix: str = 'blurred-') -> str:
    """Name of the blurred copy of ``file_name``, e.g. ``blurred-r12-forest.png``."""
    return f"{prefix}r{radius}-{file_name}"


def stack_blur(image: Image.Image, radius: int) -> Image.Image:
    """Blur an image with a tent kernel of width ``2 * radius + 1``.

    Two box passes of half the radius give the same triangular weights
    as a stack blur.
    """
    if image.mode not in ('RGB', 'RGBA', 'L', 'LA'):
        image = image.convert('RGBA' if 'transparency' in image.info else 'RGB')
    if radius <= 0:
        return image.copy()

    box = ImageFilter.BoxBlur(radius / 2)
    return image.filter(box).filter(box)


def _prepare_for_encoder(image: Image.Image, encoder: str) -> Image.Image:
    # JPEG has no alpha channel
    if encoder == 'JPEG' and image.mode not in ('RGB', 'L'):
        return image.convert('RGB')
    return image


def write_blurred_image(source: Union[str, Path], radius: int, output_dir: Union[str, Path],
                        prefix: str = 'blurred-', file_name: Optional[str] = None) -> Path:
    """Blur ``source`` and write it into ``output_dir``.

    Args:
        source: Path of the image to blur
        radius: Blur radius in pixels
        output_dir: Directory the blurred copy is written to
        prefix: Marker prepended to the file name of the copy
        file_name: Name the copy is derived from, defaults to the source name

    Returns:
        Path of the written image
    """
    source_path = Path(source)
    encoder = SUPPORTED_FORMATS[image_format(str(source))]

    if not source_path.exists():
        raise FileNotFoundError(f"Background image not found: {source_path}")

    try:
        with Image.open(source_path) as img:
            img.load()
            blurred = stack_blur(img, radius)
    except (UnidentifiedImageError, OSError, ValueError) as e:
        # Truncated or corrupt data only fails once the pixels are loaded
        raise ImageProcessingError(f"Could not decode image {source_path}: {e}") from e

    output_path = Path(output_dir) / blurred_file_name(file_name or source_path.name, radius, prefix)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    log.info(f"Writing blurred image: {output_path}")

    _prepare_for_encoder(blurred, encoder).save(output_path, format=encoder)
    return output_path
