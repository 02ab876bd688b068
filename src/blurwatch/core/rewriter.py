"""
Rewriting of the image setting inside the settings text
"""

import logging
from typing import List, Optional, Tuple

log = logging.getLogger(__name__)


def _indent_of(line: str) -> str:
    quote = line.find('"')
    if quote == -1:
        quote = len(line) - len(line.lstrip())
    return ' ' * quote


def _image_line_index(lines: List[str], original_file_name: str, image_key: str) -> Optional[int]:
    """Index of the last image line mentioning the file name, the one a scan reads."""
    found = None
    for index, line in enumerate(lines):
        if line.strip().startswith(f'"{image_key}"') and original_file_name in line:
            found = index
    return found


def rewrite_image_setting(text: str, original_file_name: str, new_path: str,
                          image_key: str = 'backgroundImage') -> Tuple[str, bool]:
    """Point the image setting at ``new_path``.

    The image line the scanner reads is kept and a new image line is
    added right after it, so the new value is the one a later scan sees
    last. Other lines mentioning the file name are left alone.

    Returns:
        Tuple of (new text, whether a line was rewritten)
    """
    lines = text.split('\n')
    if not original_file_name:
        return text, False

    index = _image_line_index(lines, original_file_name, image_key)
    if index is None:
        return text, False

    line = lines[index]
    indent = _indent_of(line)
    log.debug(f"Rewrote line: {line.strip()}")
    lines[index:index + 1] = [
        indent + line.strip(),
        f'{indent}"{image_key}": "{new_path}",',
    ]
    return '\n'.join(lines), True
