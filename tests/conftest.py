"""
Shared fixtures for BlurWatch tests
"""

import pytest
from PIL import Image, ImageDraw


SETTINGS_TEMPLATE = '''{{
    "workbench.colorTheme": "Default Dark+",
    "blurEnable": {enabled},
    "blurRadius": {radius},
    "backgroundImage": "{image}",
    "editor.fontSize": 14
}}'''


def make_settings(image: str, enabled: bool = True, radius: int = 6) -> str:
    return SETTINGS_TEMPLATE.format(
        enabled='true' if enabled else 'false',
        radius=radius,
        image=image,
    )


@pytest.fixture
def sample_image(tmp_path):
    """A 32x32 PNG with a hard black/white edge"""
    path = tmp_path / 'images' / 'forest.png'
    path.parent.mkdir()
    img = Image.new('RGB', (32, 32), 'black')
    ImageDraw.Draw(img).rectangle((16, 0, 31, 31), fill='white')
    img.save(path)
    return path


@pytest.fixture
def settings_file(tmp_path, sample_image):
    path = tmp_path / 'settings.json'
    path.write_text(make_settings(str(sample_image)), encoding='utf-8')
    return path
