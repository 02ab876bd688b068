"""
Tests for image blurring and encoding
"""

import pytest
from PIL import Image

from blurwatch.core.blur import (
    blurred_file_name,
    image_format,
    stack_blur,
    write_blurred_image,
)
from blurwatch.core.errors import ImageProcessingError, UnsupportedImageFormat


class TestImageFormat:
    """Test format detection from the file extension"""

    @pytest.mark.parametrize('path,expected', [
        ('/pics/a.png', 'PNG'),
        ('/pics/a.JPG', 'JPG'),
        ('C:\\pics\\a.jpeg', 'JPEG'),
        ('a.b.gif', 'GIF'),
    ])
    def test_supported(self, path, expected):
        assert image_format(path) == expected

    @pytest.mark.parametrize('path', ['/pics/a.webp', '/pics/noext', '/pics/trailing.'])
    def test_unsupported(self, path):
        with pytest.raises(UnsupportedImageFormat):
            image_format(path)


def test_blurred_file_name():
    assert blurred_file_name('forest.png', 12) == 'blurred-r12-forest.png'
    assert blurred_file_name('forest.png', 3, prefix='soft-') == 'soft-r3-forest.png'


class TestStackBlur:
    """Test the blur filter"""

    def test_blur_softens_edge(self, sample_image):
        with Image.open(sample_image) as img:
            original = img.convert('RGB')

        blurred = stack_blur(original, 6)

        assert blurred.size == original.size
        # Pixels next to the edge pick up the other side
        assert original.getpixel((15, 16)) == (0, 0, 0)
        assert blurred.getpixel((15, 16))[0] > 0
        assert original.getpixel((16, 16)) == (255, 255, 255)
        assert blurred.getpixel((16, 16))[0] < 255
        # Far from the edge nothing changes
        assert blurred.getpixel((0, 16)) == (0, 0, 0)

    def test_zero_radius_returns_copy(self, sample_image):
        with Image.open(sample_image) as img:
            original = img.convert('RGB')

        blurred = stack_blur(original, 0)

        assert blurred is not original
        assert list(blurred.getdata()) == list(original.getdata())

    def test_palette_image_is_converted(self):
        img = Image.new('P', (8, 8))
        blurred = stack_blur(img, 2)
        assert blurred.mode == 'RGB'


class TestWriteBlurredImage:
    """Test writing the blurred copy"""

    def test_writes_png(self, sample_image, tmp_path):
        output = write_blurred_image(sample_image, 4, tmp_path / 'out')

        assert output == tmp_path / 'out' / 'blurred-r4-forest.png'
        with Image.open(output) as img:
            assert img.format == 'PNG'
            assert img.size == (32, 32)

    def test_writes_jpeg(self, tmp_path):
        source = tmp_path / 'photo.jpg'
        Image.new('RGB', (10, 10), 'red').save(source, format='JPEG')

        output = write_blurred_image(source, 2, tmp_path)

        with Image.open(output) as img:
            assert img.format == 'JPEG'

    def test_writes_gif(self, tmp_path):
        source = tmp_path / 'anim.gif'
        Image.new('P', (10, 10)).save(source, format='GIF')

        output = write_blurred_image(source, 2, tmp_path)

        with Image.open(output) as img:
            assert img.format == 'GIF'

    def test_uses_given_file_name(self, sample_image, tmp_path):
        output = write_blurred_image(sample_image, 4, tmp_path, file_name='other.png')
        assert output.name == 'blurred-r4-other.png'

    def test_missing_source(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            write_blurred_image(tmp_path / 'missing.png', 4, tmp_path)

    def test_unsupported_source(self, tmp_path):
        source = tmp_path / 'picture.bmp'
        Image.new('RGB', (4, 4)).save(source)
        with pytest.raises(UnsupportedImageFormat):
            write_blurred_image(source, 4, tmp_path)

    def test_truncated_source(self, tmp_path):
        source = tmp_path / 'noise.png'
        Image.effect_noise((64, 64), 50).convert('RGB').save(source)
        data = source.read_bytes()
        source.write_bytes(data[:len(data) // 2])

        with pytest.raises(ImageProcessingError):
            write_blurred_image(source, 4, tmp_path / 'out')

    def test_undecodable_source(self, tmp_path):
        source = tmp_path / 'broken.png'
        source.write_bytes(b'not an image')
        with pytest.raises(ImageProcessingError):
            write_blurred_image(source, 4, tmp_path)
