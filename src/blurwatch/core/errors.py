"""
Exceptions raised by BlurWatch
"""


class BlurWatchError(Exception):
    """Base class for BlurWatch errors"""


class SettingsParseError(BlurWatchError):
    """A watched settings line could not be parsed"""


class UnsupportedImageFormat(BlurWatchError):
    """The background image has an extension we cannot encode"""


class ImageProcessingError(BlurWatchError):
    """The background image could not be decoded or blurred"""
