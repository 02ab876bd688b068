"""Command line interface for BlurWatch."""

from .main import main

__all__ = ['main']
