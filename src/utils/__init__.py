"""Utility functions."""

from .result_renderer import ResultRenderer
from .menu import MenuSession

__all__ = ['ResultRenderer', 'MenuSession']
