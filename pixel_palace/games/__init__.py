"""
Games module for Pixel Palace.
"""

from . import space_invaders

__all__ = [
    'space_invaders',
]
