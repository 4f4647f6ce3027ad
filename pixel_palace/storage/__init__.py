"""
Persistence adapters for Pixel Palace.
"""

from .high_scores import JsonScoreStore

__all__ = [
    'JsonScoreStore',
]
