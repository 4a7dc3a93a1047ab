"""Assignment strategies for the clustering engine."""

from .hard import HardAssignment

__all__ = [
    'HardAssignment'
]
