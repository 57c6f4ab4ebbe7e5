"""Feature modules."""

from .pattern_generator import PatternGenerator, PatternTemplate

__all__ = [
    'PatternGenerator',
    'PatternTemplate',
]
