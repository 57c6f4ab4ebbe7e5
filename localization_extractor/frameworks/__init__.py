"""Framework adapters for different platforms."""

from .base import BaseAdapter
from .swift import SwiftAdapter

__all__ = [
    'BaseAdapter',
    'SwiftAdapter',
]
