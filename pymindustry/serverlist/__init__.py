"""
pymindustry Server List - address sources for fleet queries
"""

from .loader import load_addresses

__all__ = [
    'load_addresses'
]
