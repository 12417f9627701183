"""
API module initialization
"""

from . import health

__all__ = ["health"]
