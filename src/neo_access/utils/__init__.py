"""Utilities module for neo-access.

This module provides utility functions and helpers used throughout
the neo-access library.
"""

from .uuid import generate_uuid_v7
from .datetime import utc_now

__all__ = [
    # UUID Generation
    "generate_uuid_v7",
    # Datetime
    "utc_now",
]
