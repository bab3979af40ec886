"""
Common helpers shared across tokenauth packages.
"""

from .utils import generate_secure_token, get_current_time

__all__ = ["generate_secure_token", "get_current_time"]
