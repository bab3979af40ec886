"""
Utility helpers for tokenauth configuration.
"""

from .config import (
    get_config_value,
    parse_duration_string,
    parse_mapping_string,
    load_config_file,
)

__all__ = [
    "get_config_value",
    "parse_duration_string",
    "parse_mapping_string",
    "load_config_file",
]
