"""Utility functions."""

from .http import HTTPClient
from .jsonpath import dig, dig_int, dig_list, dig_str

__all__ = ["HTTPClient", "dig", "dig_list", "dig_str", "dig_int"]
