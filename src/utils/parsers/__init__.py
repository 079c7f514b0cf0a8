"""
Parser utilities for recommendation input.

Contains functions to normalize query-string and JSON input values.
"""

from src.utils.parsers.number import first_value, parse_int, parse_number, parse_text

__all__ = [
    "first_value",
    "parse_text",
    "parse_number",
    "parse_int",
]
