"""
Utility modules for property recommendations.
"""

from src.utils.parsers import first_value, parse_int, parse_number, parse_text

__all__ = [
    "first_value",
    "parse_text",
    "parse_number",
    "parse_int",
]
