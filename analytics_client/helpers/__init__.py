"""
Helpers package.
"""

from .exceptions import InvalidArgumentError
from .json_value import check_type, find_invalid_path

__all__ = ["InvalidArgumentError", "check_type", "find_invalid_path"]
