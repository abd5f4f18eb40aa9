"""
Services package.
"""

from .config import ConfigService

__all__ = ["ConfigService"]
