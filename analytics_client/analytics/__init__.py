"""
Analytics package.
"""

from .params import AnalyticsParams
from .query import AnalyticsQuery

__all__ = ["AnalyticsParams", "AnalyticsQuery"]
