"""
Analytics query parameter builder.
"""

from .__version__ import __version__
from .analytics import AnalyticsParams, AnalyticsQuery
from .helpers import InvalidArgumentError, check_type
from .services import ConfigService

__all__ = [
    "AnalyticsParams",
    "AnalyticsQuery",
    "ConfigService",
    "InvalidArgumentError",
    "__version__",
    "check_type",
]
