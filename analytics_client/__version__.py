"""Version information for analytics_client."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the builder API
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release
#         - AnalyticsParams builder (client context id, raw params, pretty=false)
#         - AnalyticsQuery body construction
#         - ConfigService with YAML and environment overrides
