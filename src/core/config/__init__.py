"""
View configuration loading.

Builds ViewConfig objects from YAML files or programmatically.
"""

from .view_config_loader import ViewConfigBuilder, ViewConfigLoader, parse_range_bound

__all__ = ["ViewConfigLoader", "ViewConfigBuilder", "parse_range_bound"]
