"""tagcache core: configuration loading and property binding."""

from tagcache.core.config import Config, config_properties

__all__ = ["Config", "config_properties"]
