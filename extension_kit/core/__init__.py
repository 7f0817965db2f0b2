"""
Core utilities and configuration for extension-kit.

This package provides the logging configuration and the settings model shared
by the rest of the package.
"""

from extension_kit.core.config import Settings, settings
from extension_kit.core.logging_config import get_logger, setup_logging

__all__ = ["Settings", "get_logger", "settings", "setup_logging"]
