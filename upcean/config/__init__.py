"""
Configuration management for the barcode toolkit.
"""

from upcean.config.logging_config import configure_logging
from upcean.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
