"""
Package: config
Description: Configuration for the IronMQ client.
"""

from .settings import Cloud, Settings, get_settings

__all__ = ["Cloud", "Settings", "get_settings"]
