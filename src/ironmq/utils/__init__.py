"""
Package: utils
Description: Shared helpers for the IronMQ client.

Current utilities:
- logger: Structured logging configuration and helpers
"""

__all__ = []
