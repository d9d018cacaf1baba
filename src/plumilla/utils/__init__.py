"""Utility modules for plumilla.

Provides:
- logger: get_logger for namespaced logging
"""

from plumilla.utils.logger import get_logger

__all__ = ["get_logger"]
