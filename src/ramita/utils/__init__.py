"""Utility modules for Ramita.

Provides:
- logger: get_logger for logging
"""

from ramita.utils.logger import get_logger

__all__ = ["get_logger"]
