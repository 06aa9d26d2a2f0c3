"""Utility modules for Vistas.

Provides:
- logger: get_logger for namespaced logging
"""

from vistas.utils.logger import get_logger

__all__ = ["get_logger"]
