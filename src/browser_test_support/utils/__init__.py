"""
Utility subpackage.

Only logging lives here for now::

    from browser_test_support.utils import get_logger
"""

from .logger import get_logger

__all__ = ["get_logger"]
