"""
Shared utilities: settings and logging.
"""

from document_generator.utils.settings import Settings, get_settings
from document_generator.utils.logger import setup_logger

__all__ = [
    "Settings",
    "get_settings",
    "setup_logger",
]
