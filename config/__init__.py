"""
Configuration module for AIO Translator.
"""
from .constants import *
from .settings import Settings, get_settings
from .logging_config import setup_logger, get_logger, logger

__all__ = [
    # Settings
    'Settings',
    'get_settings',
    # Logging
    'setup_logger',
    'get_logger',
    'logger',
    # Constants (all exported via *)
]
