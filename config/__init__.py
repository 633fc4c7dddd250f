"""
Configuration module for Vademecum PDF.
"""
from .constants import *
from .logging_config import setup_logger, logger

__all__ = [
    # Logging
    'setup_logger',
    'logger',
    # Constants (all exported via *)
]
