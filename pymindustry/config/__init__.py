"""
Configuration system for pymindustry
"""

from .client_config import ClientConfig
from .validation import ConfigValidationError, parse_server_input

__all__ = ['ClientConfig', 'ConfigValidationError', 'parse_server_input']
