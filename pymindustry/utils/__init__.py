"""
Utility helpers for pymindustry
"""

from .logging_config import ModuleLogger, ModulePrefixFormatter, configure_logging

__all__ = ['ModuleLogger', 'ModulePrefixFormatter', 'configure_logging']
