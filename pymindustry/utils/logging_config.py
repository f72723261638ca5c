"""
Logging configuration for pymindustry with clear module prefixes
"""

import logging
from typing import Union


class ModuleLogger:
    """Custom logger that adds module-specific prefixes"""

    # Module prefix mapping
    MODULE_PREFIXES = {
        'pymindustry.protocol': '[CODEC]',
        'pymindustry.client.query_client': '[QUERY]',
        'pymindustry.client.fleet': '[FLEET]',
        'pymindustry.serverlist': '[LIST]',
        'pymindustry.cli': '[CLI]',
    }

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger with appropriate prefix for the module"""
        logger = logging.getLogger(name)

        # Don't add handler if already configured
        if logger.handlers:
            return logger

        handler = logging.StreamHandler()

        prefix = '[UNKNOWN]'
        for module_name, module_prefix in cls.MODULE_PREFIXES.items():
            if name.startswith(module_name):
                prefix = module_prefix
                break

        handler.setFormatter(ModulePrefixFormatter(prefix))

        logger.addHandler(handler)
        logger.propagate = False  # Don't propagate to root logger

        return logger


class ModulePrefixFormatter(logging.Formatter):
    """Custom formatter that adds module prefix to log messages"""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            fmt='%(asctime)s - %(prefix)s %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    def format(self, record):
        record.prefix = self.prefix
        return super().format(record)


def configure_logging(level: Union[int, str] = logging.INFO):
    """Configure logging for every pymindustry module"""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    for module_name in ModuleLogger.MODULE_PREFIXES:
        ModuleLogger.get_logger(module_name).setLevel(level)
