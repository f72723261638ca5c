"""
Configuration validation utilities
"""

import re
from typing import Optional, Tuple

from ..protocol.constants import DEFAULT_PORT


class ConfigValidationError(Exception):
    """Raised when configuration validation fails"""
    pass


_IPV4_RE = re.compile(
    r"^(25[0-5]|2[0-4]\d|1\d{2}|[1-9]?\d)(\.(25[0-5]|2[0-4]\d|1\d{2}|[1-9]?\d)){3}$"
)
_DOMAIN_RE = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(\.[A-Za-z0-9-]{1,63})+$")


def validate_host(host: str) -> str:
    """Validate host address"""
    if not host or not isinstance(host, str):
        raise ConfigValidationError("Host must be a non-empty string")

    if len(host.strip()) == 0:
        raise ConfigValidationError("Host cannot be empty or whitespace")

    return host.strip()


def validate_port(port: int) -> int:
    """Validate port number"""
    if not isinstance(port, int) or isinstance(port, bool):
        raise ConfigValidationError("Port must be an integer")

    if port < 1 or port > 65535:
        raise ConfigValidationError("Port must be between 1 and 65535")

    return port


def validate_timeout(timeout: float) -> float:
    """Validate timeout value"""
    if not isinstance(timeout, (int, float)) or isinstance(timeout, bool):
        raise ConfigValidationError("Timeout must be a number")

    if timeout <= 0:
        raise ConfigValidationError("Timeout must be greater than 0")

    return float(timeout)


def validate_concurrency(limit: Optional[int]) -> Optional[int]:
    """Validate an in-flight query cap (None means unbounded)"""
    if limit is None:
        return None

    if not isinstance(limit, int) or isinstance(limit, bool):
        raise ConfigValidationError("Concurrency limit must be an integer")

    if limit < 1:
        raise ConfigValidationError("Concurrency limit must be at least 1")

    return limit


def parse_server_input(text: str, default_port: int = DEFAULT_PORT) -> Tuple[str, int]:
    """Split ``host`` or ``host:port`` user input into a validated pair

    The host must be a dotted IPv4 address or a domain name with at least
    one dot.

    Raises:
        ConfigValidationError: Malformed host or port
    """
    if not isinstance(text, str):
        raise ConfigValidationError("Server address must be a string")

    text = text.strip()
    host = text
    port = default_port

    if ":" in text:
        host, _, port_text = text.partition(":")
        try:
            port = int(port_text)
        except ValueError:
            raise ConfigValidationError("Invalid port number") from None
        if port < 1 or port > 65535:
            raise ConfigValidationError("Invalid port number")

    if not _IPV4_RE.match(host) and not _DOMAIN_RE.match(host):
        raise ConfigValidationError("Invalid IP or domain format")

    return host, port
