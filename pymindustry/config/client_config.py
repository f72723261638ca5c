"""
Client Configuration - query settings shared by the single and fleet clients
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

from ..protocol.constants import DEFAULT_PORT, DEFAULT_TIMEOUT
from .validation import validate_port, validate_timeout, validate_concurrency


@dataclass
class ClientConfig:
    """Client configuration settings"""

    # Query settings
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT

    # Fan-out; None leaves in-flight queries unbounded
    max_concurrency: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    log_packets: bool = False

    def validate(self) -> 'ClientConfig':
        """Validate settings in place, returning self"""
        self.port = validate_port(self.port)
        self.timeout = validate_timeout(self.timeout)
        self.max_concurrency = validate_concurrency(self.max_concurrency)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClientConfig':
        """Create from dictionary, ignoring unknown keys"""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
