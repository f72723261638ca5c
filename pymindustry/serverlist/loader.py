"""Read-only loader for JSON server lists."""

import json
import logging
from pathlib import Path
from typing import List, Union

from ..config.validation import ConfigValidationError
from ..models import Address
from ..protocol.constants import DEFAULT_PORT

logger = logging.getLogger(__name__)


def load_addresses(path: Union[str, Path]) -> List[Address]:
    """Load the server list stored at ``path``.

    The file holds a JSON array of ``{"ip": ..., "port": ...}`` records;
    ``port`` is optional. A missing file is an empty list.

    Raises:
        ConfigValidationError: File is not a list of server records
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"No server list at {path}")
        return []

    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigValidationError(f"Server list {path} is not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise ConfigValidationError(f"Server list {path} must be a JSON array")

    addresses = []
    for i, record in enumerate(records):
        if not isinstance(record, dict) or "ip" not in record:
            raise ConfigValidationError(f"Server list entry {i} has no 'ip'")
        addresses.append(Address(record["ip"], record.get("port") or DEFAULT_PORT))

    logger.debug(f"Loaded {len(addresses)} servers from {path}")
    return addresses
