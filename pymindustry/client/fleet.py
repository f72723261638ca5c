"""
Concurrent status queries over a list of servers
"""

import asyncio
import logging
from typing import Iterable, List, Optional

from ..config.client_config import ClientConfig
from ..models import Address, QueryOutcome, as_address
from ..protocol.constants import DEFAULT_TIMEOUT, ErrorKind
from .query_client import QueryClient

logger = logging.getLogger(__name__)


class FleetQuery:
    """Fans a status query out over many servers

    Every address gets its own concurrent query. Results come back in input
    order and a failure at one address never affects another. With
    ``max_concurrency`` set, at most that many queries are in flight at once.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = (config or ClientConfig()).validate()
        self.client = QueryClient(self.config)

    async def query_all(self, addresses: Iterable) -> List[QueryOutcome]:
        """Query every address concurrently

        Args:
            addresses: Ordered Address objects, "host[:port]" strings or (host, port) tuples

        Returns:
            One QueryOutcome per input, in input order
        """
        targets = [as_address(a, self.config.port) for a in addresses]
        if not targets:
            return []

        limit = self.config.max_concurrency
        semaphore = asyncio.Semaphore(limit) if limit else None

        outcomes = await asyncio.gather(
            *(self._query_one(address, semaphore) for address in targets)
        )

        online = sum(1 for o in outcomes if o.is_online)
        logger.info(f"Queried {len(outcomes)} servers: {online} online, {len(outcomes) - online} offline")
        return list(outcomes)

    async def _query_one(self, address: Address,
                         semaphore: Optional[asyncio.Semaphore]) -> QueryOutcome:
        try:
            if semaphore is None:
                return await self.client.query(address)
            async with semaphore:
                return await self.client.query(address)
        except Exception as e:
            logger.warning(f"Unexpected error querying {address}: {e}")
            return QueryOutcome.offline(address, ErrorKind.TRANSPORT_ERROR, str(e))


async def query_all(addresses: Iterable, timeout: float = DEFAULT_TIMEOUT,
                    max_concurrency: Optional[int] = None) -> List[QueryOutcome]:
    """Query a list of servers with default settings"""
    config = ClientConfig(timeout=timeout, max_concurrency=max_concurrency)
    return await FleetQuery(config).query_all(addresses)
