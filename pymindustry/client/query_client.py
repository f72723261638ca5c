"""
Single server status query over UDP

One QueryExchange is created per query. It owns a fresh datagram endpoint
and a deadline timer, and settles exactly once on whichever of datagram,
endpoint error or deadline happens first.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Optional

from ..config.client_config import ClientConfig
from ..models import Address, QueryOutcome, as_address
from ..protocol.codec import decode_reply, encode_query
from ..protocol.constants import DEFAULT_TIMEOUT, ErrorKind
from ..protocol.errors import DecodeError

logger = logging.getLogger(__name__)


class QueryState(Enum):
    """Lifecycle of a single exchange"""
    IDLE = "idle"
    SENT = "sent"
    RECEIVED = "received"
    TIMED_OUT = "timed_out"
    TRANSPORT_ERROR = "transport_error"
    CLOSED = "closed"


class _StatusProtocol(asyncio.DatagramProtocol):
    """Forwards endpoint events to the owning exchange"""

    def __init__(self, exchange: 'QueryExchange'):
        self.exchange = exchange
        super().__init__()

    def datagram_received(self, data, addr):
        self.exchange.settle(QueryState.RECEIVED, data)

    def error_received(self, exc):
        self.exchange.settle(QueryState.TRANSPORT_ERROR, exc)

    def connection_lost(self, exc):
        if exc is not None:
            self.exchange.settle(QueryState.TRANSPORT_ERROR, exc)


class QueryExchange:
    """One request/response exchange against one address"""

    def __init__(self, address: Address, timeout: float, log_packets: bool = False):
        self.address = address
        self.timeout = timeout
        self.log_packets = log_packets
        self.state = QueryState.IDLE
        self._settled = False
        self._latch: Optional[asyncio.Future] = None
        self._transport: Optional[asyncio.DatagramTransport] = None
        self._timer: Optional[asyncio.TimerHandle] = None
        self._opening: Optional[asyncio.Task] = None

    def settle(self, state: QueryState, payload: Any = None) -> bool:
        """Resolve the exchange; only the first call has any effect

        Returns:
            True if this call settled the exchange
        """
        if self._settled or self.state is QueryState.CLOSED or self._latch.done():
            logger.debug(f"{self.address}: ignoring {state.value}, already {self.state.value}")
            return False
        self._settled = True
        self.state = state
        self._latch.set_result(payload)
        return True

    async def run(self) -> QueryOutcome:
        loop = asyncio.get_running_loop()
        self._latch = loop.create_future()
        # the deadline also covers host resolution and endpoint setup
        self._timer = loop.call_later(self.timeout, self.settle, QueryState.TIMED_OUT)
        self._opening = loop.create_task(self._open(loop))
        try:
            await asyncio.wait({self._opening, self._latch}, return_when=asyncio.FIRST_COMPLETED)
            if self._opening.done():
                self._opening.result()
            payload = await self._latch
            return self._resolve(payload)
        finally:
            self.close()

    async def _open(self, loop: asyncio.AbstractEventLoop) -> None:
        """Open the endpoint and send the ping"""
        try:
            transport, _ = await loop.create_datagram_endpoint(
                lambda: _StatusProtocol(self),
                remote_addr=(self.address.host, self.address.port)
            )
        except (OSError, ValueError) as e:
            # ValueError covers UnicodeError from IDNA encoding and NULs in the host
            self.settle(QueryState.TRANSPORT_ERROR, e)
            return

        if self._settled or self.state is QueryState.CLOSED:
            transport.close()
            return

        self._transport = transport
        self.state = QueryState.SENT
        packet = encode_query()
        if self.log_packets:
            logger.debug(f"{self.address} <- {packet.hex()}")
        try:
            transport.sendto(packet)
        except (OSError, ValueError) as e:
            self.settle(QueryState.TRANSPORT_ERROR, e)

    def _resolve(self, payload: Any) -> QueryOutcome:
        if self.state is QueryState.TIMED_OUT:
            return QueryOutcome.offline(
                self.address, ErrorKind.TIMEOUT,
                f"Timeout: no response from server after {self.timeout:g}s"
            )

        if self.state is QueryState.TRANSPORT_ERROR:
            return QueryOutcome.offline(self.address, ErrorKind.TRANSPORT_ERROR, str(payload))

        if self.log_packets:
            logger.debug(f"{self.address} -> {bytes(payload).hex()}")
        try:
            reply = decode_reply(payload)
        except DecodeError as e:
            return QueryOutcome.offline(self.address, ErrorKind.DECODE_ERROR, str(e))
        return QueryOutcome.online(self.address, reply)

    def close(self) -> None:
        """Release the timer and endpoint; safe to call more than once"""
        if self.state is QueryState.CLOSED:
            return
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._opening is not None and not self._opening.done():
            self._opening.cancel()
        if self._transport is not None:
            self._transport.close()
            self._transport = None
        self.state = QueryState.CLOSED


class QueryClient:
    """Queries the status of a single game server

    Usage:
        client = QueryClient(ClientConfig(timeout=1.5))
        outcome = await client.query(Address("play.example.com"))
        if outcome.is_online:
            print(outcome.reply.host_name)
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = (config or ClientConfig()).validate()

    async def query(self, address, timeout: Optional[float] = None) -> QueryOutcome:
        """Send one status query and wait for the reply

        Args:
            address: Address, "host[:port]" string or (host, port) tuple
            timeout: Seconds to wait for the reply (defaults to config.timeout)

        Returns:
            QueryOutcome, online with the decoded reply or offline with a reason
        """
        address = as_address(address, self.config.port)
        exchange = QueryExchange(
            address,
            timeout if timeout is not None else self.config.timeout,
            self.config.log_packets
        )
        outcome = await exchange.run()
        if outcome.is_online:
            logger.debug(f"{address} online: {outcome.reply}")
        else:
            logger.debug(f"{address} offline: {outcome.detail}")
        return outcome


async def query(address, timeout: float = DEFAULT_TIMEOUT) -> QueryOutcome:
    """Query one server with default settings"""
    return await QueryClient(ClientConfig(timeout=timeout)).query(address)
