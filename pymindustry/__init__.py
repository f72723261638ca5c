"""
pymindustry - an asyncio client for the game server status query protocol

Usage:
    import asyncio
    from pymindustry import query

    outcome = asyncio.run(query("play.example.com:6567"))
    if outcome.is_online:
        print(outcome.reply.host_name, outcome.reply.players)
    else:
        print("offline:", outcome.reason)

Querying many servers at once:
    from pymindustry import FleetQuery, ClientConfig

    fleet = FleetQuery(ClientConfig(timeout=1.5, max_concurrency=32))
    outcomes = asyncio.run(fleet.query_all([
        "play.example.com",
        "203.0.113.7:6568",
    ]))
    for outcome in outcomes:  # same order as the input
        print(outcome)

Decoding a captured reply:
    from pymindustry import decode_reply

    reply = decode_reply(payload)
    print(reply.map, reply.waves)
"""

__version__ = "1.0.0"

# protocol must load before models, which imports its constants
from .protocol import (
    encode_query,
    decode_reply,
    PacketReader,
    ErrorKind,
    GameMode,
    QueryError,
    TransportError,
    QueryTimeoutError,
    DecodeError,
    TruncatedPacketError,
    DEFAULT_PORT,
)
from .models import Address, StatusReply, QueryOutcome, parse_address
from .config import ClientConfig, ConfigValidationError
from .client import QueryClient, FleetQuery, query, query_all
from .serverlist import load_addresses

__all__ = [
    "encode_query",
    "decode_reply",
    "PacketReader",
    "ErrorKind",
    "GameMode",
    "QueryError",
    "TransportError",
    "QueryTimeoutError",
    "DecodeError",
    "TruncatedPacketError",
    "DEFAULT_PORT",
    "Address",
    "StatusReply",
    "QueryOutcome",
    "parse_address",
    "ClientConfig",
    "ConfigValidationError",
    "QueryClient",
    "FleetQuery",
    "query",
    "query_all",
    "load_addresses",
]
