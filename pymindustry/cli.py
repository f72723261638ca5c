#!/usr/bin/env python3
"""
pymindustry-status - query the status of one or more game servers

Examples:
    pymindustry-status play.example.com 203.0.113.7:6568
    pymindustry-status -f servers.json --json
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .client.fleet import FleetQuery
from .config.client_config import ClientConfig
from .config.validation import ConfigValidationError
from .models import Address, QueryOutcome, parse_address
from .protocol.constants import DEFAULT_TIMEOUT
from .serverlist.loader import load_addresses
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def display_outcomes(outcomes: List[QueryOutcome]):
    """Print query results as a table"""
    if not outcomes:
        print("No servers to query.")
        return

    print("=" * 80)
    print(f"{'Address':<24} {'Status':<8} {'Name':<22} {'Players':<9} {'Map':<15}")
    print("=" * 80)

    for outcome in outcomes:
        address = str(outcome.address)
        if outcome.is_online:
            reply = outcome.reply
            players = f"{reply.players}/{reply.player_limit}" if reply.player_limit > 0 else str(reply.players)
            print(f"{address[:23]:<24} {'online':<8} {reply.host_name[:21]:<22} "
                  f"{players:<9} {reply.map[:15]:<15}")
        else:
            print(f"{address[:23]:<24} {'offline':<8} {outcome.detail}")

    print("=" * 80)
    online = sum(1 for o in outcomes if o.is_online)
    print(f"Online: {online}/{len(outcomes)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query game server status over UDP")
    parser.add_argument("addresses", nargs="*", help="Servers as host or host:port")
    parser.add_argument("-f", "--file", help="JSON server list to query")
    parser.add_argument("-t", "--timeout", type=float, default=DEFAULT_TIMEOUT, help="Seconds to wait per server")
    parser.add_argument("-c", "--max-concurrency", type=int, default=None,
                        help="Maximum queries in flight (default: unbounded)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ClientConfig(
            timeout=args.timeout,
            max_concurrency=args.max_concurrency,
            log_level="DEBUG" if args.verbose else "WARNING",
            log_packets=args.verbose
        ).validate()
        configure_logging(config.log_level)
        addresses: List[Address] = []
        if args.file:
            addresses.extend(load_addresses(args.file))
        addresses.extend(parse_address(a) for a in args.addresses)
    except ConfigValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not addresses:
        parser.print_usage(sys.stderr)
        print("error: no servers given", file=sys.stderr)
        return 2

    logger.debug(f"Querying {len(addresses)} servers")
    outcomes = asyncio.run(FleetQuery(config).query_all(addresses))

    if args.json:
        print(json.dumps([o.to_dict() for o in outcomes], indent=2))
    else:
        display_outcomes(outcomes)

    return 0 if all(o.is_online for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
