#!/usr/bin/env python3
"""
Fleet Status Demo

This example shows how to:
1. Load a server list from servers.json
2. Query every server at once
3. Print who is up, sorted by player count
"""

import asyncio
import logging
import sys

sys.path.insert(0, '..')
from pymindustry import ClientConfig, FleetQuery, load_addresses
from pymindustry.utils import configure_logging


async def run(path: str):
    addresses = load_addresses(path)
    if not addresses:
        print(f"No servers in {path}")
        return 1

    fleet = FleetQuery(ClientConfig(timeout=2.0))
    outcomes = await fleet.query_all(addresses)

    online = sorted((o for o in outcomes if o.is_online),
                    key=lambda o: o.reply.players, reverse=True)
    for outcome in online:
        reply = outcome.reply
        print(f"{reply.players:>4} players  {reply.host_name}  ({outcome.address})")

    for outcome in outcomes:
        if not outcome.is_online:
            print(f"     offline  {outcome.address}: {outcome.detail}")

    return 0


def main():
    """Main demo function"""
    configure_logging(logging.INFO)
    path = sys.argv[1] if len(sys.argv) > 1 else "servers.json"
    return asyncio.run(run(path))


if __name__ == "__main__":
    sys.exit(main())
