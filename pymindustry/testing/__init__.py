"""
Testing infrastructure for pymindustry
"""

from .mock_server import MockStatusServer, ServerScenario, ServerState
from .fixtures import build_reply_packet, encode_string

__all__ = [
    'MockStatusServer', 'ServerScenario', 'ServerState',
    'build_reply_packet', 'encode_string'
]
