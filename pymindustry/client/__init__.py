"""
Status query clients
"""

from .query_client import QueryClient, QueryExchange, QueryState, query
from .fleet import FleetQuery, query_all

__all__ = [
    'QueryClient', 'QueryExchange', 'QueryState', 'query',
    'FleetQuery', 'query_all'
]
