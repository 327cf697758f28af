"""
Clients API externes.

Ce module fournit l'adaptateur pour communiquer avec l'API OMDb
(Open Movie Database). Le client implemente IMovieAPIClient defini
dans core/ports/api_clients.py.
"""

from moviefinder.adapters.api.omdb_client import OMDbClient

__all__ = [
    "OMDbClient",
]
