"""
Infrastructure de MovieFinder.

- SessionStore : Etats de recherche en memoire, un par navigateur
"""

from moviefinder.infrastructure.session_store import SessionStore

__all__ = [
    "SessionStore",
]
