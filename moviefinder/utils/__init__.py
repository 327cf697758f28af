"""
Utilitaires et constantes pour MovieFinder.
"""

from moviefinder.utils.constants import (
    EMPTY_SEARCH_TERM_MESSAGE,
    FETCH_ERROR_MESSAGE,
    NO_RESULTS_MESSAGE,
    OMDB_MISSING_VALUE,
)

__all__ = [
    "EMPTY_SEARCH_TERM_MESSAGE",
    "FETCH_ERROR_MESSAGE",
    "NO_RESULTS_MESSAGE",
    "OMDB_MISSING_VALUE",
]
