"""
Entites du domaine.

- SearchSession : Etat de l'interface de recherche d'un navigateur
- SearchStatus : Etats possibles (IDLE, LOADING, ERROR, RESULTS)
"""

from moviefinder.core.entities.search_session import SearchSession, SearchStatus

__all__ = [
    "SearchSession",
    "SearchStatus",
]
