"""
Services applicatifs de MovieFinder.

- DetailEnricherService : Recuperation parallele des details de chaque resultat
- MovieSearchService : Orchestration recherche -> enrichissement -> etat d'affichage
"""

from moviefinder.services.enricher import DetailEnricherService
from moviefinder.services.search import MovieSearchService, SearchErrorKind, SearchOutcome

__all__ = [
    "DetailEnricherService",
    "MovieSearchService",
    "SearchErrorKind",
    "SearchOutcome",
]
