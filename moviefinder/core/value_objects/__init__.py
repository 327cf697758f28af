"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- SearchCategory : Type de media recherche (movie, series, episode)
- SearchQuery : Requete de recherche validee (titre + categorie)
"""

from moviefinder.core.value_objects.search import SearchCategory, SearchQuery

__all__ = [
    "SearchCategory",
    "SearchQuery",
]
