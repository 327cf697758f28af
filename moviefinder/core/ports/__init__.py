"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports client API : Contrats pour les services externes
- IMovieAPIClient : Interface de l'API de métadonnées films
- MovieSummary : Résultat abrégé d'une recherche
- MovieDetail : Informations détaillées d'un titre
"""

from moviefinder.core.ports.api_clients import (
    IMovieAPIClient,
    MovieDetail,
    MovieSummary,
)

__all__ = [
    "IMovieAPIClient",
    "MovieSummary",
    "MovieDetail",
]
