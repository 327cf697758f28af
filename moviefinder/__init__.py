"""
MovieFinder - Recherche de films, series et episodes via l'API OMDb.

Ce package fournit une interface web (et une CLI) pour rechercher un titre,
enrichir chaque resultat avec ses details complets et afficher le tout
sous forme de tableau.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur, ports, etat de recherche)
- services/ : Couche application (recherche, enrichissement)
- adapters/ : Couche infrastructure (client API OMDb)
- web/ : Interface FastAPI + Jinja2 + HTMX
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("moviefinder")
except PackageNotFoundError:
    # Execution depuis les sources sans installation
    __version__ = "0.1.0"
