"""
Adaptateurs d'infrastructure de MovieFinder.

- api/ : Client HTTP de l'API OMDb
"""
