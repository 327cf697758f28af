"""
Constantes globales pour MovieFinder.

Ce module contient:
- Les messages d'erreur affiches a l'utilisateur
- Les conventions de l'API OMDb
"""

# Messages affiches dans la zone d'erreur
EMPTY_SEARCH_TERM_MESSAGE = "Search term is required"
FETCH_ERROR_MESSAGE = "Fetch data error."
NO_RESULTS_MESSAGE = "No results found."

# Valeur utilisee par OMDb pour un champ absent (poster, pays...)
OMDB_MISSING_VALUE = "N/A"

# Valeur du drapeau "Response" quand la requete a abouti
OMDB_SUCCESS_FLAG = "True"
