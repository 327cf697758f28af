"""
Routes de l'interface web : page d'accueil et recherche.
"""
