"""
Couche domaine de MovieFinder.

- value_objects/ : SearchCategory, SearchQuery
- ports/ : Contrat du client API et enregistrements films
- entities/ : SearchSession (etat de l'interface de recherche)
- exceptions : Taxonomie des erreurs
"""
