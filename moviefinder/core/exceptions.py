"""
Exceptions du domaine MovieFinder.

Taxonomie des erreurs de recherche:
- SearchValidationError : terme de recherche vide ou categorie inconnue,
  detectee avant tout appel reseau
- UpstreamError : l'API a repondu avec Response=False, son message est
  affiche tel quel
- InvalidTransitionError : transition interdite de l'etat de recherche
- FetchError : echec reseau, statut HTTP en erreur ou corps illisible ;
  journalise puis remplace par un message generique par le service
"""


class MovieFinderError(Exception):
    """Exception de base de l'application."""


class SearchValidationError(MovieFinderError):
    """
    Exception levee quand une requete de recherche est invalide.

    Attributes:
        message: Message destine a l'utilisateur
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UpstreamError(MovieFinderError):
    """
    Exception levee quand l'API signale un echec logique (Response=False).

    Attributes:
        message: Message d'erreur fourni par l'API (ex: "Movie not found!")
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidTransitionError(MovieFinderError):
    """
    Exception levee pour une transition d'etat non autorisee.

    Attributes:
        action: Action demandee (ex: "reset")
        status: Etat courant au moment de la demande
    """

    def __init__(self, action: str, status: str) -> None:
        self.action = action
        self.status = status
        super().__init__(f"Transition '{action}' impossible depuis l'etat '{status}'")


class FetchError(MovieFinderError):
    """
    Exception levee quand l'API est injoignable ou renvoie une reponse illisible.

    Le message ne contient jamais la cle API : l'URL est journalisee sans
    son parametre "apikey".

    Attributes:
        message: Description technique de l'echec (jamais affichee telle quelle)
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
