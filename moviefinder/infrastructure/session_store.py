"""
Stockage en memoire des etats de recherche.

Chaque navigateur est identifie par un cookie de session opaque. L'etat
n'est jamais persiste : il disparait au redemarrage du serveur. Les acces
se font uniquement depuis la boucle evenementielle, sans verrou.
"""

import secrets
from typing import Optional

from moviefinder.core.entities.search_session import SearchSession


class SessionStore:
    """
    Registre des SearchSession indexe par identifiant de session.

    Example:
        store = SessionStore()
        session_id, session = store.get_or_create(request.cookies.get("sid"))
    """

    def __init__(self) -> None:
        self._sessions: dict[str, SearchSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: Optional[str]) -> Optional[SearchSession]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: Optional[str]) -> tuple[str, SearchSession]:
        """
        Retourne la session existante ou en cree une nouvelle.

        Un identifiant inconnu (ex: serveur redemarre) est remplace par
        un nouvel identifiant.

        Returns:
            Tuple (identifiant, session)
        """
        session = self.get(session_id)
        if session is not None:
            return session_id, session

        new_id = secrets.token_urlsafe(16)
        session = SearchSession()
        self._sessions[new_id] = session
        return new_id, session

    def clear(self) -> None:
        self._sessions.clear()
