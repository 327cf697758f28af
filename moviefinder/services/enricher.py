"""
Service d'enrichissement des resultats de recherche.

Pour chaque resume renvoye par la recherche, recupere la fiche detaillee
(poster, pays) par identifiant. Toutes les requetes partent en meme temps,
sans limite de concurrence ni retry.
"""

import asyncio
from typing import Sequence

from loguru import logger

from moviefinder.config import AggregationPolicy
from moviefinder.core.ports.api_clients import IMovieAPIClient, MovieDetail, MovieSummary


class DetailEnricherService:
    """
    Service de fan-out des requetes de details.

    La politique de collecte determine le comportement en cas d'echec:
    - FAIL_FAST : le premier echec annule les requetes restantes et remonte
    - BEST_EFFORT : les echecs sont journalises et ignores

    Dans les deux cas, l'ordre des resultats est celui des resumes.
    """

    def __init__(
        self,
        api_client: IMovieAPIClient,
        policy: AggregationPolicy = AggregationPolicy.FAIL_FAST,
    ) -> None:
        self._api_client = api_client
        self._policy = policy

    @property
    def policy(self) -> AggregationPolicy:
        return self._policy

    async def enrich(self, summaries: Sequence[MovieSummary]) -> list[MovieDetail]:
        """
        Recupere les details de tous les resumes en parallele.

        Args:
            summaries: Resumes issus de la recherche

        Returns:
            Liste de MovieDetail dans l'ordre des resumes

        Raises:
            Exception: En FAIL_FAST, la premiere erreur rencontree
        """
        if not summaries:
            return []

        logger.debug(
            "Enrichissement des resultats",
            count=len(summaries),
            policy=self._policy.value,
        )
        tasks = [
            asyncio.ensure_future(self._api_client.get_details(summary.id))
            for summary in summaries
        ]

        if self._policy is AggregationPolicy.FAIL_FAST:
            try:
                return list(await asyncio.gather(*tasks))
            except Exception:
                for task in tasks:
                    task.cancel()
                raise

        outcomes = await asyncio.gather(*tasks, return_exceptions=True)
        details: list[MovieDetail] = []
        for summary, outcome in zip(summaries, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(
                    f"Details indisponibles pour {summary.id}: {outcome!r}",
                )
                continue
            details.append(outcome)
        return details
