"""
Client TMDB pour la recherche de films, leurs fiches et leur distribution.

Implemente l'interface IMovieAPIClient pour TMDB (The Movie Database).
Chaque methode emet exactement une requete : pas de cache, pas de retry.
La cle API est injectee au constructeur et passee en parametre de requete.

Usage:
    client = TMDBClient(api_key="your_key")
    results = await client.search_movies("Matrix")
    movie, credits = await asyncio.gather(
        client.get_movie(603), client.get_credits(603)
    )
    await client.close()
"""

from typing import Any, Optional, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from cinesearch.adapters.api.tmdb_schemas import (
    CreditsPayload,
    MovieDetailPayload,
    SearchPayload,
)
from cinesearch.core.entities.movie import Credits, MovieDetail, MovieSummary
from cinesearch.core.ports.api_clients import (
    IMovieAPIClient,
    ProviderParseError,
    ProviderStatusError,
    ProviderTransportError,
)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class TMDBClient(IMovieAPIClient):
    """
    Client API TMDB v3.

    Implemente IMovieAPIClient avec:
    - Recherche de films par titre (premiere page de resultats)
    - Recuperation de la fiche d'un film
    - Recuperation de la distribution d'un film
    - Validation des reponses (schemas pydantic)

    Toute erreur de requete httpx est convertie en ProviderTransportError,
    tout statut non 2xx en ProviderStatusError et tout corps invalide (encodage,
    JSON, schema) en ProviderParseError.

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3

    Example:
        client = TMDBClient(api_key="xxx")

        results = await client.search_movies("Inception")
        if results:
            movie = await client.get_movie(results[0].id)
            print(f"{movie.title} - {movie.runtime} min")

        await client.close()
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = TMDB_BASE_URL,
        language: str = "en-US",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB v3 (None : les appels echoueront cote fournisseur)
            base_url: URL de base de l'API
            language: Langue des fiches et distributions (ex: "en-US")
            timeout: Timeout en secondes, None pour ne pas en imposer
            transport: Transport httpx alternatif (tests)
        """
        self._api_key = api_key
        self._base_url = base_url
        self._language = language
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        La cle API est attachee a toutes les requetes en parametre api_key.

        Returns:
            httpx.AsyncClient configure pour l'API TMDB
        """
        if self._client is None or self._client.is_closed:
            params = {}
            if self._api_key:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                params=params,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def _get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        Execute un GET et retourne le corps JSON decode.

        Raises:
            ProviderTransportError: La requete n'a pas abouti
            ProviderStatusError: Statut HTTP non 2xx
            ProviderParseError: Corps non decodable ou non JSON
        """
        client = self._get_client()
        logger.debug(f"TMDB GET {endpoint}")
        try:
            response = await client.get(endpoint, params=params)
        except httpx.DecodingError as e:
            raise ProviderParseError(
                f"Undecodable body from {endpoint}: {e!r}", endpoint=endpoint
            ) from e
        except httpx.RequestError as e:
            raise ProviderTransportError(
                f"Request to {endpoint} failed: {e!r}", endpoint=endpoint
            ) from e

        if not response.is_success:
            raise ProviderStatusError(response.status_code, endpoint)

        try:
            return response.json()
        except ValueError as e:
            raise ProviderParseError(
                f"Invalid JSON body from {endpoint}", endpoint=endpoint
            ) from e

    @staticmethod
    def _validate(schema: type[PayloadT], data: Any, endpoint: str) -> PayloadT:
        """Valide un corps JSON contre son schema."""
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise ProviderParseError(
                f"Unexpected response shape from {endpoint}: {e.error_count()} error(s)",
                endpoint=endpoint,
            ) from e

    async def search_movies(self, query: str) -> list[MovieSummary]:
        """
        Recherche des films par titre.

        Le texte est encode dans l'URL par httpx. Seule la premiere page
        de resultats est consommee.

        Args:
            query: Titre du film a rechercher

        Returns:
            Liste de MovieSummary (vide si aucun resultat)
        """
        endpoint = "/search/movie"
        data = await self._get(endpoint, params={"query": query})
        payload = self._validate(SearchPayload, data, endpoint)
        return payload.to_entities()

    async def get_movie(self, movie_id: int) -> MovieDetail:
        """
        Recupere la fiche detaillee d'un film.

        Args:
            movie_id: ID TMDB du film

        Returns:
            MovieDetail construit depuis la reponse

        Raises:
            ProviderStatusError: 404 si le film n'existe pas
        """
        endpoint = f"/movie/{movie_id}"
        data = await self._get(endpoint, params={"language": self._language})
        return self._validate(MovieDetailPayload, data, endpoint).to_entity()

    async def get_credits(self, movie_id: int) -> Credits:
        """
        Recupere la distribution d'un film.

        Args:
            movie_id: ID TMDB du film

        Returns:
            Credits avec la distribution dans l'ordre du fournisseur
        """
        endpoint = f"/movie/{movie_id}/credits"
        data = await self._get(endpoint, params={"language": self._language})
        return self._validate(CreditsPayload, data, endpoint).to_entity()

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
