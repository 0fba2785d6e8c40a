"""
Endpoints /movie : details, credits, images, recommandations, notation...

Reference API: https://developer.themoviedb.org/reference/movie-details
"""

from typing import Any, Optional

from tmdb_sdk.adapters.endpoints.base import Endpoint, MediaId, require_id
from tmdb_sdk.core.ports.cache import QueryParams

MIN_RATING = 0.5
MAX_RATING = 10.0


class MovieEndpoint(Endpoint):
    """
    Acces aux donnees d'un film.

    Example:
        movie = await tmdb.movie.get_details(550, {"language": "en-US"})
        credits = await tmdb.movie.get_credits(550)
        await tmdb.movie.rate_movie(550, 8.5)
    """

    def _path(self, movie_id: MediaId, suffix: str = "") -> str:
        return f"/movie/{require_id(movie_id, 'Movie ID')}{suffix}"

    async def get_details(
        self,
        movie_id: MediaId,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """
        Details d'un film.

        Args:
            movie_id: ID TMDB du film
            params: language, append_to_response...
        """
        return await self._get(
            self._path(movie_id), params, use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_account_states(
        self,
        movie_id: MediaId,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """Etat du film pour le compte (note, watchlist, favori)."""
        return await self._get(
            self._path(movie_id, "/account_states"), use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_alternative_titles(
        self,
        movie_id: MediaId,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/alternative_titles"), use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_changes(
        self,
        movie_id: MediaId,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/changes"), params, use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_credits(
        self,
        movie_id: MediaId,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """Distribution et equipe technique."""
        return await self._get(
            self._path(movie_id, "/credits"), params, use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_external_ids(
        self,
        movie_id: MediaId,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """IDs externes (IMDb, Wikidata, reseaux sociaux)."""
        return await self._get(
            self._path(movie_id, "/external_ids"), use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_images(
        self,
        movie_id: MediaId,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/images"), use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_keywords(
        self,
        movie_id: MediaId,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/keywords"), use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_latest(
        self, *, use_cache: Optional[bool] = None, cache_ttl: Optional[int] = None
    ) -> Any:
        """Dernier film ajoute a TMDB."""
        return await self._get("/movie/latest", use_cache=use_cache, cache_ttl=cache_ttl)

    async def get_lists(
        self,
        movie_id: MediaId,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/lists"), params, use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_recommendations(
        self,
        movie_id: MediaId,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/recommendations"),
            params,
            use_cache=use_cache,
            cache_ttl=cache_ttl,
        )

    async def get_release_dates(
        self,
        movie_id: MediaId,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/release_dates"), use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_reviews(
        self,
        movie_id: MediaId,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/reviews"), params, use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_similar(
        self,
        movie_id: MediaId,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/similar"), params, use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_translations(
        self,
        movie_id: MediaId,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/translations"), use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_videos(
        self,
        movie_id: MediaId,
        params: Optional[QueryParams] = None,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        return await self._get(
            self._path(movie_id, "/videos"), params, use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def get_watch_providers(
        self,
        movie_id: MediaId,
        *,
        use_cache: Optional[bool] = None,
        cache_ttl: Optional[int] = None,
    ) -> Any:
        """Plateformes de diffusion par pays."""
        return await self._get(
            self._path(movie_id, "/watch/providers"), use_cache=use_cache, cache_ttl=cache_ttl
        )

    async def rate_movie(self, movie_id: MediaId, rating: float) -> Any:
        """
        Note un film (jamais mis en cache).

        Args:
            movie_id: ID TMDB du film
            rating: Note entre 0.5 et 10.0

        Raises:
            ValueError: Si l'ID manque ou si la note est hors limites
        """
        path = self._path(movie_id, "/rating")
        if (
            isinstance(rating, bool)
            or not isinstance(rating, (int, float))
            or not MIN_RATING <= rating <= MAX_RATING
        ):
            raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
        return await self._client.post(path, {"value": rating})

    async def delete_rating(self, movie_id: MediaId) -> Any:
        """Supprime la note donnee a un film."""
        return await self._client.delete(self._path(movie_id, "/rating"))
