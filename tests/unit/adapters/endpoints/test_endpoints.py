"""
Tests pour les groupes d'endpoints (movie, discover, keyword, search).

Le TMDBClient est mocke : ces tests verifient les chemins, les parametres
par defaut fusionnes avec ceux de l'appelant et la transmission des
surcharges de cache.
"""

from unittest.mock import AsyncMock

import pytest

from tmdb_sdk.adapters.api.client import TMDBClient
from tmdb_sdk.adapters.endpoints import (
    DiscoverEndpoint,
    KeywordEndpoint,
    MovieEndpoint,
    SearchEndpoint,
)


@pytest.fixture
def mock_client() -> AsyncMock:
    client = AsyncMock(spec=TMDBClient)
    client.get.return_value = {"ok": True}
    client.post.return_value = {"success": True}
    client.delete.return_value = {"success": True}
    return client


class TestMovieEndpoint:
    """Tests pour MovieEndpoint."""

    @pytest.mark.asyncio
    async def test_get_details_passes_params_and_cache_overrides(self, mock_client: AsyncMock):
        movie = MovieEndpoint(mock_client)

        result = await movie.get_details(550, {"language": "en-US"}, use_cache=False, cache_ttl=60)

        assert result == {"ok": True}
        mock_client.get.assert_awaited_once_with(
            "/movie/550", {"language": "en-US"}, use_cache=False, cache_ttl=60
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get_account_states", "/movie/550/account_states"),
            ("get_alternative_titles", "/movie/550/alternative_titles"),
            ("get_external_ids", "/movie/550/external_ids"),
            ("get_images", "/movie/550/images"),
            ("get_keywords", "/movie/550/keywords"),
            ("get_release_dates", "/movie/550/release_dates"),
            ("get_translations", "/movie/550/translations"),
            ("get_watch_providers", "/movie/550/watch/providers"),
        ],
    )
    async def test_sub_resources_without_params(
        self, mock_client: AsyncMock, method: str, path: str
    ):
        await getattr(MovieEndpoint(mock_client), method)("550")

        mock_client.get.assert_awaited_once_with(path, {}, use_cache=None, cache_ttl=None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get_changes", "/movie/550/changes"),
            ("get_credits", "/movie/550/credits"),
            ("get_lists", "/movie/550/lists"),
            ("get_recommendations", "/movie/550/recommendations"),
            ("get_reviews", "/movie/550/reviews"),
            ("get_similar", "/movie/550/similar"),
            ("get_videos", "/movie/550/videos"),
        ],
    )
    async def test_sub_resources_with_params(self, mock_client: AsyncMock, method: str, path: str):
        await getattr(MovieEndpoint(mock_client), method)(550, {"page": 2})

        mock_client.get.assert_awaited_once_with(path, {"page": 2}, use_cache=None, cache_ttl=None)

    @pytest.mark.asyncio
    async def test_get_latest(self, mock_client: AsyncMock):
        await MovieEndpoint(mock_client).get_latest()
        mock_client.get.assert_awaited_once_with("/movie/latest", {}, use_cache=None, cache_ttl=None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("movie_id", [None, ""])
    async def test_missing_movie_id_is_rejected(self, mock_client: AsyncMock, movie_id):
        with pytest.raises(ValueError, match="Movie ID is required"):
            await MovieEndpoint(mock_client).get_details(movie_id)
        mock_client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rate_movie_posts_value(self, mock_client: AsyncMock):
        result = await MovieEndpoint(mock_client).rate_movie(550, 8.5)

        assert result == {"success": True}
        mock_client.post.assert_awaited_once_with("/movie/550/rating", {"value": 8.5})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0.4, 10.5, -1, None, "8", True])
    async def test_rate_movie_rejects_out_of_range(self, mock_client: AsyncMock, rating: float):
        with pytest.raises(ValueError, match="Rating must be between"):
            await MovieEndpoint(mock_client).rate_movie(550, rating)
        mock_client.post.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0.5, 10.0])
    async def test_rate_movie_accepts_bounds(self, mock_client: AsyncMock, rating: float):
        await MovieEndpoint(mock_client).rate_movie(550, rating)
        mock_client.post.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_rating(self, mock_client: AsyncMock):
        await MovieEndpoint(mock_client).delete_rating(550)
        mock_client.delete.assert_awaited_once_with("/movie/550/rating")


class TestDiscoverEndpoint:
    """Tests pour DiscoverEndpoint."""

    @pytest.mark.asyncio
    async def test_movies_defaults(self, mock_client: AsyncMock):
        await DiscoverEndpoint(mock_client).movies()

        mock_client.get.assert_awaited_once_with(
            "/discover/movie",
            {
                "language": "en-US",
                "page": 1,
                "sort_by": "popularity.desc",
                "include_adult": False,
                "include_video": False,
            },
            use_cache=None,
            cache_ttl=None,
        )

    @pytest.mark.asyncio
    async def test_caller_params_override_defaults(self, mock_client: AsyncMock):
        await DiscoverEndpoint(mock_client).movies(
            {"page": 3, "vote_average.gte": 7.5}, cache_ttl=600
        )

        args = mock_client.get.await_args
        assert args.args[1]["page"] == 3
        assert args.args[1]["vote_average.gte"] == 7.5
        assert args.args[1]["language"] == "en-US"
        assert args.kwargs == {"use_cache": None, "cache_ttl": 600}

    @pytest.mark.asyncio
    async def test_tv_shows_defaults(self, mock_client: AsyncMock):
        await DiscoverEndpoint(mock_client).tv_shows()

        path, params = mock_client.get.await_args.args
        assert path == "/discover/tv"
        assert params["include_null_first_air_dates"] is False
        assert "include_video" not in params


class TestKeywordEndpoint:
    """Tests pour KeywordEndpoint."""

    @pytest.mark.asyncio
    async def test_get_details(self, mock_client: AsyncMock):
        await KeywordEndpoint(mock_client).get_details(825)
        mock_client.get.assert_awaited_once_with("/keyword/825", {}, use_cache=None, cache_ttl=None)

    @pytest.mark.asyncio
    async def test_get_movies_defaults(self, mock_client: AsyncMock):
        await KeywordEndpoint(mock_client).get_movies(825, {"page": 2})

        mock_client.get.assert_awaited_once_with(
            "/keyword/825/movies",
            {"language": "en-US", "include_adult": False, "page": 2},
            use_cache=None,
            cache_ttl=None,
        )

    @pytest.mark.asyncio
    async def test_missing_keyword_id_is_rejected(self, mock_client: AsyncMock):
        with pytest.raises(ValueError, match="Keyword ID is required"):
            await KeywordEndpoint(mock_client).get_movies(None)


class TestSearchEndpoint:
    """Tests pour SearchEndpoint."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("collections", "/search/collection"),
            ("movies", "/search/movie"),
            ("multi", "/search/multi"),
            ("people", "/search/person"),
            ("tv_shows", "/search/tv"),
        ],
    )
    async def test_localized_searches(self, mock_client: AsyncMock, method: str, path: str):
        await getattr(SearchEndpoint(mock_client), method)("Fight Club")

        mock_client.get.assert_awaited_once_with(
            path,
            {"query": "Fight Club", "language": "en-US", "include_adult": False, "page": 1},
            use_cache=None,
            cache_ttl=None,
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [("companies", "/search/company"), ("keywords", "/search/keyword")],
    )
    async def test_plain_searches(self, mock_client: AsyncMock, method: str, path: str):
        await getattr(SearchEndpoint(mock_client), method)("fox")

        mock_client.get.assert_awaited_once_with(
            path, {"query": "fox", "page": 1}, use_cache=None, cache_ttl=None
        )

    @pytest.mark.asyncio
    async def test_search_params_and_overrides(self, mock_client: AsyncMock):
        await SearchEndpoint(mock_client).movies("Fight Club", {"year": 1999}, use_cache=False)

        args = mock_client.get.await_args
        assert args.args[1]["year"] == 1999
        assert args.kwargs["use_cache"] is False

    @pytest.mark.asyncio
    async def test_empty_query_is_rejected(self, mock_client: AsyncMock):
        with pytest.raises(ValueError, match="Search query is required"):
            await SearchEndpoint(mock_client).movies("")
        mock_client.get.assert_not_awaited()
