"""
Tests for TraktClient - social provider implementation.

Verifies headers, TMDB id resolution, overall rating and the single-call
episode listing. Every failure becomes None or an empty list.
"""

import httpx
import pytest
import respx

from src.adapters.api.trakt_client import TraktClient
from src.core.value_objects import MediaType, RatingSource
from tests.fixtures.trakt_responses import (
    TRAKT_RATING_RESPONSE,
    TRAKT_SEARCH_NO_SLUG_RESPONSE,
    TRAKT_SEARCH_SHOW_RESPONSE,
    TRAKT_SEASONS_RESPONSE,
    TRAKT_ZERO_RATING_RESPONSE,
)

BASE = "https://api.trakt.tv"


@pytest.fixture
def trakt_client() -> TraktClient:
    return TraktClient(client_id="test_trakt_id", max_attempts=1)


class TestTraktResolveId:
    @pytest.mark.asyncio
    @respx.mock
    async def test_resolves_slug_with_api_headers(self, trakt_client: TraktClient) -> None:
        route = respx.get(f"{BASE}/search/tmdb/1396").mock(
            return_value=httpx.Response(200, json=TRAKT_SEARCH_SHOW_RESPONSE)
        )

        trakt_id = await trakt_client.resolve_trakt_id(1396, MediaType.SERIES)

        request = route.calls.last.request
        assert trakt_id == "breaking-bad"
        assert request.url.params["type"] == "show"
        assert request.headers["trakt-api-key"] == "test_trakt_id"
        assert request.headers["trakt-api-version"] == "2"

    @pytest.mark.asyncio
    @respx.mock
    async def test_falls_back_to_numeric_id(self, trakt_client: TraktClient) -> None:
        route = respx.get(f"{BASE}/search/tmdb/27205").mock(
            return_value=httpx.Response(200, json=TRAKT_SEARCH_NO_SLUG_RESPONSE)
        )
        trakt_id = await trakt_client.resolve_trakt_id(27205, MediaType.MOVIE)
        assert trakt_id == "16662"
        assert route.calls.last.request.url.params["type"] == "movie"

    @pytest.mark.asyncio
    @respx.mock
    async def test_no_match_returns_none(self, trakt_client: TraktClient) -> None:
        respx.get(f"{BASE}/search/tmdb/1396").mock(return_value=httpx.Response(200, json=[]))
        assert await trakt_client.resolve_trakt_id(1396, MediaType.SERIES) is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_returns_none(self, trakt_client: TraktClient) -> None:
        respx.get(f"{BASE}/search/tmdb/1396").mock(return_value=httpx.Response(403))
        assert await trakt_client.resolve_trakt_id(1396, MediaType.SERIES) is None


class TestTraktOverallRating:
    @pytest.mark.asyncio
    @respx.mock
    async def test_show_rating(self, trakt_client: TraktClient) -> None:
        respx.get(f"{BASE}/shows/breaking-bad/ratings").mock(
            return_value=httpx.Response(200, json=TRAKT_RATING_RESPONSE)
        )
        rating = await trakt_client.get_overall_rating("breaking-bad", MediaType.SERIES)
        assert rating.source is RatingSource.TRAKT
        assert rating.score == 9.3
        assert rating.votes == 98000

    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_uses_movies_endpoint(self, trakt_client: TraktClient) -> None:
        route = respx.get(f"{BASE}/movies/inception-2010/ratings").mock(
            return_value=httpx.Response(200, json=TRAKT_RATING_RESPONSE)
        )
        await trakt_client.get_overall_rating("inception-2010", MediaType.MOVIE)
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_zero_rating_has_no_score(self, trakt_client: TraktClient) -> None:
        respx.get(f"{BASE}/shows/new-show/ratings").mock(
            return_value=httpx.Response(200, json=TRAKT_ZERO_RATING_RESPONSE)
        )
        rating = await trakt_client.get_overall_rating("new-show", MediaType.SERIES)
        assert rating.score is None
        assert rating.votes is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_returns_none(self, trakt_client: TraktClient) -> None:
        respx.get(f"{BASE}/shows/breaking-bad/ratings").mock(return_value=httpx.Response(500))
        assert await trakt_client.get_overall_rating("breaking-bad", MediaType.SERIES) is None


class TestTraktEpisodeRatings:
    @pytest.mark.asyncio
    @respx.mock
    async def test_flattens_seasons(self, trakt_client: TraktClient) -> None:
        route = respx.get(f"{BASE}/shows/breaking-bad/seasons").mock(
            return_value=httpx.Response(200, json=TRAKT_SEASONS_RESPONSE)
        )

        episodes = await trakt_client.get_episode_ratings("breaking-bad")

        assert route.calls.last.request.url.params["extended"] == "episodes"
        assert [e.key for e in episodes] == [(0, 1), (1, 1), (1, 2)]
        assert episodes[1].trakt_score == 8.6
        assert episodes[1].tmdb_score is None
        assert episodes[1].title == "Pilot"

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_returns_empty_list(self, trakt_client: TraktClient) -> None:
        respx.get(f"{BASE}/shows/breaking-bad/seasons").mock(
            side_effect=httpx.ConnectError("unreachable")
        )
        assert await trakt_client.get_episode_ratings("breaking-bad") == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_unnumbered_episode_skipped_others_kept(self, trakt_client: TraktClient) -> None:
        payload = [
            {
                "number": 1,
                "episodes": [
                    {"number": 1, "title": "Pilot", "rating": 8.0},
                    {"number": None, "title": "Bonus", "rating": 7.0},
                    {"number": 2, "title": "Second", "rating": 7.5},
                ],
            },
            {"number": None, "episodes": [{"number": 1, "rating": 6.0}]},
        ]
        respx.get(f"{BASE}/shows/breaking-bad/seasons").mock(
            return_value=httpx.Response(200, json=payload)
        )

        episodes = await trakt_client.get_episode_ratings("breaking-bad")

        assert [e.key for e in episodes] == [(1, 1), (1, 2)]
        assert episodes[1].trakt_score == 7.5
