"""
Tests unitaires pour AggregationService.

Les trois fournisseurs sont des AsyncMock des ports. Ces tests verifient:
- Le resultat complet d'une serie (notes globales + episodes fusionnes)
- Les erreurs typees sur les donnees obligatoires (NOT_FOUND / AGGREGATION_ERROR)
- L'absorption des erreurs sur les donnees optionnelles
- Les films n'ont jamais d'episodes
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from src.core.exceptions import MediaNotFoundError, ProviderError, ProviderRequestError
from src.core.ports.api_clients import ExternalIds, MediaDetails
from src.core.value_objects import MediaType
from src.services.aggregation import AggregationService, BranchOutcome


@pytest.fixture
def service(
    mock_catalog: AsyncMock, mock_ratings: AsyncMock, mock_social: AsyncMock
) -> AggregationService:
    return AggregationService(
        catalog=mock_catalog, ratings=mock_ratings, social=mock_social, timeout=1.0
    )


class TestBranchOutcome:
    def test_ok_is_present(self) -> None:
        outcome = BranchOutcome.ok(3)
        assert outcome.is_present
        assert outcome.value_or(0) == 3

    def test_absent_keeps_error(self) -> None:
        error = RuntimeError("boom")
        outcome = BranchOutcome.absent(error)
        assert not outcome.is_present
        assert outcome.error is error
        assert outcome.value_or([]) == []


class TestAggregateSeries:
    @pytest.mark.asyncio
    async def test_full_series_result(
        self, service: AggregationService, mock_social: AsyncMock
    ) -> None:
        result = await service.aggregate(1396, "series")

        assert result.title == "Breaking Bad"
        assert result.year == 2008
        assert result.media_type is MediaType.SERIES
        assert result.poster_url == "https://image.tmdb.org/t/p/w500/ggFHVNu6YYI5L9pCfOacjizRGt.jpg"
        assert result.ids.tmdb_id == 1396
        assert result.ids.imdb_id == "tt0903747"
        assert result.ids.trakt_id == "breaking-bad"

        assert result.overall.tmdb.score == 8.9
        assert result.overall.imdb.score == 9.5
        assert result.overall.trakt.score == 9.3

        assert list(result.episodes_by_season) == [1]
        pilot = result.episodes_by_season[1][0]
        assert (pilot.title, pilot.tmdb_score, pilot.trakt_score) == ("Pilot", 8.2, 8.6)
        mock_social.get_episode_ratings.assert_awaited_once_with("breaking-bad")

    @pytest.mark.asyncio
    async def test_tv_alias_is_accepted(self, service: AggregationService) -> None:
        result = await service.aggregate(1396, "tv")
        assert result.media_type is MediaType.SERIES

    @pytest.mark.asyncio
    async def test_no_episodes_without_trakt_id(
        self, service: AggregationService, mock_catalog: AsyncMock, mock_social: AsyncMock
    ) -> None:
        mock_social.resolve_trakt_id.return_value = None

        result = await service.aggregate(1396, MediaType.SERIES)

        assert result.episodes_by_season is None
        assert result.overall.trakt is None
        assert result.ids.trakt_id is None
        mock_catalog.get_episode_ratings.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_episodes_omitted_when_both_sides_empty(
        self, service: AggregationService, mock_catalog: AsyncMock, mock_social: AsyncMock
    ) -> None:
        mock_catalog.get_episode_ratings.return_value = []
        mock_social.get_episode_ratings.return_value = []

        result = await service.aggregate(1396, MediaType.SERIES)

        assert result.episodes_by_season is None

    @pytest.mark.asyncio
    async def test_one_episode_side_failing_keeps_the_other(
        self, service: AggregationService, mock_social: AsyncMock
    ) -> None:
        mock_social.get_episode_ratings.side_effect = RuntimeError("trakt down")

        result = await service.aggregate(1396, MediaType.SERIES)

        entries = result.episodes_by_season[1]
        assert [e.tmdb_score for e in entries] == [8.2, 8.0]
        assert all(e.trakt_score is None for e in entries)

    @pytest.mark.asyncio
    async def test_slow_branch_times_out_as_absent(
        self, mock_catalog: AsyncMock, mock_ratings: AsyncMock, mock_social: AsyncMock
    ) -> None:
        async def too_slow(*args, **kwargs):
            await asyncio.sleep(5)

        mock_ratings.get_overall_rating_by_imdb_id.side_effect = too_slow
        service = AggregationService(
            catalog=mock_catalog, ratings=mock_ratings, social=mock_social, timeout=0.05
        )

        result = await service.aggregate(1396, MediaType.SERIES)

        assert result.overall.imdb is None
        assert result.overall.tmdb.score == 8.9


class TestAggregateMovie:
    @pytest.mark.asyncio
    async def test_movie_never_has_episodes(
        self, service: AggregationService, mock_catalog: AsyncMock
    ) -> None:
        mock_catalog.get_details.return_value = MediaDetails(
            tmdb_id=27205,
            media_type=MediaType.MOVIE,
            title="Inception",
            release_date="2010-07-15",
            poster_path=None,
        )

        result = await service.aggregate(27205, MediaType.MOVIE)

        assert result.title == "Inception"
        assert result.year == 2010
        assert result.poster_url is None
        assert result.episodes_by_season is None
        mock_catalog.get_episode_ratings.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_title_fallback(
        self, service: AggregationService, mock_catalog: AsyncMock
    ) -> None:
        mock_catalog.get_details.return_value = MediaDetails(
            tmdb_id=5, media_type=MediaType.MOVIE
        )
        result = await service.aggregate(5, MediaType.MOVIE)
        assert result.title == "Unknown"
        assert result.year is None


class TestOptionalBranches:
    @pytest.mark.asyncio
    async def test_missing_imdb_id_skips_omdb(
        self, service: AggregationService, mock_catalog: AsyncMock, mock_ratings: AsyncMock
    ) -> None:
        mock_catalog.get_external_ids.return_value = ExternalIds()

        result = await service.aggregate(1396, MediaType.SERIES)

        assert result.ids.imdb_id is None
        assert result.overall.imdb is None
        mock_ratings.get_overall_rating_by_imdb_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failing_rating_branches_are_absorbed(
        self,
        service: AggregationService,
        mock_catalog: AsyncMock,
        mock_ratings: AsyncMock,
        mock_social: AsyncMock,
    ) -> None:
        mock_catalog.get_overall_rating.side_effect = RuntimeError("tmdb glitch")
        mock_ratings.get_overall_rating_by_imdb_id.side_effect = ProviderRequestError("omdb", 500)
        mock_social.get_overall_rating.return_value = None

        result = await service.aggregate(1396, MediaType.SERIES)

        assert result.overall.tmdb is None
        assert result.overall.imdb is None
        assert result.overall.trakt is None
        # l'ID Trakt reste resolu : les episodes sont recuperes
        assert result.ids.trakt_id == "breaking-bad"
        assert result.episodes_by_season is not None


class TestRequiredData:
    @pytest.mark.asyncio
    async def test_details_404_raises_not_found(
        self, service: AggregationService, mock_catalog: AsyncMock
    ) -> None:
        mock_catalog.get_details.side_effect = ProviderRequestError("tmdb", 404, "Not Found")

        with pytest.raises(MediaNotFoundError) as exc_info:
            await service.aggregate(999999999, MediaType.MOVIE)
        assert exc_info.value.code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_external_ids_404_raises_not_found(
        self, service: AggregationService, mock_catalog: AsyncMock
    ) -> None:
        mock_catalog.get_external_ids.side_effect = ProviderRequestError("tmdb", 404)
        with pytest.raises(MediaNotFoundError):
            await service.aggregate(1396, MediaType.SERIES)

    @pytest.mark.asyncio
    async def test_other_primary_failure_raises_provider_error(
        self, service: AggregationService, mock_catalog: AsyncMock, mock_ratings: AsyncMock
    ) -> None:
        mock_catalog.get_details.side_effect = ProviderRequestError("tmdb", 503)

        with pytest.raises(ProviderError) as exc_info:
            await service.aggregate(1396, MediaType.SERIES)

        assert exc_info.value.code == "AGGREGATION_ERROR"
        assert exc_info.value.message == "Failed to aggregate ratings from providers"
        mock_ratings.get_overall_rating_by_imdb_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_primary_timeout_raises_provider_error(
        self, mock_catalog: AsyncMock, mock_ratings: AsyncMock, mock_social: AsyncMock
    ) -> None:
        async def too_slow(*args, **kwargs):
            await asyncio.sleep(5)

        mock_catalog.get_details.side_effect = too_slow
        service = AggregationService(
            catalog=mock_catalog, ratings=mock_ratings, social=mock_social, timeout=0.05
        )

        with pytest.raises(ProviderError):
            await service.aggregate(1396, MediaType.SERIES)

    @pytest.mark.asyncio
    async def test_invalid_media_type_raises_value_error(self, service: AggregationService) -> None:
        with pytest.raises(ValueError):
            await service.aggregate(1396, "podcast")
