"""
Fixtures pytest partagees pour les tests BingeScore.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports fournisseurs (catalogue, notes IMDb, social)
- Settings de test sans fichier de log
- Resultats d'agregation de reference (serie et film)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import Settings
from src.core.entities.media import (
    AggregatedRatings,
    OverallRatings,
    UnifiedMediaId,
)
from src.core.ports.api_clients import (
    ExternalIds,
    ICatalogProvider,
    IRatingsProvider,
    ISocialProvider,
    MediaDetails,
)
from src.core.value_objects import MediaType, OverallRating, RatingSource
from tests.fixtures.factories import episode


@pytest.fixture
def mock_catalog() -> AsyncMock:
    """
    Mock de ICatalogProvider configure pour la serie Breaking Bad (1396).

    Les valeurs de retour peuvent etre surchargees dans chaque test.
    """
    mock = AsyncMock(spec=ICatalogProvider)
    mock.get_details.return_value = MediaDetails(
        tmdb_id=1396,
        media_type=MediaType.SERIES,
        name="Breaking Bad",
        overview="Walter White, diagnosed with cancer, turns to crime...",
        poster_path="/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
        first_air_date="2008-01-20",
        vote_average=8.9,
        vote_count=14000,
        number_of_seasons=5,
    )
    mock.get_external_ids.return_value = ExternalIds(imdb_id="tt0903747", tvdb_id=81189)
    mock.get_overall_rating.return_value = OverallRating(
        source=RatingSource.TMDB, score=8.9, votes=14000
    )
    mock.get_episode_ratings.return_value = [
        episode(1, 1, "Pilot", tmdb=8.2),
        episode(1, 2, "Cat's in the Bag...", tmdb=8.0),
    ]
    # poster_url est synchrone
    mock.poster_url = MagicMock(
        side_effect=lambda path: f"https://image.tmdb.org/t/p/w500{path}" if path else None
    )
    return mock


@pytest.fixture
def mock_ratings() -> AsyncMock:
    """Mock de IRatingsProvider (OMDb) renvoyant une note IMDb."""
    mock = AsyncMock(spec=IRatingsProvider)
    mock.get_overall_rating_by_imdb_id.return_value = OverallRating(
        source=RatingSource.IMDB, score=9.5, votes=2134567
    )
    return mock


@pytest.fixture
def mock_social() -> AsyncMock:
    """Mock de ISocialProvider (Trakt) resolvant le slug breaking-bad."""
    mock = AsyncMock(spec=ISocialProvider)
    mock.resolve_trakt_id.return_value = "breaking-bad"
    mock.get_overall_rating.return_value = OverallRating(
        source=RatingSource.TRAKT, score=9.3, votes=98000
    )
    mock.get_episode_ratings.return_value = [
        episode(1, 1, "Pilot", trakt=8.6),
        episode(1, 2, "Cat's in the Bag...", trakt=8.3),
    ]
    return mock


@pytest.fixture
def test_settings() -> Settings:
    """Settings de test : cles factices, pas de fichier .env."""
    return Settings(
        _env_file=None,
        tmdb_api_key="test_tmdb_key",
        omdb_api_key="test_omdb_key",
        trakt_client_id="test_trakt_id",
    )


@pytest.fixture
def series_result() -> AggregatedRatings:
    """Resultat d'agregation complet pour Breaking Bad."""
    return AggregatedRatings(
        ids=UnifiedMediaId(
            media_type=MediaType.SERIES,
            tmdb_id=1396,
            imdb_id="tt0903747",
            trakt_id="breaking-bad",
        ),
        title="Breaking Bad",
        media_type=MediaType.SERIES,
        year=2008,
        overview="Walter White, diagnosed with cancer, turns to crime...",
        poster_url="https://image.tmdb.org/t/p/w500/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
        overall=OverallRatings(
            tmdb=OverallRating(source=RatingSource.TMDB, score=8.9, votes=14000),
            imdb=OverallRating(source=RatingSource.IMDB, score=9.5, votes=2134567),
            trakt=None,
        ),
        episodes_by_season={
            1: [
                episode(1, 1, "Pilot", tmdb=8.2, trakt=8.6),
                episode(1, 2, "Cat's in the Bag...", tmdb=8.0),
            ]
        },
    )


@pytest.fixture
def movie_result() -> AggregatedRatings:
    """Resultat d'agregation d'un film sans note Trakt ni IMDb."""
    return AggregatedRatings(
        ids=UnifiedMediaId(media_type=MediaType.MOVIE, tmdb_id=27205),
        title="Inception",
        media_type=MediaType.MOVIE,
        year=2010,
        overall=OverallRatings(
            tmdb=OverallRating(source=RatingSource.TMDB, score=8.4, votes=35000),
        ),
    )
