"""
Business entities representing core domain concepts.

Exports:
- UnifiedMediaId: Cross-provider identity of a movie or series
- EpisodeRatingEntry: Per-episode ratings from TMDB and Trakt
- OverallRatings: One nullable overall rating per provider
- AggregatedRatings: Root result of a ratings aggregation
"""

from src.core.entities.media import (
    AggregatedRatings,
    EpisodeRatingEntry,
    OverallRatings,
    UnifiedMediaId,
    is_valid_imdb_id,
)

__all__ = [
    "AggregatedRatings",
    "EpisodeRatingEntry",
    "OverallRatings",
    "UnifiedMediaId",
    "is_valid_imdb_id",
]
