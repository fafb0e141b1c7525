"""
Couche services applicatifs (cas d'utilisation).

Les services orchestrent la logique du domaine et coordonnent les ports :
- AggregationService : agregation des notes des trois fournisseurs
- merge_episode_ratings : fusion des notes par episode TMDB et Trakt

Les services dependent des ports (interfaces) de core/, jamais des
implementations concretes de adapters/.
"""

from src.services.aggregation import AggregationService, BranchOutcome
from src.services.episode_merge import merge_episode_ratings

__all__ = [
    "AggregationService",
    "BranchOutcome",
    "merge_episode_ratings",
]
