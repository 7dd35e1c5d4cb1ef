"""Database repository helpers."""

from repositories.heroes import HeroTableNameResolver
from repositories.matches import (
    TrackedPlayer,
    ensure_schema,
    fetch_party_matches,
    fetch_player_matches,
    fetch_tracked_players,
)

__all__ = [
    "HeroTableNameResolver",
    "TrackedPlayer",
    "ensure_schema",
    "fetch_party_matches",
    "fetch_player_matches",
    "fetch_tracked_players",
]
