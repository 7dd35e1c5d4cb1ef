"""Ranked-candidate, capped-assignment nomination engine."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence

from domain.common import Nomination, PlayerStats
from domain.nominations.base import (
    Candidate,
    Direction,
    NominationCategory,
    NominationParameters,
    SortValue,
)
from domain.nominations.categories import select_categories
from domain.stats import group_heroes


def _as_tuple(value: SortValue) -> tuple[float, ...]:
    if isinstance(value, tuple):
        return tuple(float(item) for item in value)
    return (float(value),)


def _name_key(candidate: Candidate) -> tuple[str, str, int]:
    name = candidate.stats.display_name
    return (name.casefold(), name, candidate.stats.player_id)


def rank_candidates(
    category: NominationCategory,
    candidates: Sequence[Candidate],
) -> list[Candidate]:
    """Eligible candidates best-first; ties go to the alphabetically first name."""
    eligible = [candidate for candidate in candidates if category.is_eligible(candidate)]

    def sort_key(candidate: Candidate) -> tuple[tuple[float, ...], tuple[str, str, int]]:
        metric = _as_tuple(category.metric(candidate))
        if category.direction == Direction.DESCENDING:
            metric = tuple(-item for item in metric)
        return metric, _name_key(candidate)

    return sorted(eligible, key=sort_key)


def select_winner(
    category: NominationCategory,
    candidates: Sequence[Candidate],
    award_counts: Mapping[int, int],
    max_awards: int,
) -> Candidate | None:
    """First ranked candidate still below the award cap, if any."""
    for candidate in rank_candidates(category, candidates):
        if award_counts.get(candidate.stats.player_id, 0) < max_awards:
            return candidate
    return None


def build_candidates(
    active_players: Sequence[PlayerStats],
    hero_names_by_player: Mapping[int, Sequence[str]],
) -> list[Candidate]:
    return [
        Candidate(
            stats=stats,
            heroes=tuple(group_heroes(stats.heroes, hero_names_by_player.get(stats.player_id, ()))),
        )
        for stats in active_players
    ]


def _check_active_players(active_players: Sequence[PlayerStats]) -> None:
    inactive = [stats.player_id for stats in active_players if stats.total_matches <= 0]
    if inactive:
        raise ValueError(f"Nominations require active players; got inactive player_ids={inactive}")

    player_ids = [stats.player_id for stats in active_players]
    if len(player_ids) != len(set(player_ids)):
        raise ValueError(f"Duplicate player_ids passed to nominations: {player_ids}")


def compute_nominations(
    active_players: Sequence[PlayerStats],
    hero_names_by_player: Mapping[int, Sequence[str]],
    *,
    params: NominationParameters | None = None,
    categories: Sequence[NominationCategory] | None = None,
) -> list[Nomination]:
    """Assign each category to at most one player, capping awards per player.

    ``hero_names_by_player`` maps a player id to display names aligned with that
    player's ``heroes``. Categories without an eligible, uncapped candidate are
    left out of the result.
    """
    params = params or NominationParameters()
    if params.max_awards_per_player <= 0:
        raise ValueError("max_awards_per_player must be greater than 0")
    if params.min_active_players < 2:
        raise ValueError("min_active_players must be at least 2")
    _check_active_players(active_players)

    if len(active_players) < params.min_active_players:
        return []

    roster = select_categories(params) if categories is None else categories
    candidates = build_candidates(active_players, hero_names_by_player)
    award_counts: Counter[int] = Counter()
    nominations: list[Nomination] = []

    for category in roster:
        winner = select_winner(category, candidates, award_counts, params.max_awards_per_player)
        if winner is None:
            continue

        award_counts[winner.stats.player_id] += 1
        nominations.append(
            Nomination(
                key=category.key,
                title=category.title,
                emoji=category.emoji,
                player=winner.stats,
                value=category.format_value(winner),
                hero_name=category.hero_name(winner),
            )
        )

    return nominations


__all__ = [
    "build_candidates",
    "compute_nominations",
    "rank_candidates",
    "select_winner",
]
