"""Per-player period aggregation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from domain.common import GroupedHero, HeroOutcome, MatchRecord, PlayerStats, TimeWindow
from domain.matches import filter_matches, sort_matches
from domain.periods import ClockParameters, local_from_epoch, resolve_window
from domain.protocol import UNKNOWN_HERO_NAME, PeriodTag


@dataclass(frozen=True)
class StatsParameters:
    long_match_minutes: int = 45
    night_start_hour: int = 0
    night_end_hour: int = 6
    morning_end_hour: int = 12

    @property
    def long_match_seconds(self) -> int:
        return self.long_match_minutes * 60


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves away from zero, unlike the builtin banker's rounding."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def win_rate_percent(wins: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(round_half_up((wins / total) * 100.0))


def kda_ratio(kills: int, deaths: int, assists: int) -> float:
    if deaths > 0:
        return (kills + assists) / deaths
    return float(kills + assists)


def summarize_matches(
    player_id: int,
    display_name: str,
    matches: Iterable[MatchRecord],
    window: TimeWindow,
    *,
    avg_apm: float | None = None,
    rank_tier: int | None = None,
    clock: ClockParameters | None = None,
    params: StatsParameters | None = None,
) -> PlayerStats:
    """Reduce the matches inside ``window`` into a ``PlayerStats`` aggregate."""
    clock = clock or ClockParameters()
    params = params or StatsParameters()
    period_matches = sort_matches(filter_matches(matches, window))

    wins = 0
    kills = deaths = assists = 0
    total_duration = 0
    long_match_count = long_match_wins = 0
    night_match_count = morning_match_count = 0
    heroes: list[HeroOutcome] = []

    for match in period_matches:
        won = match.is_win
        wins += int(won)
        kills += match.kills
        deaths += match.deaths
        assists += match.assists
        total_duration += match.duration
        heroes.append(HeroOutcome(hero_id=match.hero_id, is_win=won))

        if match.duration >= params.long_match_seconds:
            long_match_count += 1
            long_match_wins += int(won)

        local_hour = local_from_epoch(match.start_time, clock).hour
        if params.night_start_hour <= local_hour < params.night_end_hour:
            night_match_count += 1
        elif params.night_end_hour <= local_hour < params.morning_end_hour:
            morning_match_count += 1

    total = len(period_matches)
    avg_kda = None
    if total > 0:
        avg_kda = round_half_up(kda_ratio(kills, deaths, assists), 2)

    return PlayerStats(
        player_id=player_id,
        display_name=display_name,
        wins=wins,
        losses=total - wins,
        total_matches=total,
        win_rate_percent=win_rate_percent(wins, total),
        heroes=tuple(heroes),
        total_kills=kills,
        total_deaths=deaths,
        total_assists=assists,
        total_duration=total_duration,
        avg_duration=int(round_half_up(total_duration / total)) if total else 0,
        long_match_count=long_match_count,
        long_match_wins=long_match_wins,
        night_match_count=night_match_count,
        morning_match_count=morning_match_count,
        avg_apm=avg_apm,
        avg_kda=avg_kda,
        rank_tier=rank_tier,
    )


def aggregate_player_stats(
    player_id: int,
    display_name: str,
    matches: Iterable[MatchRecord],
    period: PeriodTag | str,
    *,
    now: datetime,
    avg_apm: float | None = None,
    rank_tier: int | None = None,
    clock: ClockParameters | None = None,
    params: StatsParameters | None = None,
) -> PlayerStats:
    """Resolve ``period`` at ``now`` and aggregate the player's matches in it."""
    window = resolve_window(period, now, clock)
    return summarize_matches(
        player_id,
        display_name,
        matches,
        window,
        avg_apm=avg_apm,
        rank_tier=rank_tier,
        clock=clock,
        params=params,
    )


def group_heroes(heroes: Sequence[HeroOutcome], hero_names: Sequence[str]) -> list[GroupedHero]:
    """Group outcomes by hero, most played first and then by name.

    ``hero_names`` is aligned index-by-index with ``heroes``.
    """
    counts: dict[int, list[int]] = {}
    names: dict[int, str] = {}
    for index, outcome in enumerate(heroes):
        name = hero_names[index] if index < len(hero_names) else UNKNOWN_HERO_NAME
        names.setdefault(outcome.hero_id, name)
        record = counts.setdefault(outcome.hero_id, [0, 0])
        record[0 if outcome.is_win else 1] += 1

    grouped = [
        GroupedHero(hero_id=hero_id, name=names[hero_id], wins=record[0], losses=record[1])
        for hero_id, record in counts.items()
    ]
    return sorted(grouped, key=lambda hero: (-hero.total, hero.name, hero.hero_id))


def best_hero(grouped_heroes: Sequence[GroupedHero]) -> GroupedHero | None:
    """Hero with the most wins, then the most games; earlier entries win ties."""
    best: GroupedHero | None = None
    for hero in grouped_heroes:
        if best is None or (hero.wins, hero.total) > (best.wins, best.total):
            best = hero
    return best


__all__ = [
    "StatsParameters",
    "aggregate_player_stats",
    "best_hero",
    "group_heroes",
    "kda_ratio",
    "round_half_up",
    "summarize_matches",
    "win_rate_percent",
]
