"""Award roster.

Categories are evaluated in roster order, which matters because each player can
hold only a limited number of awards. Every category documents its direction
and eligibility gate next to its definition.
"""

from __future__ import annotations

from domain.nominations.base import (
    Candidate,
    Direction,
    NominationCategory,
    NominationParameters,
)
from domain.stats import round_half_up


def _fmt(value: float) -> str:
    return f"{round_half_up(value, 1):g}"


def _minutes(seconds: int) -> str:
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def _hours(seconds: int) -> str:
    hours, remainder = divmod(int(seconds), 3600)
    return f"{hours}h {remainder // 60}m"


def _main_hero_name(candidate: Candidate) -> str | None:
    hero = candidate.main_hero
    return None if hero is None else hero.name


def _main_hero_record(candidate: Candidate) -> str:
    hero = candidate.main_hero
    if hero is None:
        return "0W/0L"
    return f"{hero.wins}W/{hero.losses}L"


def _participation(candidate: Candidate) -> float:
    stats = candidate.stats
    return candidate.per_game(stats.total_kills + stats.total_assists)


def _long_match_win_rate(candidate: Candidate) -> float:
    stats = candidate.stats
    if stats.long_match_count == 0:
        return 0.0
    return stats.long_match_wins / stats.long_match_count


def build_categories(params: NominationParameters) -> tuple[NominationCategory, ...]:
    """Full roster in evaluation order, with thresholds taken from ``params``."""

    def has_min_matches(candidate: Candidate) -> bool:
        return candidate.stats.total_matches >= params.min_matches

    def is_bot(candidate: Candidate) -> bool:
        return round_half_up(_participation(candidate), 1) < params.participation_floor

    def is_lucky(candidate: Candidate) -> bool:
        stats = candidate.stats
        return (
            stats.win_rate_percent >= params.lucky_min_win_rate
            and stats.avg_kda is not None
            and stats.avg_kda < params.lucky_max_kda
        )

    def is_clown(candidate: Candidate) -> bool:
        hero = candidate.main_hero
        return (
            hero is not None
            and candidate.main_hero_share >= params.clown_min_hero_share
            and hero.win_rate < params.clown_max_hero_win_rate
        )

    def is_specialist(candidate: Candidate) -> bool:
        hero = candidate.main_hero
        return (
            hero is not None
            and hero.total >= params.specialist_min_hero_games
            and hero.win_rate >= params.specialist_min_hero_win_rate
        )

    return (
        NominationCategory(
            key="loser",
            title="Loser",
            emoji="💀",
            metric=lambda c: c.stats.win_rate_percent,
            direction=Direction.ASCENDING,
            format_value=lambda c: f"{c.stats.win_rate_percent}% WR",
        ),
        NominationCategory(
            key="feeder",
            title="Feeder",
            emoji="⚰️",
            metric=lambda c: c.per_game(c.stats.total_deaths),
            direction=Direction.DESCENDING,
            format_value=lambda c: f"{_fmt(c.per_game(c.stats.total_deaths))} deaths/game",
        ),
        NominationCategory(
            key="carry",
            title="Carry",
            emoji="💪",
            metric=lambda c: c.stats.avg_kda or 0.0,
            direction=Direction.DESCENDING,
            format_value=lambda c: f"KDA {c.stats.avg_kda}",
            is_eligible=lambda c: c.stats.avg_kda is not None,
        ),
        NominationCategory(
            key="support",
            title="Support Soul",
            emoji="🤝",
            metric=lambda c: c.stats.total_assists / c.stats.total_kills,
            direction=Direction.DESCENDING,
            format_value=lambda c: f"A/K: {_fmt(c.stats.total_assists / c.stats.total_kills)}",
            is_eligible=lambda c: c.stats.total_kills > 0,
        ),
        NominationCategory(
            key="bot",
            title="Bot",
            emoji="🤖",
            metric=_participation,
            direction=Direction.ASCENDING,
            format_value=lambda c: f"{_fmt(_participation(c))} K+A/game",
            is_eligible=is_bot,
        ),
        NominationCategory(
            key="grinder",
            title="Grinder",
            emoji="🎮",
            metric=lambda c: c.stats.total_matches,
            direction=Direction.DESCENDING,
            format_value=lambda c: f"{c.stats.total_matches} games",
        ),
        NominationCategory(
            key="lucky",
            title="Lucky",
            emoji="🍀",
            # Higher win rate first, then the lower KDA.
            metric=lambda c: (c.stats.win_rate_percent, -(c.stats.avg_kda or 0.0)),
            direction=Direction.DESCENDING,
            format_value=lambda c: f"{c.stats.win_rate_percent}% WR, KDA {c.stats.avg_kda}",
            is_eligible=is_lucky,
        ),
        NominationCategory(
            key="clown",
            title="Clown",
            emoji="🤡",
            metric=lambda c: (c.main_hero_share, c.main_hero.total if c.main_hero else 0),
            direction=Direction.DESCENDING,
            format_value=_main_hero_record,
            is_eligible=is_clown,
            hero_name=_main_hero_name,
        ),
        NominationCategory(
            key="marathoner",
            title="Marathoner",
            emoji="⏳",
            metric=lambda c: c.stats.total_duration,
            direction=Direction.DESCENDING,
            format_value=lambda c: _hours(c.stats.total_duration),
        ),
        NominationCategory(
            key="speedrunner",
            title="Speedrunner",
            emoji="⚡",
            metric=lambda c: c.stats.avg_duration,
            direction=Direction.ASCENDING,
            format_value=lambda c: f"avg {_minutes(c.stats.avg_duration)}",
            is_eligible=has_min_matches,
        ),
        NominationCategory(
            key="long_hauler",
            title="Long Hauler",
            emoji="🐢",
            metric=lambda c: c.stats.avg_duration,
            direction=Direction.DESCENDING,
            format_value=lambda c: f"avg {_minutes(c.stats.avg_duration)}",
            is_eligible=has_min_matches,
        ),
        NominationCategory(
            key="survivor",
            title="Survivor",
            emoji="🛡️",
            metric=lambda c: c.per_game(c.stats.total_deaths),
            direction=Direction.ASCENDING,
            format_value=lambda c: f"{_fmt(c.per_game(c.stats.total_deaths))} deaths/game",
            is_eligible=has_min_matches,
        ),
        NominationCategory(
            key="sniper",
            title="Sniper",
            emoji="🎯",
            metric=lambda c: c.stats.total_kills / max(c.stats.total_deaths, 1),
            direction=Direction.DESCENDING,
            format_value=lambda c: f"K/D {_fmt(c.stats.total_kills / max(c.stats.total_deaths, 1))}",
            is_eligible=has_min_matches,
        ),
        NominationCategory(
            key="slayer",
            title="Slayer",
            emoji="🗡️",
            metric=lambda c: c.per_game(c.stats.total_kills),
            direction=Direction.DESCENDING,
            format_value=lambda c: f"{_fmt(c.per_game(c.stats.total_kills))} kills/game",
        ),
        NominationCategory(
            key="explorer",
            title="Explorer",
            emoji="🧭",
            metric=lambda c: len(c.heroes),
            direction=Direction.DESCENDING,
            format_value=lambda c: f"{len(c.heroes)} heroes",
            is_eligible=lambda c: len(c.heroes) >= 2,
        ),
        NominationCategory(
            key="specialist",
            title="Specialist",
            emoji="🧙",
            metric=lambda c: (c.main_hero.win_rate, c.main_hero.total) if c.main_hero else (0.0, 0),
            direction=Direction.DESCENDING,
            format_value=_main_hero_record,
            is_eligible=is_specialist,
            hero_name=_main_hero_name,
        ),
        NominationCategory(
            key="endurance",
            title="Late-Game King",
            emoji="👑",
            metric=lambda c: (_long_match_win_rate(c), c.stats.long_match_count),
            direction=Direction.DESCENDING,
            format_value=lambda c: (
                f"{c.stats.long_match_wins}/{c.stats.long_match_count} long games won"
            ),
            is_eligible=lambda c: c.stats.long_match_count >= params.long_match_min_count,
        ),
        NominationCategory(
            key="night_owl",
            title="Night Owl",
            emoji="🦉",
            metric=lambda c: c.stats.night_match_count,
            direction=Direction.DESCENDING,
            format_value=lambda c: f"{c.stats.night_match_count} night games",
            is_eligible=lambda c: c.stats.night_match_count > 0,
        ),
        NominationCategory(
            key="early_bird",
            title="Early Bird",
            emoji="🐦",
            metric=lambda c: c.stats.morning_match_count,
            direction=Direction.DESCENDING,
            format_value=lambda c: f"{c.stats.morning_match_count} morning games",
            is_eligible=lambda c: c.stats.morning_match_count > 0,
        ),
    )


CATEGORY_KEYS = tuple(category.key for category in build_categories(NominationParameters()))


def select_categories(params: NominationParameters) -> tuple[NominationCategory, ...]:
    """Roster restricted to ``params.enabled`` (roster order is kept)."""
    categories = build_categories(params)
    if params.enabled is None:
        return categories

    unknown = sorted(set(params.enabled) - set(CATEGORY_KEYS))
    if unknown:
        raise ValueError(
            f"Unknown nomination categories: {unknown}. Available: {', '.join(CATEGORY_KEYS)}"
        )
    enabled = set(params.enabled)
    return tuple(category for category in categories if category.key in enabled)


__all__ = ["CATEGORY_KEYS", "build_categories", "select_categories"]
