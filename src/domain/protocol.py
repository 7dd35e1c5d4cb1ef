"""Shared protocols and enums for period stats."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Protocol, runtime_checkable

UNKNOWN_HERO_NAME = "Unknown"


class PeriodTag(str, Enum):
    """Reporting period requested by the consumer."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    WEEK = "week"
    MONTH = "month"


@runtime_checkable
class HeroNameResolver(Protocol):
    """Resolve hero ids to display names, same length and order as the input."""

    def resolve(self, hero_ids: Sequence[int]) -> list[str]: ...


class StaticHeroNameResolver:
    """Resolver over an in-memory ``hero_id -> name`` mapping."""

    def __init__(self, names: Mapping[int, str]) -> None:
        self._names = dict(names)

    def resolve(self, hero_ids: Sequence[int]) -> list[str]:
        return [self._names.get(hero_id, UNKNOWN_HERO_NAME) for hero_id in hero_ids]


__all__ = [
    "HeroNameResolver",
    "PeriodTag",
    "StaticHeroNameResolver",
    "UNKNOWN_HERO_NAME",
]
