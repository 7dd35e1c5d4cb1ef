"""Hero-name lookup backed by the ``heroes`` table."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from domain.protocol import UNKNOWN_HERO_NAME
from repositories.matches import heroes_table


class HeroTableNameResolver:
    """Resolve hero names, loading the table once per resolver instance."""

    def __init__(self, session: Session) -> None:
        self._session = session
        self._names: dict[int, str] | None = None

    def _load(self) -> dict[int, str]:
        if self._names is None:
            rows = self._session.execute(
                select(heroes_table.c.id, heroes_table.c.localized_name)
            ).all()
            self._names = {int(hero_id): str(name) for hero_id, name in rows}
        return self._names

    def resolve(self, hero_ids: Sequence[int]) -> list[str]:
        names = self._load()
        return [names.get(hero_id, UNKNOWN_HERO_NAME) for hero_id in hero_ids]


__all__ = ["HeroTableNameResolver"]
