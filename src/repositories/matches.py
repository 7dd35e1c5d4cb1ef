"""Read helpers for the local per-player match store."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Float,
    Integer,
    MetaData,
    String,
    Table,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.common import MatchRecord, TimeWindow
from domain.report import PlayerMatches

metadata = MetaData()

tracked_players_table = Table(
    "tracked_players",
    metadata,
    Column("account_id", BigInteger, primary_key=True),
    Column("display_name", String, nullable=False),
    Column("avg_apm", Float, nullable=True),
    Column("rank_tier", Integer, nullable=True),
)

player_matches_table = Table(
    "player_matches",
    metadata,
    Column("account_id", BigInteger, primary_key=True),
    Column("match_id", BigInteger, primary_key=True),
    Column("player_slot", Integer, nullable=False),
    Column("radiant_win", Boolean, nullable=False),
    Column("start_time", BigInteger, nullable=False, index=True),
    Column("duration", Integer, nullable=False),
    Column("hero_id", Integer, nullable=False),
    Column("kills", Integer, nullable=False),
    Column("deaths", Integer, nullable=False),
    Column("assists", Integer, nullable=False),
)

heroes_table = Table(
    "heroes",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("localized_name", String, nullable=False),
)


@dataclass(frozen=True)
class TrackedPlayer:
    account_id: int
    display_name: str
    avg_apm: float | None = None
    rank_tier: int | None = None


def ensure_schema(engine: Engine) -> None:
    """Create the match store tables when missing."""
    metadata.create_all(engine, checkfirst=True)


def _optional_int(value: object) -> int | None:
    if value is None:
        return None
    return int(value)


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def fetch_tracked_players(session: Session) -> list[TrackedPlayer]:
    """Fetch tracked players ordered by account id."""
    statement = select(tracked_players_table).order_by(tracked_players_table.c.account_id)
    rows = session.execute(statement).mappings().all()
    return [
        TrackedPlayer(
            account_id=int(row["account_id"]),
            display_name=str(row["display_name"]),
            avg_apm=_optional_float(row["avg_apm"]),
            rank_tier=_optional_int(row["rank_tier"]),
        )
        for row in rows
    ]


def fetch_player_matches(
    session: Session,
    account_ids: Sequence[int],
    window: TimeWindow | None = None,
) -> dict[int, list[MatchRecord]]:
    """Fetch matches per account in chronological order, one row per match id."""
    matches_by_account: dict[int, list[MatchRecord]] = {account_id: [] for account_id in account_ids}
    if not account_ids:
        return matches_by_account

    table = player_matches_table
    conditions = [table.c.account_id.in_(list(account_ids))]
    if window is not None:
        conditions.append(table.c.start_time >= window.start)
        if window.end is not None:
            conditions.append(table.c.start_time < window.end)

    statement = (
        select(table)
        .where(*conditions)
        .order_by(table.c.account_id, table.c.start_time, table.c.match_id)
    )
    rows = session.execute(statement).mappings().all()

    seen: set[tuple[int, int]] = set()
    for row in rows:
        account_id = int(row["account_id"])
        match_id = int(row["match_id"])
        if (account_id, match_id) in seen:
            continue
        seen.add((account_id, match_id))
        matches_by_account[account_id].append(
            MatchRecord(
                match_id=match_id,
                player_slot=int(row["player_slot"]),
                radiant_win=bool(row["radiant_win"]),
                start_time=int(row["start_time"]),
                duration=int(row["duration"]),
                hero_id=int(row["hero_id"]),
                kills=int(row["kills"]),
                deaths=int(row["deaths"]),
                assists=int(row["assists"]),
            )
        )

    return matches_by_account


def fetch_party_matches(session: Session, window: TimeWindow | None = None) -> list[PlayerMatches]:
    """Tracked players paired with their stored matches, ready for a period report."""
    players = fetch_tracked_players(session)
    matches_by_account = fetch_player_matches(
        session,
        [player.account_id for player in players],
        window,
    )
    return [
        PlayerMatches(
            player_id=player.account_id,
            display_name=player.display_name,
            matches=tuple(matches_by_account[player.account_id]),
            avg_apm=player.avg_apm,
            rank_tier=player.rank_tier,
        )
        for player in players
    ]


__all__ = [
    "TrackedPlayer",
    "ensure_schema",
    "fetch_party_matches",
    "fetch_player_matches",
    "fetch_tracked_players",
    "heroes_table",
    "metadata",
    "player_matches_table",
    "tracked_players_table",
]
