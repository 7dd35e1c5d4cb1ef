"""Period stats and nomination domain modules."""

from domain.common import MatchRecord, Nomination, PlayerStats, TimeWindow
from domain.protocol import PeriodTag

__all__ = ["MatchRecord", "Nomination", "PeriodTag", "PlayerStats", "TimeWindow"]
