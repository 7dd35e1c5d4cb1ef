"""Award (nomination) selection across a party's period stats."""

from domain.nominations.base import (
    Candidate,
    Direction,
    NominationCategory,
    NominationParameters,
)
from domain.nominations.categories import CATEGORY_KEYS, build_categories, select_categories
from domain.nominations.engine import (
    build_candidates,
    compute_nominations,
    rank_candidates,
    select_winner,
)

__all__ = [
    "CATEGORY_KEYS",
    "Candidate",
    "Direction",
    "NominationCategory",
    "NominationParameters",
    "build_candidates",
    "build_categories",
    "compute_nominations",
    "rank_candidates",
    "select_categories",
    "select_winner",
]
