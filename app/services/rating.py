"""
Room rating - community mean when votes exist, completeness heuristic otherwise.

Pure functions of stored values; no I/O. Arithmetic is exact (Fraction) and
rounding is half-up to 2 places, so 2.875 becomes 2.88.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from collections.abc import Iterable
from typing import Literal, Protocol

IMAGE_WEIGHT = Fraction(40, 100)
SCORE_WEIGHT = Fraction(35, 100)
NOTES_WEIGHT = Fraction(25, 100)
MAX_RATING = Fraction(5)
MIN_HEURISTIC = Fraction(1, 2)


class TrophyLike(Protocol):
    image_url: str | None
    score: str | None
    notes: str | None


@dataclass(frozen=True)
class CommunityRating:
    value: float
    count: int
    source: Literal["community"] = "community"


@dataclass(frozen=True)
class HeuristicRating:
    value: float
    source: Literal["auto"] = "auto"


@dataclass(frozen=True)
class NoRating:
    value: None = None
    source: None = None


RoomRatingResult = CommunityRating | HeuristicRating | NoRating


def round2(value: Fraction | float) -> float:
    """Round half-up to 2 decimal places."""
    if isinstance(value, Fraction):
        quantized = Decimal(value.numerator) / Decimal(value.denominator)
    else:
        quantized = Decimal(repr(value))
    return float(quantized.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def has_text(value: str | None) -> bool:
    return bool(value and value.strip())


def completeness_score(trophies: Iterable[TrophyLike]) -> float | None:
    """
    5 x (0.40 x share with image + 0.35 x share with score + 0.25 x share with notes),
    clamped to [0.5, 5.0]. None for an empty room.
    """
    trophies = list(trophies)
    total = len(trophies)
    if total == 0:
        return None
    with_image = sum(1 for t in trophies if t.image_url)
    with_score = sum(1 for t in trophies if has_text(t.score))
    with_notes = sum(1 for t in trophies if has_text(t.notes))
    raw = MAX_RATING * (
        IMAGE_WEIGHT * Fraction(with_image, total)
        + SCORE_WEIGHT * Fraction(with_score, total)
        + NOTES_WEIGHT * Fraction(with_notes, total)
    )
    return round2(min(MAX_RATING, max(MIN_HEURISTIC, raw)))


def community_average(avg_score: float | None, count: int) -> float:
    """Mean of community votes as exposed on listings: 0 when nobody voted."""
    if not count or avg_score is None:
        return 0.0
    return round2(avg_score)


def room_rating(avg_score: float | None, count: int, trophies: Iterable[TrophyLike]) -> RoomRatingResult:
    """Community mean if anyone voted, else the completeness heuristic, else no rating."""
    if count > 0 and avg_score is not None:
        return CommunityRating(value=round2(avg_score), count=count)
    heuristic = completeness_score(trophies)
    if heuristic is not None:
        return HeuristicRating(value=heuristic)
    return NoRating()
