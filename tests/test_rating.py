"""
Room rating unit tests - pure aggregation logic, no database.
"""

from types import SimpleNamespace

import pytest

from app.services.rating import (
    CommunityRating,
    HeuristicRating,
    NoRating,
    community_average,
    completeness_score,
    room_rating,
    round2,
)


def trophy(image_url=None, score=None, notes=None):
    return SimpleNamespace(image_url=image_url, score=score, notes=notes)


def test_completeness_example():
    trophies = [trophy(image_url="/a.jpg", score="165 B&C"), trophy(image_url="/b.jpg", score="")]
    assert completeness_score(trophies) == 2.88


def test_completeness_full_room_caps_at_five():
    trophies = [trophy("/a.jpg", "150", "notes")] * 3
    assert completeness_score(trophies) == 5.0


def test_completeness_bare_room_floors_at_half():
    assert completeness_score([trophy(), trophy(score="  ")]) == 0.5


def test_completeness_empty_room():
    assert completeness_score([]) is None


@pytest.mark.parametrize(
    "value,expected",
    [(2.875, 2.88), (3.3333333333333335, 3.33), (4.005, 4.01), (4.0, 4.0)],
)
def test_round2_half_up(value, expected):
    assert round2(value) == expected


def test_room_rating_prefers_community_votes():
    result = room_rating(4.666666666666667, 3, [trophy()])
    assert result == CommunityRating(value=4.67, count=3)
    assert result.source == "community"


def test_room_rating_falls_back_to_heuristic():
    result = room_rating(None, 0, [trophy("/a.jpg", "150", "notes")])
    assert isinstance(result, HeuristicRating)
    assert result.value == 5.0
    assert result.source == "auto"


def test_room_rating_none():
    result = room_rating(None, 0, [])
    assert result == NoRating()
    assert result.value is None and result.source is None


def test_community_average_without_votes_is_zero():
    assert community_average(None, 0) == 0.0
    assert community_average(3.5, 2) == 3.5
