"""
BDD step definitions for the room rating feature (pytest-bdd).
"""

from types import SimpleNamespace

import pytest
from pytest_bdd import given, parsers, scenarios, then

from app.services.rating import room_rating

scenarios("../features/room_rating.feature")


@pytest.fixture
def room():
    return {"trophies": [], "votes": []}


@given(parsers.parse('a room with a trophy with an image and the score "{score}"'))
def room_with_scored_trophy(room, score):
    room["trophies"].append(SimpleNamespace(image_url="/img.jpg", score=score, notes=None))


@given("a trophy with an image and no score")
def trophy_without_score(room):
    room["trophies"].append(SimpleNamespace(image_url="/img.jpg", score=None, notes=None))


@given("an empty room")
def empty_room(room):
    room["trophies"].clear()


@given("no community ratings")
def no_votes(room):
    room["votes"].clear()


@given(parsers.parse("community ratings of {first:d} and {second:d}"))
def votes(room, first, second):
    room["votes"].extend([first, second])


def _rate(room):
    votes = room["votes"]
    avg = sum(votes) / len(votes) if votes else None
    return room_rating(avg, len(votes), room["trophies"])


@then(parsers.parse('the room rating is {value:f} from "{source}"'))
def rating_is(room, value, source):
    result = _rate(room)
    assert result.value == value
    assert result.source == source


@then("the room has no rating")
def no_rating(room):
    result = _rate(room)
    assert result.value is None
    assert result.source is None
