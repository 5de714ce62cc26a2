"""Defines the turn classes and the `Maneuver` record of turn-by-turn directions.

A maneuver reads as one sentence:

    <turn phrase> on <road name> and continue for <miles> miles.

The distance is written with three decimal places. `parse_maneuver` reads such
a sentence back; it accepts the known turn phrases only, road names made of
letters and whitespace, and unsigned decimal distances.
"""

from enum import IntEnum
from typing import NamedTuple, Optional, Tuple

ROAD_SEPARATOR = " on "
DISTANCE_SEPARATOR = " and continue for "
SUFFIX = " miles."
DECIMAL_CHARS = frozenset("0123456789.")


class Turn(IntEnum):
    "The way to enter a road"
    START = 0
    STRAIGHT = 1
    SLIGHT_LEFT = 2
    SLIGHT_RIGHT = 3
    LEFT = 4
    RIGHT = 5
    SHARP_LEFT = 6
    SHARP_RIGHT = 7

    @property
    def phrase(self) -> str:
        "Returns the phrase beginning a direction sentence"
        return PHRASES[self]

    @classmethod
    def from_phrase(cls, phrase: str) -> Optional["Turn"]:
        return TURNS_BY_PHRASE.get(phrase)


PHRASES = {
    Turn.START: "Start",
    Turn.STRAIGHT: "Go straight",
    Turn.SLIGHT_LEFT: "Slight left",
    Turn.SLIGHT_RIGHT: "Slight right",
    Turn.LEFT: "Turn left",
    Turn.RIGHT: "Turn right",
    Turn.SHARP_LEFT: "Sharp left",
    Turn.SHARP_RIGHT: "Sharp right",
}

TURNS_BY_PHRASE = {phrase: turn for (turn, phrase) in PHRASES.items()}


class Maneuver(NamedTuple):
    "One instruction of a route description"
    turn: Turn
    #: The road to follow
    road: str
    #: The distance to follow the road, in miles
    distance: float

    def __str__(self) -> str:
        return self.to_text()

    def to_text(self) -> str:
        "Returns the maneuver as sentence"
        return (
            f"{self.turn.phrase}{ROAD_SEPARATOR}{self.road}"
            f"{DISTANCE_SEPARATOR}{self.distance:.3f}{SUFFIX}"
        )

    def as_tuple(self) -> Tuple[str, str, float]:
        "Returns (turn phrase, road name, distance)"
        return (self.turn.phrase, self.road, self.distance)


def _is_road_name(text: str) -> bool:
    return all(char.isalpha() or char.isspace() for char in text)


def _parse_distance(text: str) -> Optional[float]:
    if not text or not DECIMAL_CHARS.issuperset(text):
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_maneuver(text: str) -> Optional[Maneuver]:
    """Reads a maneuver from its sentence form

    Returns:
        The maneuver, or None if `text` is not a valid direction sentence."""
    if not text.endswith(SUFFIX):
        return None
    text = text[:-len(SUFFIX)]

    phrase, separator, rest = text.partition(ROAD_SEPARATOR)
    turn = Turn.from_phrase(phrase)
    if not separator or turn is None:
        return None

    road, separator, distance_text = rest.rpartition(DISTANCE_SEPARATOR)
    if not separator or not _is_road_name(road):
        return None

    distance = _parse_distance(distance_text)
    if distance is None:
        return None
    return Maneuver(turn, road, distance)
