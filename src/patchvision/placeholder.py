"""Canvas cell kinds and the rule that merges two cells drawn at one position.

A placeholder is the semantic role of a cell before a theme turns it into a
glyph. Kinds are totally ordered; when two cells collide the higher one is
drawn, except for the pointer/wall junctions and the empty/padding cases
handled by :func:`merge`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


@dataclass(frozen=True, order=True)
class Color:
    red: int
    green: int
    blue: int

    def as_rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


class Kind(str, Enum):
    NONE = "none"
    PADDING = "padding"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    NORTH_EAST = "north_east"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    NORTH_WEST = "north_west"
    TRANSITION_LEFT = "transition_left"
    TRANSITION_RIGHT = "transition_right"
    TRANSITION_LEFT_EDGE = "transition_left_edge"
    TRANSITION_RIGHT_EDGE = "transition_right_edge"
    ARROW_OVERLAY_NORTH_LEFT = "arrow_overlay_north_left"
    ARROW_OVERLAY_NORTH_RIGHT = "arrow_overlay_north_right"
    ARROW_OVERLAY_SOUTH_LEFT = "arrow_overlay_south_left"
    ARROW_OVERLAY_SOUTH_RIGHT = "arrow_overlay_south_right"
    TEXT = "text"


# Drawing precedence, lowest first. Merging depends on this exact order.
PRECEDENCE: tuple[Kind, ...] = (
    Kind.NONE,
    Kind.PADDING,
    Kind.ARROW_LEFT,
    Kind.ARROW_RIGHT,
    Kind.NORTH,
    Kind.EAST,
    Kind.SOUTH,
    Kind.WEST,
    Kind.NORTH_EAST,
    Kind.SOUTH_EAST,
    Kind.SOUTH_WEST,
    Kind.NORTH_WEST,
    Kind.TRANSITION_LEFT,
    Kind.TRANSITION_RIGHT,
    Kind.TRANSITION_LEFT_EDGE,
    Kind.TRANSITION_RIGHT_EDGE,
    Kind.ARROW_OVERLAY_NORTH_LEFT,
    Kind.ARROW_OVERLAY_NORTH_RIGHT,
    Kind.ARROW_OVERLAY_SOUTH_LEFT,
    Kind.ARROW_OVERLAY_SOUTH_RIGHT,
    Kind.TEXT,
)

RANKS: dict[Kind, int] = {kind: rank for rank, kind in enumerate(PRECEDENCE)}


@total_ordering
@dataclass(frozen=True)
class Placeholder:
    kind: Kind
    char: str = ""
    color: Color | None = None

    def __post_init__(self) -> None:
        if self.kind is Kind.TEXT:
            if len(self.char) != 1:
                raise ValueError(f"Text placeholder needs exactly one character, got {self.char!r}")
            if self.color is None:
                raise ValueError("Text placeholder needs a color")
        elif self.char or self.color is not None:
            raise ValueError(f"{self.kind.value} placeholder carries no character or color")

    @property
    def rank(self) -> int:
        return RANKS[self.kind]

    def sort_key(self) -> tuple[int, str, tuple[int, ...]]:
        color = self.color.as_rgb() if self.color is not None else ()
        return (self.rank, self.char, color)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Placeholder):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        if self.kind is Kind.TEXT:
            return f"Placeholder.text({self.char!r}, {self.color!r})"
        return f"Placeholder({self.kind.name})"

    @staticmethod
    def text(char: str, color: Color) -> Placeholder:
        return Placeholder(Kind.TEXT, char, color)


NONE = Placeholder(Kind.NONE)
PADDING = Placeholder(Kind.PADDING)
ARROW_LEFT = Placeholder(Kind.ARROW_LEFT)
ARROW_RIGHT = Placeholder(Kind.ARROW_RIGHT)
NORTH = Placeholder(Kind.NORTH)
EAST = Placeholder(Kind.EAST)
SOUTH = Placeholder(Kind.SOUTH)
WEST = Placeholder(Kind.WEST)
NORTH_EAST = Placeholder(Kind.NORTH_EAST)
SOUTH_EAST = Placeholder(Kind.SOUTH_EAST)
SOUTH_WEST = Placeholder(Kind.SOUTH_WEST)
NORTH_WEST = Placeholder(Kind.NORTH_WEST)
TRANSITION_LEFT = Placeholder(Kind.TRANSITION_LEFT)
TRANSITION_RIGHT = Placeholder(Kind.TRANSITION_RIGHT)
TRANSITION_LEFT_EDGE = Placeholder(Kind.TRANSITION_LEFT_EDGE)
TRANSITION_RIGHT_EDGE = Placeholder(Kind.TRANSITION_RIGHT_EDGE)
ARROW_OVERLAY_NORTH_LEFT = Placeholder(Kind.ARROW_OVERLAY_NORTH_LEFT)
ARROW_OVERLAY_NORTH_RIGHT = Placeholder(Kind.ARROW_OVERLAY_NORTH_RIGHT)
ARROW_OVERLAY_SOUTH_LEFT = Placeholder(Kind.ARROW_OVERLAY_SOUTH_LEFT)
ARROW_OVERLAY_SOUTH_RIGHT = Placeholder(Kind.ARROW_OVERLAY_SOUTH_RIGHT)

# Wall crossing a pointer shaft: (wall, shaft side) -> junction.
_JUNCTIONS: dict[tuple[Kind, Kind], Placeholder] = {
    (Kind.NORTH, Kind.ARROW_LEFT): ARROW_OVERLAY_NORTH_LEFT,
    (Kind.NORTH, Kind.ARROW_RIGHT): ARROW_OVERLAY_NORTH_RIGHT,
    (Kind.SOUTH, Kind.ARROW_LEFT): ARROW_OVERLAY_SOUTH_LEFT,
    (Kind.SOUTH, Kind.ARROW_RIGHT): ARROW_OVERLAY_SOUTH_RIGHT,
}


def merge(one: Placeholder, another: Placeholder) -> Placeholder:
    """Combine two cells that land on the same canvas position.

    Symmetric: the pair is sorted before any rule is applied.
    """
    front = max(one, another)
    back = min(one, another)

    junction = _JUNCTIONS.get((front.kind, back.kind))
    if junction is not None:
        return junction
    if front.kind is Kind.NONE:
        return back
    if back.kind is Kind.NONE:
        return front
    if front.kind is Kind.PADDING:
        return front
    # Blank bubble interior wins over anything drawn underneath it.
    if back.kind is Kind.PADDING:
        return back
    return front
