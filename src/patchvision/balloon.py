"""Balloon geometry and self-rendering.

A balloon is a three-row text bubble pointing down at one panel slot. Its
right edge sits just past the slot's pointer column and can be pulled left
in whole pitch units (the *shift*) to make room for neighbours.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from patchvision.config import DEFAULT_LAYOUT, LayoutConfig
from patchvision.errors import (
    E1001_INVALID_SLOT,
    E1002_SHIFT_TOO_LARGE,
    PatchVisionError,
)
from patchvision.grid import Grid
from patchvision.placeholder import (
    ARROW_LEFT,
    ARROW_RIGHT,
    EAST,
    NONE,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    PADDING,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    TRANSITION_LEFT,
    TRANSITION_LEFT_EDGE,
    TRANSITION_RIGHT,
    TRANSITION_RIGHT_EDGE,
    WEST,
    Color,
    Placeholder,
)
from patchvision.rounding import round_up
from patchvision.template import Template

ROW_HEIGHT = 3


def inner_width(text: str) -> int:
    return len(text)


def width(text: str, layout: LayoutConfig = DEFAULT_LAYOUT) -> int:
    """Outer width: interior quantized to the layout quantum, plus walls and padding."""
    return round_up(inner_width(text), layout.quantum) + 4


def arrow_column(slot: int, layout: LayoutConfig = DEFAULT_LAYOUT) -> int:
    return slot * layout.pitch + layout.offset


def max_shift(text: str, slot: int, layout: LayoutConfig = DEFAULT_LAYOUT) -> int:
    return min(slot + 1, width(text, layout) // layout.pitch)


def check_slot(slot: int, layout: LayoutConfig = DEFAULT_LAYOUT) -> None:
    if not 0 <= slot <= layout.max_slot_index:
        raise PatchVisionError(
            code=E1001_INVALID_SLOT,
            message=f"{slot} is not in a valid slot (expected 0..{layout.max_slot_index}).",
            hint="Remove the extra slot or raise layout.max_slot_index.",
            slot=slot,
        )


@dataclass(frozen=True)
class ProtoBalloon:
    color: Color
    text: str
    slot: int
    layout: LayoutConfig = field(default=DEFAULT_LAYOUT, compare=False)

    def __post_init__(self) -> None:
        check_slot(self.slot, self.layout)

    @property
    def inner_width(self) -> int:
        return inner_width(self.text)

    @property
    def width(self) -> int:
        return width(self.text, self.layout)

    @property
    def padding(self) -> int:
        return self.width - self.inner_width - 2

    @property
    def left_padding(self) -> int:
        return self.padding // 2

    @property
    def right_padding(self) -> int:
        return self.padding - self.left_padding

    @property
    def arrow(self) -> int:
        return arrow_column(self.slot, self.layout)

    @property
    def max_shift(self) -> int:
        return max_shift(self.text, self.slot, self.layout)


@dataclass(frozen=True)
class Balloon:
    proto: ProtoBalloon
    row: int
    shift: int

    def __post_init__(self) -> None:
        if self.row < 0:
            raise ValueError(f"Balloon row must not be negative, got {self.row}")
        if not 0 <= self.shift <= self.proto.max_shift:
            raise PatchVisionError(
                code=E1002_SHIFT_TOO_LARGE,
                message=(
                    f"Shift {self.shift} is too large for balloon {self.proto.text!r} "
                    f"(maximum {self.proto.max_shift})."
                ),
                hint="Use a smaller shift or a longer label.",
                slot=self.proto.slot,
            )

    @classmethod
    def new(
        cls,
        color: Color,
        text: str,
        slot: int,
        row: int,
        shift: int,
        layout: LayoutConfig = DEFAULT_LAYOUT,
    ) -> Balloon:
        return cls(ProtoBalloon(color, text, slot, layout), row, shift)

    @classmethod
    def left(
        cls, color: Color, text: str, slot: int, row: int, layout: LayoutConfig = DEFAULT_LAYOUT
    ) -> Balloon:
        """Balloon pulled as far left as its width allows."""
        proto = ProtoBalloon(color, text, slot, layout)
        return cls(proto, row, proto.max_shift)

    @classmethod
    def right(
        cls, color: Color, text: str, slot: int, row: int, layout: LayoutConfig = DEFAULT_LAYOUT
    ) -> Balloon:
        return cls.new(color, text, slot, row, 0, layout)

    @property
    def layout(self) -> LayoutConfig:
        return self.proto.layout

    @property
    def x(self) -> int:
        return self.proto.arrow - self.shift * self.layout.pitch - 1

    @property
    def y(self) -> int:
        return self.row * ROW_HEIGHT

    @property
    def height(self) -> int:
        return self.y + ROW_HEIGHT

    @property
    def start(self) -> int:
        return self.x

    @property
    def end(self) -> int:
        return self.x + self.proto.width

    def overlaps(self, other: Balloon) -> bool:
        """True when the bodies share or touch a column."""
        left, right = (self, other) if self.x < other.x else (other, self)
        return left.end >= right.start

    def pre_render(self) -> Template:
        proto = self.proto
        x = self.x
        arrow = proto.arrow
        lead = [NONE] * x

        grid = Grid()
        grid.push_row(lead + [NORTH_WEST] + [NORTH] * (proto.width - 2) + [NORTH_EAST])
        grid.push_row(
            lead
            + [WEST]
            + [PADDING] * proto.left_padding
            + [Placeholder.text(char, proto.color) for char in proto.text]
            + [PADDING] * proto.right_padding
            + [EAST]
        )
        grid.push_row(lead + [SOUTH_WEST] + [SOUTH] * (proto.width - 2) + [SOUTH_EAST])
        grid.widen(arrow + 2)

        grid[2, arrow] = _notch_left(grid[2, arrow])
        grid[2, arrow + 1] = _notch_right(grid[2, arrow + 1])

        shaft = [NONE] * arrow + [ARROW_LEFT, ARROW_RIGHT]
        for _ in range(self.y):
            grid.push_row(shaft)
        return Template(grid)


def _notch_left(cell: Placeholder) -> Placeholder:
    # On a corner or past the body there is no bottom wall to turn into.
    if cell in (SOUTH_WEST, SOUTH_EAST, NONE):
        return TRANSITION_LEFT_EDGE
    return TRANSITION_LEFT


def _notch_right(cell: Placeholder) -> Placeholder:
    if cell in (SOUTH_EAST, NONE):
        return TRANSITION_RIGHT_EDGE
    return TRANSITION_RIGHT
