"""Balloon placement and composition of the final panel diagram."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from patchvision.balloon import Balloon, ProtoBalloon, check_slot
from patchvision.config import DEFAULT_LAYOUT, LayoutConfig, PanelInput
from patchvision.errors import E1003_PLACEMENT_EXHAUSTED, PatchVisionError
from patchvision.placeholder import Color
from patchvision.slot import Slot, occupied_slots
from patchvision.template import Template
from patchvision.theme import Theme, theme_from_name

logger = logging.getLogger(__name__)

StyleGroup = Callable[[str], Color]


@dataclass
class LayoutResult:
    rows: list[list[Balloon]] = field(default_factory=list)
    failures: list[PatchVisionError] = field(default_factory=list)

    @property
    def balloons(self) -> list[Balloon]:
        """Placed balloons in slot order."""
        placed = [balloon for row in self.rows for balloon in row]
        return sorted(placed, key=lambda balloon: balloon.proto.slot)

    @property
    def ok(self) -> bool:
        return not self.failures

    def canvas(self) -> Template:
        return Template.overlay_all(balloon.pre_render() for balloon in self.balloons)


def _shift_into_row(proto: ProtoBalloon, row: int, stack: list[Balloon]) -> Balloon | None:
    # Rows fill left to right in slot order, so only the last balloon can collide.
    previous = stack[-1]
    for shift in range(proto.max_shift, -1, -1):
        balloon = Balloon(proto, row, shift)
        if not previous.overlaps(balloon) and balloon.end <= proto.layout.canvas_width:
            return balloon
    return None


def place_balloon(
    rows: list[list[Balloon]],
    index: int,
    text: str,
    color: Color,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> Balloon:
    """Place one balloon into the first row that has room for it.

    ``rows`` is updated in place. Raises ``PatchVisionError`` when the slot
    is out of range or no row within ``layout.max_rows`` can take it.
    """
    proto = ProtoBalloon(color, text, index, layout)
    for row in range(layout.max_rows):
        if row >= len(rows):
            balloon = Balloon(proto, row, proto.max_shift)
            rows.append([balloon])
            return balloon
        balloon = _shift_into_row(proto, row, rows[row])
        if balloon is not None:
            rows[row].append(balloon)
            return balloon
    raise PatchVisionError(
        code=E1003_PLACEMENT_EXHAUSTED,
        message=(
            f"No room for balloon {text!r} at slot {index:02d} "
            f"within {layout.max_rows} rows."
        ),
        hint="Shorten the label, free neighbouring slots, or raise layout.max_rows.",
        slot=index,
    )


def place_balloons(
    slots: Sequence[Slot],
    style_group: StyleGroup,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> LayoutResult:
    result = LayoutResult()
    for index, slot in occupied_slots(list(slots)):
        try:
            # Rejected slots must not take a palette entry.
            check_slot(index, layout)
            balloon = place_balloon(
                result.rows, index, slot.text, style_group(slot.group), layout
            )
        except PatchVisionError as exc:
            logger.warning("Slot %02d not placed: %s", index, exc.message)
            result.failures.append(exc)
            continue
        logger.debug(
            "Slot %02d placed at row %d shift %d (columns %d-%d)",
            index,
            balloon.row,
            balloon.shift,
            balloon.start,
            balloon.end,
        )
    return result


class Panel:
    def __init__(
        self,
        slots: Sequence[Slot],
        theme: Theme | None = None,
        layout: LayoutConfig = DEFAULT_LAYOUT,
    ) -> None:
        self.slots = list(slots)
        self.theme = theme if theme is not None else theme_from_name("box")
        self.layout = layout

    @classmethod
    def from_input(cls, panel_input: PanelInput, use_color: bool = True) -> Panel:
        return cls(
            panel_input.slots,
            theme_from_name(panel_input.theme, use_color=use_color),
            panel_input.layout,
        )

    def layout_balloons(self) -> LayoutResult:
        return place_balloons(self.slots, self.theme.style_group, self.layout)

    def layout_canvas(self) -> tuple[Template, list[PatchVisionError]]:
        result = self.layout_balloons()
        return result.canvas(), result.failures

    def render(self) -> tuple[str, list[PatchVisionError]]:
        canvas, failures = self.layout_canvas()
        diagram = "\n".join(
            [canvas.render(self.theme), self.theme.render_panel(self.slots, self.layout)]
        )
        return diagram, failures
