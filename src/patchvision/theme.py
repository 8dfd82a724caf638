"""Glyph themes, group colors and the panel border art."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import typer

from patchvision.config import DEFAULT_LAYOUT, LayoutConfig
from patchvision.errors import E1105_THEME_UNKNOWN, PatchVisionError
from patchvision.placeholder import Color, Kind, Placeholder
from patchvision.slot import Free, Slot

PALETTE: tuple[Color, ...] = (
    Color(255, 0, 0),
    Color(255, 128, 0),
    Color(255, 255, 0),
    Color(0, 255, 0),
    Color(64, 128, 255),
    Color(255, 0, 255),
    Color(0, 255, 255),
    Color(255, 255, 255),
)
FALLBACK_COLOR = Color(192, 192, 192)

# Width of the gap drawn between two neighbouring slot blocks.
SEPARATOR_WIDTH = 3
# Column of the socket's left half inside a slot block.
SOCKET_COLUMN = 2

_BOX_GLYPHS: dict[Kind, str] = {
    Kind.NONE: " ",
    Kind.PADDING: " ",
    Kind.ARROW_LEFT: "│",
    Kind.ARROW_RIGHT: "│",
    Kind.NORTH: "─",
    Kind.EAST: "│",
    Kind.SOUTH: "─",
    Kind.WEST: "│",
    Kind.NORTH_EAST: "┐",
    Kind.SOUTH_EAST: "┘",
    Kind.SOUTH_WEST: "└",
    Kind.NORTH_WEST: "┌",
    Kind.TRANSITION_LEFT: "┐",
    Kind.TRANSITION_RIGHT: "┌",
    Kind.TRANSITION_LEFT_EDGE: "│",
    Kind.TRANSITION_RIGHT_EDGE: "│",
    Kind.ARROW_OVERLAY_NORTH_LEFT: "┴",
    Kind.ARROW_OVERLAY_NORTH_RIGHT: "┴",
    Kind.ARROW_OVERLAY_SOUTH_LEFT: "┬",
    Kind.ARROW_OVERLAY_SOUTH_RIGHT: "┬",
}


@dataclass(frozen=True)
class FrameChars:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    socket_top_left: str
    socket_top_right: str
    socket_bottom_left: str
    socket_bottom_right: str


def append_multiline(left: str, right: str) -> str:
    """Join two blocks of text side by side, line by line."""
    return "\n".join(a + b for a, b in zip(left.splitlines(), right.splitlines()))


class Theme:
    name = "box"
    glyphs: dict[Kind, str] = _BOX_GLYPHS
    frame = FrameChars(
        top_left="┌",
        top_right="┐",
        bottom_left="└",
        bottom_right="┘",
        horizontal="─",
        vertical="│",
        socket_top_left="┤",
        socket_top_right="├",
        socket_bottom_left="└",
        socket_bottom_right="┘",
    )

    def __init__(self, use_color: bool = True) -> None:
        self.use_color = use_color
        self._groups: dict[str, Color] = {}

    def render(self, placeholder: Placeholder) -> str:
        if placeholder.kind is Kind.TEXT:
            if not self.use_color or placeholder.color is None:
                return placeholder.char
            return typer.style(placeholder.char, fg=placeholder.color.as_rgb())
        return self.glyphs[placeholder.kind]

    def style_group(self, group: str) -> Color:
        """Color of a group, assigned from the palette in first-seen order."""
        color = self._groups.get(group)
        if color is None:
            index = len(self._groups)
            color = PALETTE[index] if index < len(PALETTE) else FALLBACK_COLOR
            self._groups[group] = color
        return color

    def render_left(self, layout: LayoutConfig) -> str:
        frame = self.frame
        inner = layout.offset - SOCKET_COLUMN - 1
        return "\n".join(
            [
                frame.top_left + frame.horizontal * inner,
                frame.vertical + " " * inner,
                frame.vertical + " " * inner,
                frame.bottom_left + frame.horizontal * inner,
            ]
        )

    def render_right(self, layout: LayoutConfig) -> str:
        frame = self.frame
        return "\n".join(
            [
                frame.horizontal + frame.top_right,
                " " + frame.vertical,
                " " + frame.vertical,
                frame.horizontal + frame.bottom_right,
            ]
        )

    def render_separator(self, layout: LayoutConfig) -> str:
        frame = self.frame
        return "\n".join(
            [
                frame.horizontal * SEPARATOR_WIDTH,
                " " * SEPARATOR_WIDTH,
                " " * SEPARATOR_WIDTH,
                frame.horizontal * SEPARATOR_WIDTH,
            ]
        )

    def render_slot(self, slot: Slot, index: int, layout: LayoutConfig = DEFAULT_LAYOUT) -> str:
        frame = self.frame
        block = layout.pitch - SEPARATOR_WIDTH
        tail = block - SOCKET_COLUMN - 2
        if isinstance(slot, Free):
            top = frame.horizontal * block
            socket = " " * block
        else:
            top = (
                frame.horizontal * SOCKET_COLUMN
                + frame.socket_top_left
                + frame.socket_top_right
                + frame.horizontal * tail
            )
            socket = (
                " " * SOCKET_COLUMN
                + frame.socket_bottom_left
                + frame.socket_bottom_right
                + " " * tail
            )
        label = f"{index:02d}".center(block)
        lines = [top, socket, label, frame.horizontal * block]
        slot_art = "\n".join(lines)
        if index == 0:
            return slot_art
        return append_multiline(self.render_separator(layout), slot_art)

    def render_panel(self, slots: Sequence[Slot], layout: LayoutConfig = DEFAULT_LAYOUT) -> str:
        art = self.render_left(layout)
        for index, slot in enumerate(slots):
            art = append_multiline(art, self.render_slot(slot, index, layout))
        return append_multiline(art, self.render_right(layout))


class BoxTheme(Theme):
    pass


class RoundedTheme(Theme):
    name = "rounded"
    glyphs = {
        **_BOX_GLYPHS,
        Kind.NORTH_EAST: "╮",
        Kind.SOUTH_EAST: "╯",
        Kind.SOUTH_WEST: "╰",
        Kind.NORTH_WEST: "╭",
        Kind.TRANSITION_LEFT: "╮",
        Kind.TRANSITION_RIGHT: "╭",
    }
    frame = FrameChars(
        top_left="╭",
        top_right="╮",
        bottom_left="╰",
        bottom_right="╯",
        horizontal="─",
        vertical="│",
        socket_top_left="┤",
        socket_top_right="├",
        socket_bottom_left="╰",
        socket_bottom_right="╯",
    )


class AsciiTheme(Theme):
    name = "ascii"
    glyphs = {
        Kind.NONE: " ",
        Kind.PADDING: " ",
        Kind.ARROW_LEFT: "|",
        Kind.ARROW_RIGHT: "|",
        Kind.NORTH: "-",
        Kind.EAST: "|",
        Kind.SOUTH: "-",
        Kind.WEST: "|",
        Kind.NORTH_EAST: "+",
        Kind.SOUTH_EAST: "+",
        Kind.SOUTH_WEST: "+",
        Kind.NORTH_WEST: "+",
        Kind.TRANSITION_LEFT: "+",
        Kind.TRANSITION_RIGHT: "+",
        Kind.TRANSITION_LEFT_EDGE: "|",
        Kind.TRANSITION_RIGHT_EDGE: "|",
        Kind.ARROW_OVERLAY_NORTH_LEFT: "+",
        Kind.ARROW_OVERLAY_NORTH_RIGHT: "+",
        Kind.ARROW_OVERLAY_SOUTH_LEFT: "+",
        Kind.ARROW_OVERLAY_SOUTH_RIGHT: "+",
    }
    frame = FrameChars(
        top_left="+",
        top_right="+",
        bottom_left="+",
        bottom_right="+",
        horizontal="-",
        vertical="|",
        socket_top_left="|",
        socket_top_right="|",
        socket_bottom_left="+",
        socket_bottom_right="+",
    )


THEMES: dict[str, type[Theme]] = {
    "ascii": AsciiTheme,
    "box": BoxTheme,
    "rounded": RoundedTheme,
}


def theme_from_name(name: str, use_color: bool = True) -> Theme:
    theme_cls = THEMES.get(name.strip().lower())
    if theme_cls is None:
        raise PatchVisionError(
            code=E1105_THEME_UNKNOWN,
            message=f"Unknown theme '{name}'.",
            hint=f"Use one of: {', '.join(cls.__name__[:-5] for cls in THEMES.values())}.",
        )
    return theme_cls(use_color=use_color)
