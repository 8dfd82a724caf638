from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from patchvision.errors import (
    E1100_INPUT_MISSING,
    E1101_INPUT_INVALID,
    E1102_INPUT_TYPE,
    E1103_SLOTS_MISSING,
    E1106_LAYOUT_INVALID,
    PatchVisionError,
)
from patchvision.slot import Slot, parse_slots

logger = logging.getLogger(__name__)

DEFAULT_THEME = "Box"


# Slot blocks in the border art need room for a two-column socket.
_MIN_PITCH = 7
_MIN_OFFSET = 3


@dataclass(frozen=True)
class LayoutConfig:
    pitch: int = 9
    offset: int = 16
    canvas_width: int = 240
    max_slot_index: int = 23
    max_rows: int = 6
    quantum: int = 3

    def __post_init__(self) -> None:
        if self.pitch < _MIN_PITCH or self.offset < _MIN_OFFSET:
            raise PatchVisionError(
                code=E1106_LAYOUT_INVALID,
                message=(
                    f"layout.pitch must be at least {_MIN_PITCH} and layout.offset at least "
                    f"{_MIN_OFFSET} (got pitch={self.pitch}, offset={self.offset})."
                ),
                hint="Widen the slot pitch or offset so the panel border can host the sockets.",
            )
        # A slot-0 balloon pulled one pitch left starts at offset - pitch - 1.
        if self.offset <= self.pitch:
            raise PatchVisionError(
                code=E1106_LAYOUT_INVALID,
                message=(
                    "layout.offset must be greater than layout.pitch "
                    f"(got pitch={self.pitch}, offset={self.offset})."
                ),
                hint="Raise layout.offset so balloons over the first slot stay on the canvas.",
            )

    @property
    def slot_count(self) -> int:
        return self.max_slot_index + 1


DEFAULT_LAYOUT = LayoutConfig()


@dataclass(frozen=True)
class PanelInput:
    slots: list[Slot]
    theme: str = DEFAULT_THEME
    layout: LayoutConfig = DEFAULT_LAYOUT


class _InputLoader(yaml.SafeLoader):
    """Safe loader that also understands ``!Occupied`` and ``!Free`` slot tags."""


def _construct_occupied(loader: yaml.SafeLoader, node: yaml.Node) -> dict[str, Any]:
    if not isinstance(node, yaml.MappingNode):
        raise yaml.constructor.ConstructorError(
            None, None, "!Occupied expects a mapping with text and group", node.start_mark
        )
    return {"Occupied": loader.construct_mapping(node, deep=True)}


def _construct_free(loader: yaml.SafeLoader, node: yaml.Node) -> str:
    return "Free"


_InputLoader.add_constructor("!Occupied", _construct_occupied)
_InputLoader.add_constructor("!Free", _construct_free)


def _load_yaml(text: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.load(text, Loader=_InputLoader)
    except yaml.YAMLError as exc:
        raise PatchVisionError(
            code=E1101_INPUT_INVALID,
            message=f"Failed to parse input YAML {source}: {exc}",
            hint="Check the YAML syntax of the panel description.",
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PatchVisionError(
            code=E1102_INPUT_TYPE,
            message=f"Input must contain a mapping at the top level: {source}",
            hint="Use a mapping with 'slots' and optionally 'theme' and 'layout'.",
        )
    return data


def load_layout(overrides: Any, base: LayoutConfig = DEFAULT_LAYOUT) -> LayoutConfig:
    if overrides is None:
        return base
    if not isinstance(overrides, dict):
        raise PatchVisionError(
            code=E1106_LAYOUT_INVALID,
            message="layout must be a mapping of integer settings.",
            hint="Provide layout as a mapping, e.g. layout: {max_rows: 4}.",
        )
    known = {item.name for item in fields(LayoutConfig)}
    unknown = sorted(str(key) for key in overrides if key not in known)
    if unknown:
        raise PatchVisionError(
            code=E1106_LAYOUT_INVALID,
            message=f"Unknown layout settings: {', '.join(unknown)}.",
            hint=f"Supported settings: {', '.join(sorted(known))}.",
        )
    values: dict[str, int] = {}
    for key, raw in overrides.items():
        if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
            raise PatchVisionError(
                code=E1106_LAYOUT_INVALID,
                message=f"layout.{key} must be a positive integer, got {raw!r}.",
                hint="Use positive whole numbers for layout settings.",
            )
        values[key] = raw
    return replace(base, **values)


def parse_input(data: dict[str, Any]) -> PanelInput:
    slots = data.get("slots")
    if not isinstance(slots, list):
        raise PatchVisionError(
            code=E1103_SLOTS_MISSING,
            message="Input is missing a 'slots' list.",
            hint="Add a 'slots' sequence with one entry per panel position.",
        )
    theme = data.get("theme") or DEFAULT_THEME
    return PanelInput(
        slots=parse_slots(slots),
        theme=str(theme),
        layout=load_layout(data.get("layout")),
    )


def loads_input(text: str, source: str = "<string>") -> PanelInput:
    return parse_input(_load_yaml(text, source))


def load_input(path: Path) -> PanelInput:
    if not path.exists():
        raise PatchVisionError(
            code=E1100_INPUT_MISSING,
            message=f"Input file not found: {path}",
            hint="Pass the path of an existing panel description YAML.",
        )
    panel_input = loads_input(path.read_text(encoding="utf-8"), str(path))
    logger.debug(
        "Loaded %d slots from %s (theme %s)", len(panel_input.slots), path, panel_input.theme
    )
    return panel_input
