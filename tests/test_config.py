from __future__ import annotations

from pathlib import Path

import pytest

from patchvision.config import DEFAULT_LAYOUT, LayoutConfig, load_input, load_layout, loads_input
from patchvision.errors import (
    E1100_INPUT_MISSING,
    E1101_INPUT_INVALID,
    E1102_INPUT_TYPE,
    E1103_SLOTS_MISSING,
    E1104_SLOT_INVALID,
    E1106_LAYOUT_INVALID,
    PatchVisionError,
)
from patchvision.panel import place_balloons
from patchvision.slot import FREE, Occupied, occupied_slots
from patchvision.theme import BoxTheme


def test_slot_shapes(tmp_path: Path) -> None:
    path = tmp_path / "panel.yaml"
    path.write_text(
        """theme: Rounded
slots:
  - Occupied: {text: Kick, group: drums}
  - Free
  - !Occupied {text: Snare, group: drums}
  - {text: 808, group: synths}
  - ~
  - !Free
  - Occupied:
      text: Hats
""",
        encoding="utf-8",
    )
    panel_input = load_input(path)

    assert panel_input.theme == "Rounded"
    assert panel_input.layout == DEFAULT_LAYOUT
    assert panel_input.slots == [
        Occupied("Kick", "drums"),
        FREE,
        Occupied("Snare", "drums"),
        Occupied("808", "synths"),
        FREE,
        FREE,
        Occupied("Hats", ""),
    ]
    assert [index for index, _ in occupied_slots(panel_input.slots)] == [0, 2, 3, 6]


def test_theme_defaults_to_box() -> None:
    assert loads_input("slots: [Free]").theme == "Box"


def test_layout_overrides() -> None:
    panel_input = loads_input("slots: []\nlayout: {max_rows: 2, canvas_width: 300}")
    assert panel_input.layout == LayoutConfig(max_rows=2, canvas_width=300)
    assert panel_input.layout.slot_count == 24


@pytest.mark.parametrize(
    "overrides",
    [
        [1, 2],
        {"rows": 3},
        {"max_rows": 0},
        {"pitch": "9"},
        {"pitch": True},
        {"pitch": 5},
        {"offset": 2},
        {"offset": 3},
        {"offset": 9},
        {"pitch": 16},
    ],
)
def test_invalid_layout_overrides(overrides: object) -> None:
    with pytest.raises(PatchVisionError) as exc_info:
        load_layout(overrides)
    assert exc_info.value.code == E1106_LAYOUT_INVALID


def test_layout_offset_must_exceed_pitch() -> None:
    with pytest.raises(PatchVisionError) as exc_info:
        LayoutConfig(pitch=12, offset=12)
    assert exc_info.value.code == E1106_LAYOUT_INVALID
    assert "greater than layout.pitch" in exc_info.value.message


def test_smallest_offset_keeps_balloons_on_canvas() -> None:
    layout = load_layout({"offset": 10})
    result = place_balloons([Occupied("abcdefgh"), Occupied("Kick")], BoxTheme().style_group, layout)

    assert result.ok
    first, second = result.balloons
    assert (first.shift, first.start) == (1, 0)
    assert all(balloon.start >= 0 for balloon in result.balloons)
    assert not first.overlaps(second)


def test_control_characters_in_text_are_rejected() -> None:
    with pytest.raises(PatchVisionError) as exc_info:
        loads_input('slots: [Free, {text: "Kick\\r"}]\n')
    assert exc_info.value.code == E1104_SLOT_INVALID
    assert exc_info.value.slot == 1


@pytest.mark.parametrize(
    "text,code",
    [
        ("slots: [Free\n", E1101_INPUT_INVALID),
        ("- Free\n- Free\n", E1102_INPUT_TYPE),
        ("theme: Box\n", E1103_SLOTS_MISSING),
        ("", E1103_SLOTS_MISSING),
        ("slots: Free\n", E1103_SLOTS_MISSING),
        ("slots: [Taken]\n", E1104_SLOT_INVALID),
        ("slots: [42]\n", E1104_SLOT_INVALID),
        ("slots: [{Occupied: {group: drums}}]\n", E1104_SLOT_INVALID),
        ("slots: [{Occupied: Kick}]\n", E1104_SLOT_INVALID),
        ("slots: [{text: Kick, colour: red}]\n", E1104_SLOT_INVALID),
        ("slots: [!Occupied Kick]\n", E1101_INPUT_INVALID),
        ("slots: [{text: \"a\\nb\"}]\n", E1104_SLOT_INVALID),
        ("slots: [{Occupied: {text: \"a\\tb\"}}]\n", E1104_SLOT_INVALID),
    ],
)
def test_invalid_inputs(text: str, code: str) -> None:
    with pytest.raises(PatchVisionError) as exc_info:
        loads_input(text)
    assert exc_info.value.code == code


def test_invalid_slot_reports_its_index() -> None:
    with pytest.raises(PatchVisionError) as exc_info:
        loads_input("slots: [Free, Free, Taken]\n")
    assert exc_info.value.slot == 2
    assert "Slot 02" in exc_info.value.message


def test_missing_input_file(tmp_path: Path) -> None:
    with pytest.raises(PatchVisionError) as exc_info:
        load_input(tmp_path / "absent.yaml")
    assert exc_info.value.code == E1100_INPUT_MISSING
