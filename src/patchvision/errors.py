from __future__ import annotations

from dataclasses import dataclass

E1001_INVALID_SLOT = "E1001_INVALID_SLOT"
E1002_SHIFT_TOO_LARGE = "E1002_SHIFT_TOO_LARGE"
E1003_PLACEMENT_EXHAUSTED = "E1003_PLACEMENT_EXHAUSTED"
E1100_INPUT_MISSING = "E1100_INPUT_MISSING"
E1101_INPUT_INVALID = "E1101_INPUT_INVALID"
E1102_INPUT_TYPE = "E1102_INPUT_TYPE"
E1103_SLOTS_MISSING = "E1103_SLOTS_MISSING"
E1104_SLOT_INVALID = "E1104_SLOT_INVALID"
E1105_THEME_UNKNOWN = "E1105_THEME_UNKNOWN"
E1106_LAYOUT_INVALID = "E1106_LAYOUT_INVALID"


@dataclass
class PatchVisionError(Exception):
    code: str
    message: str
    hint: str
    slot: int | None = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": self.message,
            "hint": self.hint,
        }
        if self.slot is not None:
            payload["slot"] = self.slot
        return payload
