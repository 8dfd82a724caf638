from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from patchvision.errors import E1104_SLOT_INVALID, PatchVisionError


@dataclass(frozen=True)
class Occupied:
    text: str
    group: str = ""


@dataclass(frozen=True)
class Free:
    pass


Slot = Union[Occupied, Free]

FREE = Free()


def _invalid(index: int, message: str) -> PatchVisionError:
    return PatchVisionError(
        code=E1104_SLOT_INVALID,
        message=f"Slot {index:02d}: {message}",
        hint="Use 'Free', null, or a mapping such as {Occupied: {text: Kick, group: drums}}.",
        slot=index,
    )


def _occupied_from_mapping(index: int, body: Any) -> Occupied:
    if not isinstance(body, dict):
        raise _invalid(index, "Occupied slot must be a mapping with 'text' and 'group'.")
    unknown = sorted(str(key) for key in body if key not in {"text", "group"})
    if unknown:
        raise _invalid(index, f"unexpected keys {', '.join(unknown)}.")
    text = body.get("text")
    if text is None:
        raise _invalid(index, "Occupied slot requires 'text'.")
    text = str(text)
    # Each character becomes one canvas cell; line breaks and tabs would split rows.
    if not text.isprintable():
        raise _invalid(index, f"text {text!r} contains control characters.")
    group = body.get("group")
    return Occupied(text=text, group="" if group is None else str(group))


def parse_slot(index: int, entry: Any) -> Slot:
    if entry is None:
        return FREE
    if isinstance(entry, str):
        if entry.strip().lower() == "free":
            return FREE
        raise _invalid(index, f"unknown slot kind {entry!r}.")
    if isinstance(entry, dict):
        if len(entry) == 1:
            ((kind, body),) = entry.items()
            if str(kind).lower() == "occupied":
                return _occupied_from_mapping(index, body)
            if str(kind).lower() == "free":
                return FREE
        if "text" in entry:
            return _occupied_from_mapping(index, entry)
        raise _invalid(index, f"unsupported mapping with keys {', '.join(map(str, entry))}.")
    raise _invalid(index, f"unsupported entry of type {type(entry).__name__}.")


def parse_slots(entries: list[Any]) -> list[Slot]:
    return [parse_slot(index, entry) for index, entry in enumerate(entries)]


def occupied_slots(slots: list[Slot]) -> list[tuple[int, Occupied]]:
    """Occupied slots with their panel index, in index order."""
    return [(index, slot) for index, slot in enumerate(slots) if isinstance(slot, Occupied)]
