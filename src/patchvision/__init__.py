"""patchvision library package."""

from .balloon import Balloon, ProtoBalloon
from .config import DEFAULT_LAYOUT, LayoutConfig, load_input, loads_input
from .errors import PatchVisionError
from .panel import LayoutResult, Panel, place_balloons
from .slot import Free, Occupied
from .template import Template
from .theme import theme_from_name

__all__ = [
    "Balloon",
    "DEFAULT_LAYOUT",
    "Free",
    "LayoutConfig",
    "LayoutResult",
    "Occupied",
    "Panel",
    "PatchVisionError",
    "ProtoBalloon",
    "Template",
    "load_input",
    "loads_input",
    "place_balloons",
    "theme_from_name",
]
