from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from patchvision.grid import Grid
from patchvision.placeholder import NONE, merge

if TYPE_CHECKING:
    from patchvision.theme import Theme


class Template:
    """One grid of placeholders, combined with others through :meth:`overlay`."""

    def __init__(self, grid: Grid | None = None) -> None:
        self.grid = grid if grid is not None else Grid(1, 1, NONE)

    def overlay(self, another: Template) -> Template:
        """Merge two templates into a new one, bottom rows aligned.

        Column indices are shared by both grids; the narrower one is padded
        with empty cells on the right. Neither input is modified.
        """
        one_grid, another_grid = self.grid, another.grid
        if one_grid.rows > another_grid.rows:
            longer, shorter = one_grid, another_grid
        else:
            longer, shorter = another_grid, one_grid

        rows = longer.rows
        diff = rows - shorter.rows
        cols = max(shorter.cols, longer.cols)
        result = longer.copy()
        result.widen(cols)

        for row in range(diff, rows):
            for col in range(shorter.cols):
                result[row, col] = merge(result[row, col], shorter[row - diff, col])
        return Template(result)

    @classmethod
    def overlay_all(cls, templates: Iterable[Template]) -> Template:
        result = cls()
        for template in templates:
            result = result.overlay(template)
        return result

    def render_lines(self, theme: Theme) -> list[str]:
        return [
            "".join(theme.render(placeholder) for placeholder in row).rstrip(" ")
            for row in self.grid.iter_rows()
        ]

    def render(self, theme: Theme) -> str:
        return "\n".join(self.render_lines(theme))

    def __repr__(self) -> str:
        return f"Template({self.grid!r})"
