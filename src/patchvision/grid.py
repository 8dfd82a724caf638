from __future__ import annotations

from collections.abc import Iterator, Sequence

from patchvision.placeholder import NONE, Placeholder


class Grid:
    """Dense, rectangular 2-D array of placeholders.

    Rows grow downward and columns grow rightward. Rows pushed with a
    different width than the grid widen every row (or themselves) with
    ``NONE`` cells so the grid stays rectangular.
    """

    def __init__(self, rows: int = 0, cols: int = 0, fill: Placeholder = NONE) -> None:
        self._cols = cols if rows else 0
        self._cells: list[list[Placeholder]] = [[fill] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Placeholder]]) -> Grid:
        grid = cls()
        for row in rows:
            grid.push_row(row)
        return grid

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def cols(self) -> int:
        return self._cols

    def push_row(self, row: Sequence[Placeholder]) -> None:
        cells = list(row)
        if len(cells) > self._cols:
            self.widen(len(cells))
        elif len(cells) < self._cols:
            cells.extend([NONE] * (self._cols - len(cells)))
        self._cells.append(cells)

    def push_col(self, col: Sequence[Placeholder]) -> None:
        if len(col) != self.rows:
            raise ValueError(f"Column must have {self.rows} cells, got {len(col)}")
        for row, cell in zip(self._cells, col):
            row.append(cell)
        self._cols += 1

    def pop_row(self) -> list[Placeholder] | None:
        if not self._cells:
            return None
        row = self._cells.pop()
        if not self._cells:
            self._cols = 0
        return row

    def widen(self, cols: int) -> None:
        if cols <= self._cols:
            return
        for row in self._cells:
            row.extend([NONE] * (cols - self._cols))
        self._cols = cols

    def get(self, row: int, col: int) -> Placeholder | None:
        if 0 <= row < self.rows and 0 <= col < self._cols:
            return self._cells[row][col]
        return None

    def __getitem__(self, index: tuple[int, int]) -> Placeholder:
        row, col = index
        return self._cells[row][col]

    def __setitem__(self, index: tuple[int, int], value: Placeholder) -> None:
        row, col = index
        self._cells[row][col] = value

    def iter_row(self, row: int) -> Iterator[Placeholder]:
        return iter(self._cells[row])

    def iter_rows(self) -> Iterator[list[Placeholder]]:
        for row in self._cells:
            yield list(row)

    def copy(self) -> Grid:
        clone = Grid()
        clone._cells = [list(row) for row in self._cells]
        clone._cols = self._cols
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cols == other._cols and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"
