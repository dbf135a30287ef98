"""Grid geometry: pixel cells aligned to the grid and boundary policy."""

import random
from typing import Iterator, NamedTuple, Optional


class Cell(NamedTuple):
    """A grid-aligned position in canvas pixels"""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Cell":
        return Cell(self.x + dx, self.y + dy)


class Grid:
    """
    Discretizes the canvas into square cells of ``cell_size`` pixels.
    In wrap mode leaving one edge re-enters at the opposite one,
    otherwise leaving the canvas is a boundary violation.
    """

    def __init__(self, width: int, height: int, cell_size: int, wrap: bool = True):
        if cell_size <= 0 or width < cell_size or height < cell_size:
            raise ValueError("Canvas must hold at least one cell")
        if width % cell_size or height % cell_size:
            raise ValueError(f"Canvas {width}x{height} is not a whole number of {cell_size}px cells")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.wrap = wrap

    @property
    def cols(self) -> int:
        return self.width // self.cell_size

    @property
    def rows(self) -> int:
        return self.height // self.cell_size

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def wrap_or_clamp(self, cell: Cell) -> Optional[Cell]:
        """
        Apply the boundary policy to a candidate head.
        Returns the (possibly wrapped) cell, or None when the cell left
        the canvas and wrap mode is off.
        """
        if not self.wrap:
            return cell if self.in_bounds(cell) else None

        # Movement is axis-aligned, so only one axis can be out at a time
        x, y = cell
        if x < 0:
            x = self.width - self.cell_size
        elif x >= self.width:
            x = 0
        elif y < 0:
            y = self.height - self.cell_size
        elif y >= self.height:
            y = 0
        return Cell(x, y)

    def cells(self) -> Iterator[Cell]:
        """All grid-aligned cells in row-major order"""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Cell(col * self.cell_size, row * self.cell_size)

    def random_cell(self, rng: random.Random) -> Cell:
        return Cell(rng.randrange(self.cols) * self.cell_size,
                    rng.randrange(self.rows) * self.cell_size)

    def __len__(self) -> int:
        return self.cols * self.rows
