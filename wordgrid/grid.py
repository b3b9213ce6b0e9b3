"""The puzzle grid: a fixed rectangle of single lowercase letters."""

from dataclasses import dataclass, field
from typing import Self, Sequence

from wordgrid.neighbors import Cell, init_neighbors


@dataclass(frozen=True)
class Grid:
    cells: tuple[tuple[str, ...], ...]
    row_size: int
    col_size: int
    alphabet: frozenset[str] = field(init=False, compare=False)

    def __post_init__(self):
        assert len(self.cells) == self.row_size
        assert all(len(row) == self.col_size for row in self.cells)
        letters = frozenset(let for row in self.cells for let in row)
        object.__setattr__(self, "alphabet", letters)

    @classmethod
    def from_str(cls, s: str) -> Self:
        """Parse a puzzle like "adut qsoa iism irta" (rows separated by a space).

        Raises ValueError if the rows are ragged or contain anything but a-z.
        """
        rows = s.split(" ")
        num_cols = len(rows[0])
        if num_cols == 0:
            raise ValueError(f"Empty row in puzzle {s!r}")
        for row in rows:
            if len(row) != num_cols:
                raise ValueError(
                    f"All rows must have length {num_cols}, got {row!r} in {s!r}"
                )
            for let in row:
                if not "a" <= let <= "z":
                    raise ValueError(f"Invalid letter {let!r} in puzzle {s!r}")
        return cls(
            cells=tuple(tuple(row) for row in rows),
            row_size=len(rows),
            col_size=num_cols,
        )

    def __getitem__(self, cell: Cell) -> str:
        row, col = cell
        return self.cells[row][col]

    def __str__(self):
        return " ".join("".join(row) for row in self.cells)

    @property
    def dims(self) -> tuple[int, int]:
        return self.row_size, self.col_size

    def contains(self, letter: str) -> bool:
        return letter in self.alphabet

    def neighbors(self, cell: Cell) -> list[Cell]:
        row, col = cell
        return init_neighbors(self.row_size, self.col_size)[row * self.col_size + col]

    def positions(self):
        """All cells in row-major order."""
        for row in range(self.row_size):
            for col in range(self.col_size):
                yield row, col

    def trace(self, path: Sequence[Cell]) -> str:
        """Spell out the letters along a sequence of cells."""
        return "".join(self[cell] for cell in path)
