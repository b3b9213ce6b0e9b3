"""Find all the words on a grid with a prefix-pruned flood fill."""

from dataclasses import dataclass
from typing import Iterable, Self

from wordgrid.dictionary import MIN_WORD_LENGTH, Dictionary
from wordgrid.grid import Grid
from wordgrid.neighbors import Cell


@dataclass(frozen=True)
class SearchPath:
    row: int
    col: int
    word: str
    visited: frozenset[Cell]
    cells: tuple[Cell, ...]

    @staticmethod
    def start(grid: Grid, row: int, col: int) -> Self:
        cell = (row, col)
        return SearchPath(row, col, grid[cell], frozenset([cell]), (cell,))

    def extend(self, grid: Grid, row: int, col: int) -> Self:
        cell = (row, col)
        return SearchPath(
            row,
            col,
            self.word + grid[cell],
            self.visited | {cell},
            self.cells + (cell,),
        )


def find_words(grid: Grid, dictionary: Dictionary) -> dict[str, tuple[Cell, ...]]:
    """Map each word on the grid to the first path found that spells it."""
    found: dict[str, tuple[Cell, ...]] = {}
    pending: list[SearchPath] = []
    for row, col in grid.positions():
        # Most cells can be skipped outright.
        if not dictionary.is_viable_prefix(grid[row, col]):
            continue
        pending.append(SearchPath.start(grid, row, col))

    while pending:
        path = pending.pop()
        if dictionary.contains_word(path.word) and path.word not in found:
            found[path.word] = path.cells
        if not dictionary.is_viable_prefix(path.word):
            continue
        for row, col in grid.neighbors((path.row, path.col)):
            if (row, col) in path.visited:
                continue
            pending.append(path.extend(grid, row, col))

    return found


def search(grid: Grid, dictionary: Dictionary) -> list[str]:
    return sorted(find_words(grid, dictionary))


def solve(
    puzzle: str, candidates: Iterable[str], min_length: int = MIN_WORD_LENGTH
) -> list[str]:
    grid = Grid.from_str(puzzle)
    dictionary = Dictionary.build(candidates, grid.alphabet, min_length)
    return search(grid, dictionary)
