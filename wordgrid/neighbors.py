import functools

Cell = tuple[int, int]


@functools.cache
def init_neighbors(rows: int, cols: int) -> list[list[Cell]]:
    """8-neighborhood of every cell, indexed by row * cols + col."""
    ns: list[list[Cell]] = []
    for i in range(0, rows * cols):
        row, col = divmod(i, cols)
        n = []
        for dr in range(-1, 2):
            nr = row + dr
            if nr < 0 or nr >= rows:
                continue
            for dc in range(-1, 2):
                nc = col + dc
                if nc < 0 or nc >= cols:
                    continue
                if dr == 0 and dc == 0:
                    continue
                n.append((nr, nc))
        n.sort()
        ns.append(n)
    return ns
