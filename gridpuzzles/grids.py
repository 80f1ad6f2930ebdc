"""Grid puzzles: flood fills, shortest paths, melting, migration and quadtrees."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import combinations

Cell = tuple[int, int]
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _neighbours(cell: Cell, rows: int, cols: int) -> Iterator[Cell]:
    y, x = cell
    for dy, dx in _STEPS:
        ny, nx = y + dy, x + dx
        if 0 <= ny < rows and 0 <= nx < cols:
            yield ny, nx


def _flood(
    start: Cell,
    rows: int,
    cols: int,
    can_enter: Callable[[Cell, Cell], bool],
    seen: set[Cell],
) -> list[Cell]:
    seen.add(start)
    region = [start]
    stack = [start]
    while stack:
        here = stack.pop()
        for cell in _neighbours(here, rows, cols):
            if cell not in seen and can_enter(here, cell):
                seen.add(cell)
                region.append(cell)
                stack.append(cell)
    return region


def _digits(grid: Sequence[Sequence[int] | str]) -> list[list[int]]:
    return [[int(value) for value in row] for row in grid]


def _size(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    return len(grid), len(grid[0])


def count_components(grid: Sequence[Sequence[int]]) -> int:
    """Count 4-connected groups of filled cells, each started from a cell equal to 1."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[Cell] = set()
    count = 0
    for y, row in enumerate(grid):
        for x, value in enumerate(row):
            if value == 1 and (y, x) not in seen:
                count += 1
                _flood((y, x), rows, cols, lambda _, c: grid[c[0]][c[1]] != 0, seen)
    return count


def count_cabbage_worms(rows: int, cols: int, positions: Iterable[Cell]) -> int:
    """Count the patches formed by cabbages at ``(row, col)`` positions."""
    field = [[0] * cols for _ in range(rows)]
    for y, x in positions:
        if not (0 <= y < rows and 0 <= x < cols):
            raise ValueError(f"position {(y, x)} is outside the field")
        field[y][x] = 1
    return count_components(field)


def empty_regions(
    rows: int, cols: int, rectangles: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Return the sorted areas of regions left uncovered by ``(x1, y1, x2, y2)`` rectangles."""
    covered = {
        (y, x)
        for x1, y1, x2, y2 in rectangles
        for y in range(y1, y2)
        for x in range(x1, x2)
    }
    seen: set[Cell] = set(covered)
    areas = []
    for y in range(rows):
        for x in range(cols):
            if (y, x) not in seen:
                region = _flood((y, x), rows, cols, lambda _, c: c not in covered, seen)
                areas.append(len(region))
    return sorted(areas)


def shortest_maze_path(maze: Sequence[Sequence[int] | str]) -> int:
    """Return the number of cells on the shortest path from top-left to bottom-right.

    Only cells equal to 1 can be entered; 0 is returned when the exit is unreachable.
    """
    cells = _digits(maze)
    rows, cols = _size(cells)
    distance = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        here = queue.popleft()
        for y, x in _neighbours(here, rows, cols):
            if (y, x) not in distance and cells[y][x] == 1:
                distance[(y, x)] = distance[here] + 1
                queue.append((y, x))
    return distance.get((rows - 1, cols - 1), 0)


def cloud_arrival(sky: Sequence[str]) -> list[list[int]]:
    """For each cell, return the minutes until a cloud drifting east arrives, or -1."""
    result = []
    for row in sky:
        times = []
        last_cloud = None
        for x, mark in enumerate(row):
            if mark == "c":
                last_cloud = x
                times.append(0)
            elif mark == ".":
                times.append(-1 if last_cloud is None else x - last_cloud)
            else:
                raise ValueError(f"unexpected sky mark {mark!r}")
        result.append(times)
    return result


def melt_cheese(board: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Melt cheese touching outside air hour by hour.

    Returns the hours until all cheese is gone and how many cells melted in the last hour.
    """
    cells = [list(row) for row in board]
    rows, cols = _size(cells)
    hours = 0
    while True:
        seen = {(0, 0)}
        stack = [(0, 0)]
        exposed = []
        while stack:
            here = stack.pop()
            y, x = here
            if cells[y][x] == 1:
                exposed.append(here)
                continue
            for cell in _neighbours(here, rows, cols):
                if cell not in seen:
                    seen.add(cell)
                    stack.append(cell)
        hours += 1
        for y, x in exposed:
            cells[y][x] = 0
        if not any(any(row) for row in cells):
            return hours, len(exposed)


def population_moves(grid: Sequence[Sequence[int]], low: int, high: int) -> int:
    """Count the days on which neighbouring countries open borders and share population.

    Borders open where populations differ by at least ``low`` and at most ``high``.
    """
    if low < 1:
        raise ValueError("low must be at least 1")
    cells = [list(row) for row in grid]
    rows, cols = _size(cells)

    def can_enter(a: Cell, b: Cell) -> bool:
        return low <= abs(cells[a[0]][a[1]] - cells[b[0]][b[1]]) <= high

    days = 0
    while True:
        seen: set[Cell] = set()
        moved = False
        for y in range(rows):
            for x in range(cols):
                if (y, x) in seen:
                    continue
                union = _flood((y, x), rows, cols, can_enter, seen)
                if len(union) > 1:
                    moved = True
                    average = sum(cells[uy][ux] for uy, ux in union) // len(union)
                    for uy, ux in union:
                        cells[uy][ux] = average
        if not moved:
            return days
        days += 1


def max_safe_area(lab: Sequence[Sequence[int]]) -> int:
    """Return the largest safe area after building three walls and letting the virus spread.

    Cells are 0 (empty), 1 (wall) or 2 (virus).
    """
    rows, cols = _size(lab)
    empties = [(y, x) for y in range(rows) for x in range(cols) if lab[y][x] == 0]
    viruses = [(y, x) for y in range(rows) for x in range(cols) if lab[y][x] == 2]
    best = 0
    for walls in combinations(empties, 3):
        walled = set(walls)
        infected = set(viruses)
        stack = list(viruses)
        while stack:
            here = stack.pop()
            for y, x in _neighbours(here, rows, cols):
                if lab[y][x] == 0 and (y, x) not in walled and (y, x) not in infected:
                    infected.add((y, x))
                    stack.append((y, x))
        safe = len(empties) - len(walled) - (len(infected) - len(viruses))
        best = max(best, safe)
    return best


def quadtree(image: Sequence[Sequence[int] | str]) -> str:
    """Compress a square black-and-white image of power-of-two side into quadtree form."""
    pixels = _digits(image)
    size = len(pixels)
    if size == 0 or size & (size - 1) or any(len(row) != size for row in pixels):
        raise ValueError("image must be square with a power-of-two side")

    def encode(y: int, x: int, side: int) -> str:
        value = pixels[y][x]
        uniform = all(
            pixels[i][j] == value
            for i in range(y, y + side)
            for j in range(x, x + side)
        )
        if uniform:
            return str(value)
        half = side // 2
        return (
            "("
            + encode(y, x, half)
            + encode(y, x + half, half)
            + encode(y + half, x, half)
            + encode(y + half, x + half, half)
            + ")"
        )

    return encode(0, 0, size)