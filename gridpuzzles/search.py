"""Search puzzles: exhaustive placement, breadth-first counting and expression bracketing."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from itertools import combinations, permutations

from .grids import Cell, _neighbours

MAX_ADDITIONS = 3
SCV_DAMAGE = (9, 3, 1)
POSITION_LIMIT = 100_000

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def ladder_additions(
    columns: int, rows: int, ladders: Iterable[tuple[int, int]]
) -> int:
    """Return the fewest rungs (at most three) to add so every column ends where it starts.

    ``ladders`` holds 1-based ``(row, column)`` pairs, a rung joining ``column`` and
    ``column + 1`` on ``row``. Returns -1 when three added rungs are not enough.
    """
    rungs: set[Cell] = set()
    for row, col in ladders:
        if not (1 <= row <= rows and 1 <= col < columns):
            raise ValueError(f"rung {(row, col)} does not fit the ladder")
        rungs.add((row, col))

    def descends_straight() -> bool:
        for start in range(1, columns + 1):
            position = start
            for row in range(1, rows + 1):
                if (row, position) in rungs:
                    position += 1
                elif (row, position - 1) in rungs:
                    position -= 1
            if position != start:
                return False
        return True

    candidates = [(r, c) for r in range(1, rows + 1) for c in range(1, columns)]

    def place(first: int, remaining: int) -> bool:
        if remaining == 0:
            return descends_straight()
        for index in range(first, len(candidates)):
            row, col = cell = candidates[index]
            if cell in rungs or (row, col - 1) in rungs or (row, col + 1) in rungs:
                continue
            rungs.add(cell)
            found = place(index + 1, remaining - 1)
            rungs.discard(cell)
            if found:
                return True
        return False

    for count in range(MAX_ADDITIONS + 1):
        if place(0, count):
            return count
    return -1


def scv_attacks(health: Sequence[int]) -> int:
    """Return the fewest attacks of 9, 3 and 1 damage that destroy up to three SCVs."""
    if not 1 <= len(health) <= 3:
        raise ValueError("there must be one to three SCVs")
    if any(value < 1 for value in health):
        raise ValueError("health must be positive")
    start = tuple(health) + (0,) * (3 - len(health))
    attacks = {start: 0}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        for damage in permutations(SCV_DAMAGE):
            after = tuple(max(0, hp - hit) for hp, hit in zip(state, damage))
            if after not in attacks:
                attacks[after] = attacks[state] + 1
                if after == (0, 0, 0):
                    return attacks[after]
                queue.append(after)
    return attacks[(0, 0, 0)]


def chicken_distance(city: Sequence[Sequence[int]], keep: int) -> int:
    """Return the smallest city chicken distance after closing all but ``keep`` shops.

    Cells are 0 (empty), 1 (house) or 2 (chicken shop).
    """
    homes = [(y, x) for y, row in enumerate(city) for x, v in enumerate(row) if v == 1]
    shops = [(y, x) for y, row in enumerate(city) for x, v in enumerate(row) if v == 2]
    if not 1 <= keep <= len(shops):
        raise ValueError(f"cannot keep {keep} of {len(shops)} shops")

    def total(kept: tuple[Cell, ...]) -> int:
        return sum(
            min(abs(hy - sy) + abs(hx - sx) for sy, sx in kept) for hy, hx in homes
        )

    return min(total(kept) for kept in combinations(shops, keep))


def count_camping_paths(field: Sequence[str], distance: int) -> int:
    """Count paths of exactly ``distance`` cells from bottom-left to top-right avoiding 'T'."""
    rows = len(field)
    cols = len(field[0]) if rows else 0
    if rows == 0 or cols == 0 or any(len(row) != cols for row in field):
        raise ValueError("field must be a non-empty rectangle")
    blocked = {(y, x) for y, row in enumerate(field) for x, mark in enumerate(row) if mark == "T"}
    start = (rows - 1, 0)
    target = (0, cols - 1)
    visited = {start}

    def walk(cell: Cell, length: int) -> int:
        if cell == target and length == distance:
            return 1
        found = 0
        for step in _neighbours(cell, rows, cols):
            if step in visited or step in blocked:
                continue
            visited.add(step)
            found += walk(step, length + 1)
            visited.discard(step)
        return found

    return walk(start, 1)


def min_flower_cost(garden: Sequence[Sequence[int]]) -> int:
    """Return the cheapest rent for three non-overlapping plus-shaped flowers."""
    size = len(garden)
    if any(len(row) != size for row in garden):
        raise ValueError("garden must be square")
    flowers = []
    for y in range(1, size - 1):
        for x in range(1, size - 1):
            cells = frozenset(
                [(y, x)] + list(_neighbours((y, x), size, size))
            )
            flowers.append((cells, sum(garden[cy][cx] for cy, cx in cells)))
    costs = [
        a_cost + b_cost + c_cost
        for (a, a_cost), (b, b_cost), (c, c_cost) in combinations(flowers, 3)
        if not (a & b or a & c or b & c)
    ]
    if not costs:
        raise ValueError("three flowers do not fit in the garden")
    return min(costs)


def hide_and_seek(start: int, target: int) -> tuple[int, int]:
    """Return the fastest time from ``start`` to ``target`` and how many ways reach it.

    Each second a position moves by +1, -1 or doubles, staying within 0..100000.
    """
    for position in (start, target):
        if not 0 <= position <= POSITION_LIMIT:
            raise ValueError(f"position {position} is out of range")
    time = {start: 0}
    ways = {start: 1}
    queue = deque([start])
    while queue:
        here = queue.popleft()
        for step in (here + 1, here - 1, here * 2):
            if not 0 <= step <= POSITION_LIMIT:
                continue
            if step not in time:
                time[step] = time[here] + 1
                ways[step] = ways[here]
                queue.append(step)
            elif time[step] == time[here] + 1:
                ways[step] += ways[here]
    return time[target], ways[target]


def tree_levels(values: Sequence[int]) -> list[list[int]]:
    """Rebuild the levels of a complete binary tree from its in-order visit."""
    count = len(values)
    if count == 0 or (count + 1) & count:
        raise ValueError("a complete binary tree holds 2**k - 1 values")
    levels: list[list[int]] = [[] for _ in range((count + 1).bit_length() - 1)]

    def place(low: int, high: int, depth: int) -> None:
        if low > high:
            return
        middle = (low + high) // 2
        levels[depth].append(values[middle])
        place(low, middle - 1, depth + 1)
        place(middle + 1, high, depth + 1)

    place(0, count - 1, 0)
    return levels


def max_expression(expression: str) -> int:
    """Return the largest value of a left-to-right expression with optional brackets.

    The expression alternates single digits and ``+``, ``-`` or ``*``; brackets may wrap
    single operations and must not nest or overlap.
    """
    digits = expression[::2]
    signs = expression[1::2]
    if (
        not expression
        or len(expression) % 2 == 0
        or not all(d.isdigit() for d in digits)
        or not all(s in _OPERATORS for s in signs)
    ):
        raise ValueError(f"malformed expression {expression!r}")
    numbers = [int(d) for d in digits]
    ops = [_OPERATORS[s] for s in signs]

    def best(index: int, total: int) -> int:
        if index == len(ops):
            return total
        result = best(index + 1, ops[index](total, numbers[index + 1]))
        if index + 1 < len(ops):
            grouped = ops[index + 1](numbers[index + 1], numbers[index + 2])
            result = max(result, best(index + 2, ops[index](total, grouped)))
        return result

    return best(0, numbers[0])