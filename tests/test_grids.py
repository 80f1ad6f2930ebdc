import pytest

from gridpuzzles.grids import (
    cloud_arrival,
    count_cabbage_worms,
    count_components,
    empty_regions,
    max_safe_area,
    melt_cheese,
    population_moves,
    quadtree,
    shortest_maze_path,
)


def test_components_full_grid_is_one():
    assert count_components([[1] * 4 for _ in range(3)]) == 1


def test_components_checkerboard_counts_each_cell():
    grid = [[(y + x) % 2 for x in range(5)] for y in range(5)]
    assert count_components(grid) == sum(map(sum, grid))


def test_components_none():
    assert count_components([[0] * 3 for _ in range(3)]) == 0


def test_cabbage_isolated_positions():
    positions = [(0, 0), (0, 2), (2, 0), (2, 2), (4, 4)]
    assert count_cabbage_worms(5, 5, positions) == len(positions)


def test_cabbage_line_is_one_patch():
    positions = [(1, x) for x in range(6)]
    assert count_cabbage_worms(3, 6, positions) == 1


def test_cabbage_outside_field():
    with pytest.raises(ValueError):
        count_cabbage_worms(2, 2, [(5, 0)])


def test_empty_regions_without_rectangles():
    assert empty_regions(4, 5, []) == [4 * 5]


def test_empty_regions_split_by_column():
    regions = empty_regions(4, 5, [(2, 0, 3, 4)])
    assert len(regions) == 2
    assert regions[0] == regions[1]
    assert sum(regions) == 4 * 5 - 4


def test_empty_regions_sorted():
    regions = empty_regions(5, 7, [(0, 2, 4, 4), (1, 1, 2, 5), (4, 0, 6, 2)])
    assert regions == sorted(regions)
    assert all(area > 0 for area in regions)


@pytest.mark.parametrize("rows,cols", [(1, 1), (3, 4), (6, 2)])
def test_maze_open_grid(rows, cols):
    maze = [[1] * cols for _ in range(rows)]
    assert shortest_maze_path(maze) == rows + cols - 1


def test_maze_unreachable():
    assert shortest_maze_path(["110", "000", "011"]) == 0


def test_maze_with_walls_is_longer():
    maze = ["101111", "101010", "101011", "111011"]
    length = shortest_maze_path(maze)
    assert length >= len(maze) + len(maze[0]) - 1
    assert length <= sum(row.count("1") for row in maze)


def test_cloud_rows_without_clouds():
    assert cloud_arrival(["....", "...."]) == [[-1] * 4, [-1] * 4]


def test_cloud_drifts_east():
    assert cloud_arrival(["c...."]) == [list(range(5))]


def test_cloud_cells_are_zero():
    sky = ["c..c.", ".c...", "....c"]
    result = cloud_arrival(sky)
    for row, times in zip(sky, result):
        for mark, minutes in zip(row, times):
            if mark == "c":
                assert minutes == 0
            else:
                assert minutes != 0


def test_cloud_bad_mark():
    with pytest.raises(ValueError):
        cloud_arrival(["c.x"])


def test_melt_isolated_cells_in_one_hour():
    board = [[0] * 5 for _ in range(5)]
    for y, x in [(1, 1), (1, 3), (3, 2)]:
        board[y][x] = 1
    assert melt_cheese(board) == (1, sum(map(sum, board)))


def test_melt_thick_block_takes_longer():
    board = [[0] * 7 for _ in range(7)]
    for y in range(2, 5):
        for x in range(2, 5):
            board[y][x] = 1
    total = sum(map(sum, board))
    hours, last = melt_cheese(board)
    assert hours > 1
    assert 0 < last < total


def test_melt_leaves_input_untouched():
    board = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    snapshot = [row[:] for row in board]
    melt_cheese(board)
    assert board == snapshot


def test_population_example():
    assert population_moves([[50, 30], [20, 40]], 20, 50) == 1


def test_population_uniform_never_moves():
    assert population_moves([[10] * 3 for _ in range(3)], 1, 100) == 0


def test_population_input_untouched():
    grid = [[10, 15], [20, 30]]
    snapshot = [row[:] for row in grid]
    population_moves(grid, 5, 10)
    assert grid == snapshot


def test_population_needs_positive_low():
    with pytest.raises(ValueError):
        population_moves([[1, 2]], 0, 5)


def test_safe_area_without_virus():
    lab = [[0] * 3 for _ in range(3)]
    assert max_safe_area(lab) == 9 - 3


def test_safe_area_virus_walled_in_corner():
    lab = [[0] * 4 for _ in range(4)]
    lab[0][0] = 2
    zeros = sum(row.count(0) for row in lab)
    assert max_safe_area(lab) == zeros - 3


def test_safe_area_bounded_by_empty_cells():
    lab = [
        [0, 0, 0, 0, 0, 0],
        [1, 0, 0, 0, 0, 2],
        [1, 1, 1, 0, 0, 2],
        [0, 0, 0, 0, 0, 2],
    ]
    zeros = sum(row.count(0) for row in lab)
    assert 0 <= max_safe_area(lab) <= zeros - 3


def _decode(code, size):
    image = [[None] * size for _ in range(size)]
    pos = 0

    def fill(y, x, side):
        nonlocal pos
        mark = code[pos]
        pos += 1
        if mark == "(":
            half = side // 2
            for dy, dx in ((0, 0), (0, half), (half, 0), (half, half)):
                fill(y + dy, x + dx, half)
            assert code[pos] == ")"
            pos += 1
        else:
            for r in range(y, y + side):
                for c in range(x, x + side):
                    image[r][c] = int(mark)

    fill(0, 0, size)
    assert pos == len(code)
    return image


IMAGE = [
    "11110000",
    "11110000",
    "00011100",
    "00011100",
    "11110000",
    "11110000",
    "11110011",
    "11110011",
]


def test_quadtree_round_trip():
    code = quadtree(IMAGE)
    assert code.startswith("(")
    assert _decode(code, len(IMAGE)) == [[int(c) for c in row] for row in IMAGE]


@pytest.mark.parametrize("value", [0, 1])
def test_quadtree_uniform(value):
    assert quadtree([[value] * 4 for _ in range(4)]) == str(value)


@pytest.mark.parametrize("image", [["101", "010", "101"], ["10", "0"], []])
def test_quadtree_bad_shape(image):
    with pytest.raises(ValueError):
        quadtree(image)