"""Algorithms over two-dimensional grids: rotation, paths, islands and spreading."""

from collections import deque

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _require_cells(grid):
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")


def _neighbours(row, col, rows, cols):
    for dr, dc in _DIRECTIONS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def rotate(matrix):
    """Turn a square matrix a quarter turn clockwise, in place."""
    if any(len(line) != len(matrix) for line in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(line) for line in zip(*reversed(matrix))]


def unique_paths_with_obstacles(obstacle_grid):
    """Count right/down paths from the top-left to the bottom-right cell.

    Cells holding 1 are blocked.
    """
    _require_cells(obstacle_grid)
    cols = len(obstacle_grid[0])
    ways = [0] * cols
    for r, line in enumerate(obstacle_grid):
        for c, cell in enumerate(line):
            if cell == 1:
                ways[c] = 0
            elif r == 0 and c == 0:
                ways[c] = 1
            elif c > 0:
                ways[c] += ways[c - 1]
    return ways[-1]


def min_path_sum(grid):
    """Smallest sum along a right/down path from the top-left to the bottom-right."""
    _require_cells(grid)
    best = []
    for r, line in enumerate(grid):
        row_best = []
        for c, value in enumerate(line):
            options = []
            if r > 0:
                options.append(best[c])
            if c > 0:
                options.append(row_best[c - 1])
            row_best.append(value + (min(options) if options else 0))
        best = row_best
    return best[-1]


def set_zeroes(matrix):
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {r for r, line in enumerate(matrix) if 0 in line}
    zero_cols = {c for line in matrix for c, value in enumerate(line) if value == 0}
    for r, line in enumerate(matrix):
        for c in range(len(line)):
            if r in zero_rows or c in zero_cols:
                line[c] = 0


def minimum_total(triangle):
    """Smallest top-to-bottom path sum, stepping to an adjacent index below."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    below = list(triangle[-1])
    for line in reversed(triangle[:-1]):
        below = [value + min(below[c], below[c + 1]) for c, value in enumerate(line)]
    return below[0]


def _flood(grid, start, land, visited):
    """Mark the land region around start as visited and return its size."""
    rows, cols = len(grid), len(grid[0])
    visited.add(start)
    queue = deque([start])
    size = 1
    while queue:
        row, col = queue.popleft()
        for cell in _neighbours(row, col, rows, cols):
            nr, nc = cell
            if cell not in visited and grid[nr][nc] == land:
                visited.add(cell)
                queue.append(cell)
                size += 1
    return size


def _region_sizes(grid, land):
    _require_cells(grid)
    visited = set()
    for r, line in enumerate(grid):
        for c, value in enumerate(line):
            if value == land and (r, c) not in visited:
                yield _flood(grid, (r, c), land, visited)


def num_islands(grid):
    """Count the four-connected regions of '1' cells."""
    return sum(1 for _ in _region_sizes(grid, "1"))


def max_area_of_island(grid):
    """Size of the largest four-connected region of 1 cells (0 if none)."""
    return max(_region_sizes(grid, 1), default=0)


def flood_fill(image, sr, sc, color):
    """Return a copy of image with the region around (sr, sc) painted color."""
    result = [list(line) for line in image]
    rows, cols = len(image), len(image[0])
    initial = image[sr][sc]
    result[sr][sc] = color
    stack = [(sr, sc)]
    while stack:
        row, col = stack.pop()
        for nr, nc in _neighbours(row, col, rows, cols):
            if result[nr][nc] != color and image[nr][nc] == initial:
                result[nr][nc] = color
                stack.append((nr, nc))
    return result


def min_falling_path_sum(matrix):
    """Smallest sum falling one row at a time to the same or a diagonal column."""
    _require_cells(matrix)
    below = list(matrix[-1])
    for line in reversed(matrix[:-1]):
        below = [
            value + min(below[max(c - 1, 0):c + 2])
            for c, value in enumerate(line)
        ]
    return min(below)


def oranges_rotting(grid):
    """Minutes until no fresh (1) orange is left beside a rotten (2) one.

    Returns -1 when some fresh orange can never rot. The grid is not changed.
    """
    _require_cells(grid)
    state = [list(line) for line in grid]
    rows, cols = len(state), len(state[0])
    rotten = deque(
        (r, c) for r, line in enumerate(state) for c, value in enumerate(line) if value == 2
    )
    fresh = sum(line.count(1) for line in state)
    if fresh == 0:
        return 0

    minutes = 0
    while rotten:
        spread = False
        for _ in range(len(rotten)):
            row, col = rotten.popleft()
            for nr, nc in _neighbours(row, col, rows, cols):
                if state[nr][nc] == 1:
                    state[nr][nc] = 2
                    rotten.append((nr, nc))
                    fresh -= 1
                    spread = True
        if spread:
            minutes += 1
    return minutes if fresh == 0 else -1