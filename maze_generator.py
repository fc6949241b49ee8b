import logging
import os
import secrets

logger = logging.getLogger(__name__)

CELLS_HORIZONTAL = 15
CELLS_VERTICAL = 10


class InvalidDimension(ValueError):
    pass


def shuffle(arr, rng):
    """Fisher-Yates shuffle of ``arr`` in place, returns the same list."""
    counter = len(arr)

    while counter > 0:
        index = int(rng.random() * counter)
        counter -= 1
        arr[counter], arr[index] = arr[index], arr[counter]
    return arr


def _check_dimension(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimension(f'{name} must be a positive integer, got {value!r}')


def generate_maze(rows=CELLS_VERTICAL, cols=CELLS_HORIZONTAL, rng=None):
    # verticals[r][c]: wall right of (r, c) is open, horizontals[r][c]: wall below it
    _check_dimension('rows', rows)
    _check_dimension('cols', cols)
    if rng is None:
        rng = secrets.SystemRandom()

    grid = [[False for _ in range(cols)] for _ in range(rows)]
    verticals = [[False for _ in range(cols - 1)] for _ in range(rows)]
    horizontals = [[False for _ in range(cols)] for _ in range(rows - 1)]

    start_row = int(rng.random() * rows)
    start_col = int(rng.random() * cols)
    logger.debug('Generating %dx%d maze from cell (%d, %d)', rows, cols, start_row, start_col)

    def enter(row, col):
        grid[row][col] = True
        neighbors = shuffle([
            (row - 1, col, 'up'),
            (row, col + 1, 'right'),
            (row + 1, col, 'down'),
            (row, col - 1, 'left'),
        ], rng)
        return (row, col, iter(neighbors))

    # Each frame holds a cell and the neighbors it has not tried yet
    stack = [enter(start_row, start_col)]

    while stack:
        row, col, neighbors = stack[-1]
        neighbor = next(neighbors, None)
        if neighbor is None:
            stack.pop()
            continue

        next_row, next_col, direction = neighbor
        if not (0 <= next_row < rows and 0 <= next_col < cols):
            continue
        if grid[next_row][next_col]:
            continue

        # Vertical slot c is the wall to the right of column c
        if direction == 'left':
            verticals[row][col - 1] = True
        elif direction == 'right':
            verticals[row][col] = True
        elif direction == 'up':
            horizontals[row - 1][col] = True
        elif direction == 'down':
            horizontals[row][col] = True

        stack.append(enter(next_row, next_col))

    logger.debug('Opened %d walls', count_openings(verticals, horizontals))
    return verticals, horizontals


def count_openings(verticals, horizontals):
    return sum(sum(row) for row in verticals) + sum(sum(row) for row in horizontals)


def format_maze(verticals, horizontals):
    """Render the maze as text, one string per line."""
    rows = len(verticals)
    cols = len(verticals[0]) + 1

    lines = [(' ' + '_ ' * cols).rstrip()]
    for r in range(rows):
        row = ['|']
        for c in range(cols):
            # Check if the cell below is closed off to add an underscore
            if r == rows - 1 or not horizontals[r][c]:
                row.append('_')
            else:
                row.append(' ')
            if c == cols - 1 or not verticals[r][c]:
                row.append('|')
            else:
                row.append(' ')
        lines.append(''.join(row))

    return lines


def save_maze(maze, filename):
    with open(filename, 'w') as f:
        for line in maze:
            f.write(line + '\n')


if __name__ == '__main__':
    os.makedirs('mazes', exist_ok=True)
    for i in range(50):
        filename = f'mazes/maze_{i+1}.txt'
        verticals, horizontals = generate_maze()
        save_maze(format_maze(verticals, horizontals), filename)
        print(f'Maze {i+1} saved as {filename}')
