import logging
from collections import namedtuple

from maze_generator import CELLS_HORIZONTAL, CELLS_VERTICAL, generate_maze

logger = logging.getLogger(__name__)

WIDTH = 900
HEIGHT = 600
WALL_THICKNESS = 5
BORDER_THICKNESS = 2
GOAL_SCALE = 0.7
BALL_SCALE = 0.25

HORIZONTAL = 'horizontal'
VERTICAL = 'vertical'

WALL_COLORS = {HORIZONTAL: 'blue', VERTICAL: 'red'}
GOAL_COLOR = 'green'
BALL_COLOR = 'yellow'

WallSegment = namedtuple('WallSegment', ['center_x', 'center_y', 'width', 'height', 'orientation'])
Goal = namedtuple('Goal', ['center_x', 'center_y', 'width', 'height'])
Ball = namedtuple('Ball', ['center_x', 'center_y', 'radius'])


def build_walls(verticals, horizontals, cell_width, cell_height, thickness=WALL_THICKNESS):
    walls = []

    for row_index, row in enumerate(horizontals):
        for column_index, is_open in enumerate(row):
            if is_open:
                continue
            walls.append(WallSegment(
                column_index * cell_width + cell_width / 2,
                row_index * cell_height + cell_height,
                cell_width,
                thickness,
                HORIZONTAL,
            ))

    for row_index, row in enumerate(verticals):
        for column_index, is_open in enumerate(row):
            if is_open:
                continue
            walls.append(WallSegment(
                column_index * cell_width + cell_width,
                row_index * cell_height + cell_height / 2,
                thickness,
                cell_height,
                VERTICAL,
            ))

    return walls


def build_boundary(width, height, thickness=BORDER_THICKNESS):
    return [
        WallSegment(width / 2, 0, width, thickness, HORIZONTAL),
        WallSegment(width / 2, height, width, thickness, HORIZONTAL),
        WallSegment(0, height / 2, thickness, height, VERTICAL),
        WallSegment(width, height / 2, thickness, height, VERTICAL),
    ]


class MazeLayout:
    """Everything a physics/rendering layer needs to set up one game."""

    def __init__(self, rows, cols, width, height, verticals, horizontals, walls, boundary, goal, ball):
        self.rows = rows
        self.cols = cols
        self.width = width
        self.height = height
        self.cell_width = width / cols
        self.cell_height = height / rows
        self.verticals = verticals
        self.horizontals = horizontals
        self.walls = walls
        self.boundary = boundary
        self.goal = goal
        self.ball = ball

    @property
    def start_cell(self):
        return (0, 0)

    @property
    def goal_cell(self):
        return (self.rows - 1, self.cols - 1)


def build_layout(rows=CELLS_VERTICAL, cols=CELLS_HORIZONTAL, width=WIDTH, height=HEIGHT, rng=None,
                 wall_thickness=WALL_THICKNESS):
    verticals, horizontals = generate_maze(rows, cols, rng)

    unit_x = width / cols
    unit_y = height / rows

    walls = build_walls(verticals, horizontals, unit_x, unit_y, wall_thickness)
    boundary = build_boundary(width, height)

    # Goal sits in the bottom-right cell, the ball starts in the top-left one
    goal = Goal(width - unit_x / 2, height - unit_y / 2, unit_x * GOAL_SCALE, unit_y * GOAL_SCALE)
    ball = Ball(unit_x / 2, unit_y / 2, min(unit_x, unit_y) * BALL_SCALE)

    logger.info('Built %dx%d maze layout with %d walls', rows, cols, len(walls))
    return MazeLayout(rows, cols, width, height, verticals, horizontals, walls, boundary, goal, ball)
