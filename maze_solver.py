import heapq
import logging

logger = logging.getLogger(__name__)


class Node:
    def __init__(self, pos, cost, parent):
        self.pos = pos
        self.cost = cost
        self.parent = parent

    def __lt__(self, other):
        return self.cost < other.cost


def heuristic(pos, goal):
    # Manhattan distance heuristic
    return abs(pos[0] - goal[0]) + abs(pos[1] - goal[1])


def open_neighbors(verticals, horizontals, pos):
    """Cells reachable from ``pos`` through an opened wall."""
    row, col = pos
    neighbors = []

    if row > 0 and horizontals[row - 1][col]:
        neighbors.append((row - 1, col))
    if col < len(verticals[row]) and verticals[row][col]:
        neighbors.append((row, col + 1))
    if row < len(horizontals) and horizontals[row][col]:
        neighbors.append((row + 1, col))
    if col > 0 and verticals[row][col - 1]:
        neighbors.append((row, col - 1))

    return neighbors


def solve_maze(verticals, horizontals, start=(0, 0), goal=None):
    rows = len(verticals)
    cols = len(verticals[0]) + 1
    if goal is None:
        goal = (rows - 1, cols - 1)

    for name, pos in (('start', start), ('goal', goal)):
        if not (0 <= pos[0] < rows and 0 <= pos[1] < cols):
            raise ValueError(f'{name} {pos} is outside the {rows}x{cols} maze')

    open_list = []
    closed_list = set()

    start_node = Node(start, 0, None)
    heapq.heappush(open_list, (start_node.cost + heuristic(start, goal), start_node))

    while open_list:
        current_node = heapq.heappop(open_list)[1]
        if current_node.pos in closed_list:
            continue
        closed_list.add(current_node.pos)

        if current_node.pos == goal:
            # Goal reached, backtrack to get the path
            path = []
            while current_node:
                path.append(current_node.pos)
                current_node = current_node.parent
            path.reverse()
            logger.debug('Path found with %d cells', len(path))
            return path

        for neighbor_pos in open_neighbors(verticals, horizontals, current_node.pos):
            if neighbor_pos in closed_list:
                continue
            new_node = Node(neighbor_pos, current_node.cost + 1, current_node)
            heapq.heappush(open_list, (new_node.cost + heuristic(neighbor_pos, goal), new_node))

    logger.warning('No path from %s to %s', start, goal)
    return None
