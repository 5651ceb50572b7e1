from functools import lru_cache

import numpy as np

EMPTY, P1, P2 = 0, 1, 2
MIN_SIZE, MAX_SIZE = 2, 11

# Offsets of the virtual nodes after the N*N real cells
NORTH, SOUTH, WEST, EAST = 0, 1, 2, 3

# Six hex neighbours of (r, c) on a rhombic board
HEX_NEIGHBORS = [(-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0)]


class HexError(Exception):
    """Base class for board errors."""


class InvalidSizeError(HexError, ValueError):
    """Board size outside [MIN_SIZE, MAX_SIZE]."""


class OutOfRangeError(HexError, IndexError):
    """Cell coordinate outside the board."""


class CellOccupiedError(HexError, ValueError):
    """Move targeting a cell that is not empty."""


class NoLegalMovesError(HexError, ValueError):
    """Move requested on a full board."""


def opponent(side):
    """Returns the other side (P1 -> P2, P2 -> P1)."""
    return 3 - side


@lru_cache(maxsize=None)
def _adjacency(size):
    """
    Builds the static adjacency of a size x size board as a tuple of
    neighbour tuples, one per node id (real cells first, then N, S, W, E).
    """
    area = size * size
    north, south, west, east = (area + v for v in (NORTH, SOUTH, WEST, EAST))
    adj = [[] for _ in range(area + 4)]

    for r in range(size):
        for c in range(size):
            i = r * size + c
            for dr, dc in HEX_NEIGHBORS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < size and 0 <= nc < size:
                    adj[i].append(nr * size + nc)
            # Boundary cells also touch the virtual edge nodes
            if r == 0:
                adj[i].append(north)
                adj[north].append(i)
            if r == size - 1:
                adj[i].append(south)
                adj[south].append(i)
            if c == 0:
                adj[i].append(west)
                adj[west].append(i)
            if c == size - 1:
                adj[i].append(east)
                adj[east].append(i)

    return tuple(tuple(n) for n in adj)


class HexBoard:
    """
    The Hex board as a graph with four virtual boundary nodes.
    Occupancy: 0=empty, 1=P1 (North-South), 2=P2 (West-East).

    Node ids 0..N*N-1 are the real cells (r*N + c); N*N..N*N+3 are the
    virtual NORTH, SOUTH, WEST and EAST nodes. NORTH/SOUTH always belong to
    P1 and WEST/EAST to P2. `board` is an (N, N) view over the real cells.
    """
    def __init__(self, board_size=11):
        if not MIN_SIZE <= board_size <= MAX_SIZE:
            raise InvalidSizeError(
                f"Board size must be between {MIN_SIZE} and {MAX_SIZE}, got {board_size}.")
        self.board_size = board_size
        area = board_size * board_size

        self.north = area + NORTH
        self.south = area + SOUTH
        self.west = area + WEST
        self.east = area + EAST

        self.nodes = np.zeros(area + 4, dtype=np.int8)
        self.nodes[[self.north, self.south]] = P1
        self.nodes[[self.west, self.east]] = P2
        self.board = self.nodes[:area].reshape(board_size, board_size)

    @property
    def size(self):
        return self.board_size

    def in_bounds(self, r, c):
        return 0 <= r < self.board_size and 0 <= c < self.board_size

    def node_index(self, r, c):
        """Maps a cell coordinate to its node id."""
        return r * self.board_size + c

    def cell_of(self, node):
        """Maps a real node id back to (row, col)."""
        return divmod(int(node), self.board_size)

    @property
    def adjacency(self):
        """Neighbour tuples for every node id, shared by all boards of this size."""
        return _adjacency(self.board_size)

    def neighbors(self, node):
        """Returns the node ids adjacent to `node`."""
        return self.adjacency[node]

    def occupant(self, r, c):
        """Returns the occupancy of cell (r, c)."""
        if not self.in_bounds(r, c):
            raise OutOfRangeError(f"Cell {(r, c)} is outside a {self.board_size}x{self.board_size} board.")
        return int(self.board[r, c])

    def owner(self, node):
        """Returns the occupancy of any node, real or virtual."""
        return int(self.nodes[node])

    def empty_cells(self):
        """Returns a list of (row, col) tuples for all empty cells."""
        return [self.cell_of(i) for i in np.flatnonzero(self.board.ravel() == EMPTY)]

    def is_full(self):
        return not np.any(self.board == EMPTY)

    def stone_count(self, side):
        """Number of stones `side` has on the board."""
        return int(np.count_nonzero(self.board == side))

    def apply_move(self, r, c, side):
        """Places a stone for `side`. Returns False if the move is rejected."""
        if side not in (P1, P2):
            raise ValueError(f"Unknown side {side}.")
        if not self.in_bounds(r, c) or self.board[r, c] != EMPTY:
            return False
        self.board[r, c] = side
        return True

    def place(self, r, c, side):
        """Like apply_move, but raises instead of returning False."""
        if not self.in_bounds(r, c):
            raise OutOfRangeError(f"Cell {(r, c)} is outside a {self.board_size}x{self.board_size} board.")
        if not self.apply_move(r, c, side):
            raise CellOccupiedError(f"Cell {(r, c)} is already occupied.")

    def fill(self, order, first, second):
        """
        Places alternating stones along `order` (real node ids), starting
        with `first`. No legality check: callers pass empty cells only.
        """
        self.nodes[order[0::2]] = first
        self.nodes[order[1::2]] = second

    def reset_from(self, other):
        """Copies the occupancy of a board of the same size into this one."""
        np.copyto(self.nodes, other.nodes)

    def boundary_endpoints(self, side):
        """Returns the (start, end) virtual node ids for `side`."""
        if side == P1:
            return self.north, self.south
        if side == P2:
            return self.west, self.east
        raise ValueError(f"Unknown side {side}.")

    def clone(self):
        """Returns an independent deep copy."""
        other = HexBoard.__new__(HexBoard)
        other.board_size = self.board_size
        other.north, other.south = self.north, self.south
        other.west, other.east = self.west, self.east
        other.nodes = self.nodes.copy()
        other.board = other.nodes[:self.board_size * self.board_size].reshape(self.board_size, self.board_size)
        return other

    def display(self):
        """Prints a human-readable representation of the board."""
        chars = {EMPTY: '.', P1: 'X', P2: 'O'}
        n = self.board_size
        letters = "   ".join(chr(ord('A') + c) for c in range(n))

        print(f"\n{'NORTH':>{2 * n + 4}}\n")
        print("  " + letters + "\n")
        for r in range(n):
            # Two-digit row labels eat one column of the indent
            print(" " * (r * 2 - (1 if r >= 9 else 0)), end="")
            row_str = " - ".join(chars[int(v)] for v in self.board[r])
            print(f"{r + 1}  {row_str}   {r + 1}")
            if r < n - 1:
                print("  " + " " * (r * 2 + 1) + " \\" + " / \\" * (n - 1))
        print()
        print(" " * (n * 2 + 2) + letters + "\n")
        print(f"{'SOUTH':>{4 * n + 3}}\n")
