from collections import deque

from engine import EMPTY, P1, P2, opponent


def has_winning_chain(board, side):
    """
    Checks whether `side` connects its two boundaries using BFS.

    The search starts at the side's start virtual node and only steps onto
    real cells owned by `side` or onto the matching end virtual node.
    """
    start, end = board.boundary_endpoints(side)
    adjacency = board.adjacency
    owners = board.nodes.tolist()

    visited = {start}
    q = deque([start])
    while q:
        u = q.popleft()
        if u == end:
            return True
        for v in adjacency[u]:
            if v in visited:
                continue
            if v == end:
                return True
            # Virtual nodes other than `end` are never stepped on: the
            # start node is visited and the other pair belongs to the opponent.
            if v < board.north and owners[v] == side:
                visited.add(v)
                q.append(v)
    return False


def winner(board, p_to_check=P1):
    """Returns the winning side, or EMPTY. Checks `p_to_check` first."""
    if p_to_check not in (P1, P2):
        raise ValueError(f"Unknown side {p_to_check}.")
    if has_winning_chain(board, p_to_check):
        return p_to_check
    other = opponent(p_to_check)
    if has_winning_chain(board, other):
        return other
    return EMPTY
