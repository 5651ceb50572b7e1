from tqdm import tqdm

from engine import HexBoard, P1, P2, EMPTY, opponent
from montecarlo import MonteCarlo
from oracle import winner

# --- Configuration ---
CONFIG = {
    'board_size': 5,
    'num_games': 20,
    'sims_a': 200,  # Playouts per candidate for agent A
    'sims_b': 50,   # Playouts per candidate for agent B
    'seed': None,
}


def play_game(p1_agent, p2_agent, board_size):
    """Plays one game between two Monte Carlo agents and returns the winner."""
    board = HexBoard(board_size)
    agents = {P1: p1_agent, P2: p2_agent}
    side = P1
    while True:
        row, col = agents[side].choose_move(board, side)
        board.apply_move(row, col, side)
        # A chain needs at least board_size stones
        if board.stone_count(side) >= board_size:
            result = winner(board, side)
            if result != EMPTY:
                return result
        side = opponent(side)


def evaluate(config=CONFIG):
    """Pits two agent configurations against each other, alternating who plays first."""
    seed = config['seed']
    seed_b = None if seed is None else seed + 1
    agent_a = MonteCarlo(config['sims_a'], seed=seed)
    agent_b = MonteCarlo(config['sims_b'], seed=seed_b)
    label_a = f"MC{config['sims_a']}"
    label_b = f"MC{config['sims_b']}"
    half = config['num_games'] // 2

    # --- Match 1: A (P1) vs B (P2) ---
    p1_wins = 0
    print(f"\n--- Starting {half} games: {label_a} (P1) vs {label_b} (P2) ---")
    for _ in tqdm(range(half), desc=f"Games ({label_a} vs {label_b})"):
        if play_game(agent_a, agent_b, config['board_size']) == P1:
            p1_wins += 1

    # --- Match 2: B (P1) vs A (P2) ---
    p2_wins = 0
    print(f"\n--- Starting {half} games: {label_b} (P1) vs {label_a} (P2) ---")
    for _ in tqdm(range(half), desc=f"Games ({label_b} vs {label_a})"):
        if play_game(agent_b, agent_a, config['board_size']) == P2:
            p2_wins += 1

    total_a_wins = p1_wins + p2_wins
    total_games = half * 2

    print("\n--- Overall Results ---")
    print(f"Total Wins for {label_a}: {total_a_wins}/{total_games}")
    print(f"Total Wins for {label_b}: {total_games - total_a_wins}/{total_games}")
    if total_games > 0:
        win_rate = total_a_wins / total_games * 100
        print(f"Win Rate for {label_a}: {win_rate:.2f}%")
    return total_a_wins, total_games


if __name__ == '__main__':
    evaluate()
