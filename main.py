import logging

from engine import HexBoard, MIN_SIZE, MAX_SIZE, P1, P2, EMPTY, opponent
from montecarlo import MonteCarlo
from oracle import winner

# --- Configuration ---
NUM_SIMULATIONS = 1000 # Playouts per candidate move
QUIT = "-1"


def parse_move(command, board_size):
    """Converts a token like 'A1' or 'k11' into a (row, col) tuple."""
    command = command.strip().upper()
    if len(command) < 2 or len(command) > 3:
        raise ValueError(f"{command} is not a valid entry!")

    letter, digits = command[0], command[1:]
    if not ('A' <= letter <= 'K') or not digits.isdigit():
        raise ValueError(f"{command} is not a valid entry!")

    col = ord(letter) - ord('A')
    row = int(digits) - 1
    if col >= board_size or not 0 <= row < board_size:
        raise ValueError(f"{command} is not a valid entry! Entry must be within a size of {board_size}")
    return row, col


def format_move(row, col):
    """Converts (row, col) back to human notation, e.g. (0, 0) -> 'A1'."""
    return f"{chr(ord('A') + col)}{row + 1}"


def ask_board_size(read=input):
    """Prompts until the user enters a size in [MIN_SIZE, MAX_SIZE]."""
    while True:
        answer = read(f"What size board would you like to play with? Enter size ({MIN_SIZE} - {MAX_SIZE}): ")
        if answer.strip() == QUIT:
            return None
        try:
            size = int(answer)
        except ValueError:
            size = 0
        if MIN_SIZE <= size <= MAX_SIZE:
            return size
        print(f"Please enter a valid size between {MIN_SIZE} and {MAX_SIZE}.")


def check_winner(board, side):
    """Asks the oracle only once `side` has enough stones to span the board."""
    if board.stone_count(side) < board.board_size:
        return EMPTY
    return winner(board, side)


def play(board, user, agent, read=input):
    """
    Runs the turn loop until someone wins or the user quits.
    Returns the winning side, or EMPTY if the user quit.
    """
    to_move = P1
    while True:
        if to_move != user:
            print("AI is deciding for the best move...")
            row, col = agent.choose_move(board, to_move)
            board.apply_move(row, col, to_move)
            print(f"AI plays {format_move(row, col)}")
        else:
            command = read("Human, where would you like to place your move? (i.e. A1, B2, etc.): ")
            if command.strip() == QUIT:
                print("You have quit the match.")
                return EMPTY
            try:
                row, col = parse_move(command, board.board_size)
            except ValueError as e:
                print(e)
                continue
            if not board.apply_move(row, col, to_move):
                print(f"{format_move(row, col)} is already occupied. Choose another entry.")
                continue

        board.display()
        result = check_winner(board, to_move)
        if result != EMPTY:
            return result
        to_move = opponent(to_move)


def run_game(read=input, num_simulations=NUM_SIMULATIONS, seed=None):
    """
    Main function to run a game of Hex against the Monte Carlo agent.
    """
    print("-" * 71)
    print("Welcome to the game of Hex. Enter -1 to quit game anytime.")
    board_size = ask_board_size(read)
    if board_size is None:
        print("You have quit the match.")
        return EMPTY
    print("-" * 71)

    board = HexBoard(board_size)
    agent = MonteCarlo(num_simulations, seed=seed)

    print("*" * 41)
    print("Player 1, connects X from North to South")
    print("Player 2, connects O from West to East")
    print("*" * 41)
    board.display()

    print("You, Player 1, are assigned X, while the AI, Player 2, is assigned O")
    swap = read("You will go first. Would you like to go second instead? (Y/N) ")
    user = P2 if swap.strip().upper().startswith('Y') else P1
    if user == P2:
        print("Human, you have agreed to go second, you are now Player 2, sign O")
        print("AI is now Player 1, sign X")

    result = play(board, user, agent, read)

    if result == user:
        print("\nYOU HAVE WON THE GAME.")
    elif result != EMPTY:
        print("AI has won")
    if result != EMPTY:
        print(f"Total stones for player {result}: {board.stone_count(result)}")
    return result


def main():
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    run_game()


if __name__ == '__main__':
    main()
