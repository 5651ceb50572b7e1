import logging

import numpy as np

from engine import EMPTY, NoLegalMovesError, opponent
from oracle import has_winning_chain

logger = logging.getLogger(__name__)

DEFAULT_SIMULATIONS = 1000


def _check_simulations(num_simulations):
    if isinstance(num_simulations, bool) or not isinstance(num_simulations, (int, np.integer)) \
            or num_simulations <= 0:
        raise ValueError(f"Number of simulations must be a positive integer, got {num_simulations!r}.")


class MonteCarlo:
    """
    Flat Monte Carlo move selection.

    Every empty cell is tried in a shuffled order; each candidate is scored by
    random playouts to a full board, and the first candidate with the highest
    win count is played. A candidate is abandoned as soon as it can no longer
    strictly beat the best count seen so far.
    """
    def __init__(self, num_simulations=DEFAULT_SIMULATIONS, seed=None, early_cutoff=True):
        _check_simulations(num_simulations)
        self.num_simulations = num_simulations
        self.early_cutoff = early_cutoff
        # seed=None pulls fresh OS entropy; an int or a Generator makes runs repeatable
        self.rng = np.random.default_rng(seed)
        self.last_stats = {}

    def choose_move(self, board, side, sims_per_candidate=None):
        """Returns the (row, col) with the best playout win rate for `side`."""
        sims = self.num_simulations if sims_per_candidate is None else sims_per_candidate
        _check_simulations(sims)

        candidates = board.empty_cells()
        if not candidates:
            raise NoLegalMovesError("No legal moves left (board is full).")

        order = self.rng.permutation(len(candidates))
        # Each candidate gets its own playout stream, drawn up front so that
        # cutting one candidate short never changes what the next one sees.
        seeds = self.rng.integers(0, 2**63 - 1, size=len(candidates))

        stats = {'candidates': 0, 'playouts': 0, 'cutoffs': 0}
        best_wins, best_move = -1, None
        trial = board.clone()
        scratch = board.clone()

        for idx, seed in zip(order, seeds):
            move = candidates[idx]
            trial.reset_from(board)
            trial.apply_move(move[0], move[1], side)
            stats['candidates'] += 1

            if has_winning_chain(trial, side):
                logger.debug(f"Candidate {move} wins immediately")
                best_wins, best_move = sims, move
                break

            wins = self._rate_candidate(trial, scratch, side, sims, best_wins,
                                        np.random.default_rng(int(seed)), stats)
            if wins is None:
                logger.debug(f"Candidate {move} cut off (best so far {best_wins}/{sims})")
                continue

            logger.debug(f"Candidate {move}: {wins}/{sims}")
            if wins > best_wins:
                best_wins, best_move = wins, move

        self.last_stats = stats
        logger.info(
            f"Chose {best_move} for player {side} with rate {best_wins / sims:.3f} "
            f"({stats['candidates']} candidates, {stats['playouts']} playouts, {stats['cutoffs']} cut off)"
        )
        return best_move

    def _rate_candidate(self, trial, scratch, side, sims, best_wins, rng, stats):
        """
        Runs up to `sims` playouts from `trial` (where `side` has just moved).
        Returns the win count, or None if the candidate was cut off.
        """
        area = trial.board_size * trial.board_size
        empties = np.flatnonzero(trial.nodes[:area] == EMPTY)
        other = opponent(side)

        wins = 0
        for k in range(sims):
            if self.early_cutoff and wins + sims - k <= best_wins:
                stats['cutoffs'] += 1
                return None

            scratch.reset_from(trial)
            scratch.fill(rng.permutation(empties), other, side)
            stats['playouts'] += 1

            # A full board has exactly one winner
            if has_winning_chain(scratch, side):
                wins += 1
        return wins


def choose_move(board, side, sims_per_candidate=DEFAULT_SIMULATIONS, seed=None):
    """One-shot helper around MonteCarlo.choose_move."""
    return MonteCarlo(sims_per_candidate, seed=seed).choose_move(board, side)
