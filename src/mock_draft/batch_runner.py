"""Batch auto mock drafts - many independent simulations, aggregated.

Each simulation owns a private DraftState, so workers share nothing and run
in a process pool; ``max_workers`` caps concurrency. Picks within one
simulation stay strictly sequential.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from src.draft_engine.models import TieredPlayer
from src.mock_draft.config import (
    AUTO_MOCK_BASE_SEED,
    AUTO_MOCK_PARALLEL_WORKERS,
    EARLY_K_DST_ROSTER_SIZE,
    MOST_FREQUENT_PLAYERS,
    OPPONENT_RANDOMNESS,
)
from src.mock_draft.draft_controller import DraftController
from src.mock_draft.draft_state import DraftLogEntry, DraftSettings, DraftState

logger = logging.getLogger(__name__)


@dataclass
class AutoMockDraftResult:
    """Outcome of one simulated draft, from the user's team's perspective."""

    simulation: int  # 1-based
    roster: List[TieredPlayer]
    pick_log: List[DraftLogEntry]


@dataclass
class AutoMockSummary:
    """Aggregate view over many simulated drafts."""

    simulations: int
    most_frequent_players: List[tuple]  # (name, times drafted)
    position_averages: Dict[str, float]
    avg_roster_size_when_k: Optional[float]
    avg_roster_size_when_dst: Optional[float]
    early_k_picks: int
    early_dst_picks: int
    roster_sizes: List[int] = field(default_factory=list)


def simulate_draft(
    settings: DraftSettings,
    players: List[TieredPlayer],
    simulation: int = 1,
    seed: Optional[int] = None,
    opponent_randomness: float = OPPONENT_RANDOMNESS,
) -> AutoMockDraftResult:
    """Run one fully automated mock draft."""
    state = DraftState.create_new(replace(settings, mode="mock"), players)
    controller = DraftController(
        state,
        opponent_randomness=opponent_randomness,
        rng=np.random.default_rng(seed),
    )
    controller.run_to_completion()

    user = state.user_team
    return AutoMockDraftResult(
        simulation=simulation,
        roster=list(state.get_roster(user)),
        pick_log=[entry for entry in state.draft_log if entry.team == user],
    )


def _simulation_worker(args) -> AutoMockDraftResult:
    """Worker function for parallel simulation - module level for pickling."""
    settings, players, simulation, seed, opponent_randomness = args
    return simulate_draft(settings, players, simulation, seed, opponent_randomness)


def run_auto_mock_drafts(
    settings: DraftSettings,
    players: List[TieredPlayer],
    simulations: int,
    max_workers: int = AUTO_MOCK_PARALLEL_WORKERS,
    seed: int = AUTO_MOCK_BASE_SEED,
    opponent_randomness: float = OPPONENT_RANDOMNESS,
) -> List[AutoMockDraftResult]:
    """Run ``simulations`` independent mock drafts.

    Args:
        settings: League settings; the mode is forced to mock.
        players: Player pool in board order.
        simulations: Number of drafts to simulate.
        max_workers: Concurrency limit. 1 runs in-process.
        seed: Base seed; each simulation gets an independent child seed.
        opponent_randomness: Chance an opponent reaches for a random player
            in its candidate window.

    Returns:
        Results ordered by simulation index.
    """
    if simulations < 1:
        raise ValueError("simulations must be at least 1")
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1")

    settings.validate()

    # Independent child seeds per simulation
    child_seeds = np.random.SeedSequence(seed).generate_state(simulations)
    worker_args = [
        (settings, players, i + 1, int(child_seeds[i]), opponent_randomness)
        for i in range(simulations)
    ]

    logger.info(
        "Running %d auto mock drafts (%d teams, pick %d, %d workers)",
        simulations,
        settings.league_size,
        settings.pick_position,
        max_workers,
    )

    if max_workers == 1:
        results = [_simulation_worker(args) for args in worker_args]
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(_simulation_worker, worker_args))

    logger.info("Completed %d auto mock drafts", len(results))
    return sorted(results, key=lambda r: r.simulation)


def summarize_auto_mocks(results: List[AutoMockDraftResult]) -> AutoMockSummary:
    """Aggregate simulated rosters: frequent players, positions, K/DST timing."""
    if not results:
        raise ValueError("No auto mock results to summarize")

    rows = [
        {
            "simulation": result.simulation,
            "name": entry.player.name,
            "position": entry.player.position,
            "roster_size": index,
        }
        for result in results
        for index, entry in enumerate(result.pick_log, start=1)
    ]
    picks = pd.DataFrame(rows, columns=["simulation", "name", "position", "roster_size"])

    frequency = picks["name"].value_counts(sort=False)
    frequency = frequency.sort_values(ascending=False, kind="stable")
    most_frequent = [
        (name, int(count))
        for name, count in frequency.head(MOST_FREQUENT_PLAYERS).items()
    ]

    position_averages = {
        pos: round(float(total) / len(results), 2)
        for pos, total in picks.groupby("position").size().sort_index().items()
    }

    k_sizes = _first_taken_sizes(picks, "K")
    dst_sizes = _first_taken_sizes(picks, "DST")

    return AutoMockSummary(
        simulations=len(results),
        most_frequent_players=most_frequent,
        position_averages=position_averages,
        avg_roster_size_when_k=_mean_or_none(k_sizes),
        avg_roster_size_when_dst=_mean_or_none(dst_sizes),
        early_k_picks=int((k_sizes < EARLY_K_DST_ROSTER_SIZE).sum()),
        early_dst_picks=int((dst_sizes < EARLY_K_DST_ROSTER_SIZE).sum()),
        roster_sizes=[len(r.roster) for r in results],
    )


def _first_taken_sizes(picks: pd.DataFrame, position: str) -> pd.Series:
    """Roster size at which each simulation first took ``position``."""
    taken = picks[picks["position"] == position]
    return taken.groupby("simulation")["roster_size"].min()


def _mean_or_none(sizes: pd.Series) -> Optional[float]:
    if sizes.empty:
        return None
    return round(float(sizes.mean()), 2)
