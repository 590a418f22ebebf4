"""Run batch auto mock drafts from a rankings file.

Usage:
    python -m src.run_mock_draft RANKINGS [options]

Examples:
    python -m src.run_mock_draft data/rankings.json
    python -m src.run_mock_draft data/rankings.csv --sims 50 --pick 5 --teams 10
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.logging_config import setup_logging
from src.mock_draft.batch_runner import (
    AutoMockSummary,
    run_auto_mock_drafts,
    summarize_auto_mocks,
)
from src.mock_draft.config import (
    AUTO_MOCK_BASE_SEED,
    AUTO_MOCK_PARALLEL_WORKERS,
    AUTO_MOCK_SIMULATIONS,
    DEFAULT_DRAFT_FORMAT,
    DEFAULT_LEAGUE_SIZE,
    DEFAULT_PICK_POSITION,
    DEFAULT_TOTAL_ROUNDS,
    OPPONENT_RANDOMNESS,
)
from src.mock_draft.draft_state import DraftSettings
from src.player_pool.loader import PlayerPoolError, load_rankings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate fantasy football mock drafts with the rule-based draft engine"
    )
    parser.add_argument("rankings", type=Path, help="Rankings file (.json or .csv)")
    parser.add_argument("--teams", type=int, default=DEFAULT_LEAGUE_SIZE,
                        help="Number of teams in the league")
    parser.add_argument("--pick", type=int, default=DEFAULT_PICK_POSITION,
                        help="Your pick position (1-based)")
    parser.add_argument("--format", choices=["snake", "linear"],
                        default=DEFAULT_DRAFT_FORMAT, help="Draft format")
    parser.add_argument("--rounds", type=int, default=DEFAULT_TOTAL_ROUNDS,
                        help="Rounds (roster size per team)")
    parser.add_argument("--sims", type=int, default=AUTO_MOCK_SIMULATIONS,
                        help="Number of simulated drafts")
    parser.add_argument("--workers", type=int, default=AUTO_MOCK_PARALLEL_WORKERS,
                        help="Simulations to run in parallel")
    parser.add_argument("--seed", type=int, default=AUTO_MOCK_BASE_SEED,
                        help="Base random seed")
    parser.add_argument("--randomness", type=float, default=OPPONENT_RANDOMNESS,
                        help="Chance an opponent reaches for a random player")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--log-dir", type=Path, default=None,
                        help="Directory for the log file (default: logs/)")
    return parser


def format_summary(summary: AutoMockSummary) -> str:
    """Render an auto mock summary as plain text."""
    lines = [f"Simulations: {summary.simulations}", "", "Most frequent players:"]
    for name, count in summary.most_frequent_players:
        lines.append(f"  {name:<30} x{count}")

    lines.append("")
    lines.append("Average players per position:")
    for pos, avg in summary.position_averages.items():
        lines.append(f"  {pos:<4} {avg:.2f}")

    lines.append("")
    for label, avg, early in (
        ("K", summary.avg_roster_size_when_k, summary.early_k_picks),
        ("DST", summary.avg_roster_size_when_dst, summary.early_dst_picks),
    ):
        taken = "never taken" if avg is None else f"avg roster size {avg:.2f}"
        lines.append(f"{label} taken: {taken} (early picks: {early})")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_dir)

    settings = DraftSettings(
        league_size=args.teams,
        pick_position=args.pick,
        draft_format=args.format,
        total_rounds=args.rounds,
        mode="mock",
    )

    try:
        players = load_rankings(args.rankings)
        results = run_auto_mock_drafts(
            settings,
            players,
            simulations=args.sims,
            max_workers=args.workers,
            seed=args.seed,
            opponent_randomness=args.randomness,
        )
    except (FileNotFoundError, PlayerPoolError, ValueError) as e:
        logger.error("Auto mock failed: %s", e)
        return 1

    print(format_summary(summarize_auto_mocks(results)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
