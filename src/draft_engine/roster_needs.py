"""Roster needs model - which essential slots a roster still has to fill."""

from typing import Dict, Iterable

from src.draft_engine.config import FLEX_FLOOR, POSITIONS, RB_FLOOR, WR_FLOOR
from src.draft_engine.models import EssentialNeeds, TieredPlayer


def count_positions(players: Iterable[TieredPlayer]) -> Dict[str, int]:
    """Count roster players by position, with every position present."""
    counts = {pos: 0 for pos in POSITIONS}
    for player in players:
        counts[player.position] = counts.get(player.position, 0) + 1
    return counts


def compute_essential_needs(counts: Dict[str, int]) -> EssentialNeeds:
    """Compute unmet essential needs from position counts.

    Positions missing from ``counts`` are treated as zero. The flex need is
    independent of the per-position floors: 2 RB + 2 WR still needs flex.
    """
    rb = counts.get("RB", 0)
    wr = counts.get("WR", 0)
    return EssentialNeeds(
        need_qb=counts.get("QB", 0) == 0,
        need_te=counts.get("TE", 0) == 0,
        need_dst=counts.get("DST", 0) == 0,
        need_k=counts.get("K", 0) == 0,
        needed_rb=max(0, RB_FLOOR - rb),
        needed_wr=max(0, WR_FLOOR - wr),
        need_flex=(rb + wr) < FLEX_FLOOR,
    )


def essential_slots_remaining(needs: EssentialNeeds) -> int:
    """Number of future picks that must go to essential categories."""
    return (
        int(needs.need_qb)
        + int(needs.need_te)
        + int(needs.need_dst)
        + int(needs.need_k)
        + needs.needed_rb
        + needs.needed_wr
        + int(needs.need_flex)
    )
