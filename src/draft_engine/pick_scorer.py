"""Pick scorer - rule-based selection of the next pick from a player pool.

Two layers decide a pick:

* **Hard guards**: a forced essential pick when no slack picks remain, and
  an end-of-draft safeguard that secures a missing K/DST in the last picks.
* **Soft scoring**: ``tier - 0.55 * position_priority - essential_bonus``,
  lowest score wins. Priorities and bonuses only nudge the choice, which is
  why the hard guards run first.

Every function here is pure: the pool and counts passed in are never
mutated.
"""

import logging
import math
from typing import Dict, Iterable, List, Tuple

from src.draft_engine.config import (
    DEFAULT_POSITION_PRIORITY,
    DEFAULT_TOTAL_ROSTER_SLOTS,
    END_PHASE_PICKS_LEFT,
    ESSENTIAL_BONUS,
    K_DST_BONUS_MIN_ROSTER,
    LATE_PHASE_FRACTION,
    LATE_PHASE_MIN_ROSTER,
    NEED_PRIORITY_THRESHOLD,
    POSITION_PRIORITY_WEIGHT,
    SAFEGUARD_PICKS_LEFT,
)
from src.draft_engine.essential_selector import pick_essential_player
from src.draft_engine.forced_pick import must_force_essential_pick, remaining_picks
from src.draft_engine.models import (
    EssentialNeeds,
    PickDecision,
    ScoredCandidate,
    TieredPlayer,
)
from src.draft_engine.roster_needs import (
    compute_essential_needs,
    essential_slots_remaining,
)

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------


def score_pick(
    available: Iterable[TieredPlayer],
    position_counts: Dict[str, int],
    roster_size: int,
    total_capacity: int = DEFAULT_TOTAL_ROSTER_SLOTS,
    blocked_names: Iterable[str] = (),
) -> PickDecision:
    """Choose the next pick for a roster.

    Args:
        available: Players still on the board, in board order.
        position_counts: Current roster counts by position.
        roster_size: Number of players already on the roster.
        total_capacity: Total picks the team makes in the draft.
        blocked_names: Player names the user excluded.

    Returns:
        A PickDecision. When every candidate is blocked or the pool is
        exhausted, the decision has ``player`` set to None.
    """
    blocked = set(blocked_names)
    candidates = [p for p in available if p.name not in blocked]
    if not candidates:
        return PickDecision.empty()

    needs = compute_essential_needs(position_counts)
    picks_left = remaining_picks(roster_size, total_capacity)
    slots = essential_slots_remaining(needs)
    if slots > picks_left:
        logger.warning(
            "Roster over-committed: %d essential slots, %d picks left",
            slots,
            picks_left,
        )

    # Hard guard: no slack left to postpone an essential need
    if must_force_essential_pick(roster_size, needs, total_capacity):
        essential = pick_essential_player(candidates, needs)
        if essential is not None:
            logger.debug("Forced essential pick: %s", essential.name)
            return PickDecision(
                player=essential,
                explanation=(
                    f"Tier {essential.tier} {essential.position} - "
                    "essential need fill"
                ),
                reason="essential",
            )
        logger.warning(
            "Forced pick but no essential-eligible player available; "
            "falling back to scoring"
        )

    safeguard = _end_of_draft_safeguard(candidates, needs, picks_left)
    if safeguard is not None:
        logger.debug("End-of-draft safeguard pick: %s", safeguard.name)
        return PickDecision(
            player=safeguard,
            explanation=(
                f"Tier {safeguard.tier} {safeguard.position} - "
                f"securing required {safeguard.position} before the draft ends"
            ),
            reason="safeguard",
        )

    scored = _score_all(candidates, position_counts, needs, roster_size, total_capacity)
    best = scored[0]
    player = best.player
    if best.position_priority > NEED_PRIORITY_THRESHOLD:
        return PickDecision(
            player=player,
            explanation=f"Tier {player.tier} {player.position} - filling position need",
            reason="need",
        )
    return PickDecision(
        player=player,
        explanation=f"Tier {player.tier} {player.position} - best available value",
        reason="value",
    )


def score_candidates(
    available: Iterable[TieredPlayer],
    position_counts: Dict[str, int],
    roster_size: int,
    total_capacity: int = DEFAULT_TOTAL_ROSTER_SLOTS,
) -> List[ScoredCandidate]:
    """Soft-score every candidate, best (lowest score) first.

    Ties keep board order.
    """
    needs = compute_essential_needs(position_counts)
    return _score_all(list(available), position_counts, needs, roster_size, total_capacity)


def phase_thresholds(total_capacity: int = DEFAULT_TOTAL_ROSTER_SLOTS) -> Tuple[int, int]:
    """Roster sizes at which the late and end phases begin.

    Formula::

        late = max(8, floor(0.75 * total_capacity))
        end  = max(late + 1, total_capacity - 2)
    """
    late = max(LATE_PHASE_MIN_ROSTER, math.floor(LATE_PHASE_FRACTION * total_capacity))
    end = max(late + 1, total_capacity - END_PHASE_PICKS_LEFT)
    return late, end


def position_priority(
    position: str,
    counts: Dict[str, int],
    roster_size: int,
    total_capacity: int = DEFAULT_TOTAL_ROSTER_SLOTS,
) -> float:
    """Position priority with diminishing returns as depth builds.

    K and DST are actively deprioritized before the late phase.
    """
    late_threshold, end_threshold = phase_thresholds(total_capacity)
    late = roster_size >= late_threshold
    end = roster_size >= end_threshold
    count = counts.get(position, 0)

    if position == "QB":
        if count == 0:
            return 2.5
        return 0.5 if late and count == 1 else 0.0
    if position == "RB":
        if count < 2:
            return 6.0
        if count < 4:
            return 4.0
        if count < 5:
            return 2.0
        return 0.5
    if position == "WR":
        if count < 2:
            return 6.0
        if count < 5:
            return 5.0
        if count < 6:
            return 2.5
        return 1.0
    if position == "TE":
        if count == 0:
            return 3.5
        return 0.5 if late and count == 1 else 0.0
    if position in ("K", "DST"):
        if count > 0:
            return 0.0
        if end:
            return 8.0
        if late:
            return 1.0
        return -2.0
    return DEFAULT_POSITION_PRIORITY


def essential_bonus(position: str, needs: EssentialNeeds, roster_size: int) -> float:
    """Extra credit for positions that still have an unmet floor."""
    if position == "QB":
        return ESSENTIAL_BONUS["QB"] if needs.need_qb else 0.0
    if position == "TE":
        return ESSENTIAL_BONUS["TE"] if needs.need_te else 0.0
    if position == "RB":
        if needs.needed_rb > 0:
            return ESSENTIAL_BONUS["RB"]
        return ESSENTIAL_BONUS["FLEX"] if needs.need_flex else 0.0
    if position == "WR":
        if needs.needed_wr > 0:
            return ESSENTIAL_BONUS["WR"]
        return ESSENTIAL_BONUS["FLEX"] if needs.need_flex else 0.0
    if position == "DST":
        if needs.need_dst and roster_size >= K_DST_BONUS_MIN_ROSTER:
            return ESSENTIAL_BONUS["DST"]
        return 0.0
    if position == "K":
        if needs.need_k and roster_size >= K_DST_BONUS_MIN_ROSTER:
            return ESSENTIAL_BONUS["K"]
        return 0.0
    return 0.0


# ------------------------------------------------------------------
# Private helpers
# ------------------------------------------------------------------


def _end_of_draft_safeguard(
    candidates: List[TieredPlayer], needs: EssentialNeeds, picks_left: int
):
    """Best missing K (then DST) once two or fewer picks remain."""
    if picks_left > SAFEGUARD_PICKS_LEFT:
        return None
    for position, needed in (("K", needs.need_k), ("DST", needs.need_dst)):
        if not needed:
            continue
        matches = [p for p in candidates if p.position == position]
        if matches:
            return min(matches, key=lambda p: (p.tier, p.name))
    return None


def _score_all(
    candidates: List[TieredPlayer],
    counts: Dict[str, int],
    needs: EssentialNeeds,
    roster_size: int,
    total_capacity: int,
) -> List[ScoredCandidate]:
    scored = []
    for player in candidates:
        priority = position_priority(player.position, counts, roster_size, total_capacity)
        bonus = essential_bonus(player.position, needs, roster_size)
        scored.append(
            ScoredCandidate(
                player=player,
                position_priority=priority,
                essential_bonus=bonus,
                score=player.tier - POSITION_PRIORITY_WEIGHT * priority - bonus,
            )
        )
    scored.sort(key=lambda c: c.score)
    return scored
