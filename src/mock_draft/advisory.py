"""Advisory boundary - external pick advice with a deterministic fallback.

An advisor is any callable that takes an ``AdvisoryRequest`` and returns an
``AdvisoryOutcome``. Advisors report failure through the outcome rather than
by raising; ``resolve_pick`` falls back to the draft engine on any failure,
and when the advised player is not on the board.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from src.draft_engine.config import DEFAULT_TOTAL_ROSTER_SLOTS
from src.draft_engine.models import PickDecision, TieredPlayer
from src.draft_engine.pick_scorer import score_pick

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdvisoryRequest:
    """Snapshot of the draft handed to an advisor."""

    team: int
    roster: Tuple[TieredPlayer, ...]
    available: Tuple[TieredPlayer, ...]
    blocked_names: Tuple[str, ...]
    total_capacity: int


@dataclass(frozen=True)
class AdvisoryOutcome:
    """Result of an advisory call: a player name or an error."""

    player_name: Optional[str] = None
    explanation: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.player_name)

    @classmethod
    def success(cls, player_name: str, explanation: str = ""):
        return cls(player_name=player_name, explanation=explanation)

    @classmethod
    def failure(cls, error: str):
        return cls(error=error)


Advisor = Callable[[AdvisoryRequest], AdvisoryOutcome]


def resolve_pick(
    advisor: Optional[Advisor],
    team: int,
    roster: List[TieredPlayer],
    available: List[TieredPlayer],
    position_counts: Dict[str, int],
    total_capacity: int = DEFAULT_TOTAL_ROSTER_SLOTS,
    blocked_names=(),
) -> PickDecision:
    """Ask the advisor for a pick, falling back to the draft engine.

    The engine decides whenever there is no advisor, the advisor reports a
    failure, or the advised player is blocked or not on the board.
    """
    blocked = tuple(sorted(blocked_names))

    if advisor is not None:
        request = AdvisoryRequest(
            team=team,
            roster=tuple(roster),
            available=tuple(available),
            blocked_names=blocked,
            total_capacity=total_capacity,
        )
        outcome = advisor(request)
        if outcome.ok:
            player = next(
                (
                    p for p in available
                    if p.name == outcome.player_name and p.name not in blocked
                ),
                None,
            )
            if player is not None:
                return PickDecision(
                    player=player, explanation=outcome.explanation, reason="advisor"
                )
            logger.warning(
                "Advisor picked %s, which is not on the board; using draft engine",
                outcome.player_name,
            )
        else:
            logger.warning(
                "Advisor failed for team %d (%s); using draft engine",
                team,
                outcome.error or "no player returned",
            )

    return score_pick(
        available,
        position_counts,
        len(roster),
        total_capacity,
        blocked,
    )
