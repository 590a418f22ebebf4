"""Value types consumed and produced by the draft engine."""

from dataclasses import dataclass
from typing import Optional

NO_PLAYERS_AVAILABLE = "No available players"


@dataclass(frozen=True)
class TieredPlayer:
    """A ranked player annotated with its value tier (lower is better)."""

    player_id: str
    name: str
    position: str
    team: str
    tier: int
    rank: Optional[int] = None


@dataclass(frozen=True)
class EssentialNeeds:
    """Unmet roster requirements at a point in time.

    Derived from position counts by ``compute_essential_needs``; never
    updated in place.
    """

    need_qb: bool
    need_te: bool
    need_dst: bool
    need_k: bool
    needed_rb: int  # remaining to reach the RB floor
    needed_wr: int  # remaining to reach the WR floor
    need_flex: bool  # RB + WR below the combined depth floor


@dataclass(frozen=True)
class ScoredCandidate:
    """Score breakdown for a single candidate."""

    player: TieredPlayer
    position_priority: float
    essential_bonus: float
    score: float


@dataclass(frozen=True)
class PickDecision:
    """Outcome of a pick decision.

    ``reason`` is one of ``essential``, ``safeguard``, ``need``, ``value``,
    ``advisor`` or ``empty``.
    """

    player: Optional[TieredPlayer]
    explanation: str
    reason: str

    @property
    def player_name(self) -> str:
        if self.player is None:
            return NO_PLAYERS_AVAILABLE
        return self.player.name

    @property
    def is_empty(self) -> bool:
        return self.player is None

    @classmethod
    def empty(cls, explanation: str = "All available players are blocked"):
        return cls(player=None, explanation=explanation, reason="empty")
