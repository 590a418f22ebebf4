from src.draft_engine.essential_selector import (
    is_essential_position,
    pick_essential_player,
)
from src.draft_engine.forced_pick import (
    RosterCapacityError,
    check_essential_capacity,
    must_force_essential_pick,
)
from src.draft_engine.models import (
    NO_PLAYERS_AVAILABLE,
    EssentialNeeds,
    PickDecision,
    ScoredCandidate,
    TieredPlayer,
)
from src.draft_engine.pick_scorer import (
    phase_thresholds,
    score_candidates,
    score_pick,
)
from src.draft_engine.roster_needs import (
    compute_essential_needs,
    count_positions,
    essential_slots_remaining,
)

__all__ = [
    "NO_PLAYERS_AVAILABLE",
    "EssentialNeeds",
    "PickDecision",
    "RosterCapacityError",
    "ScoredCandidate",
    "TieredPlayer",
    "check_essential_capacity",
    "compute_essential_needs",
    "count_positions",
    "essential_slots_remaining",
    "is_essential_position",
    "must_force_essential_pick",
    "phase_thresholds",
    "pick_essential_player",
    "score_candidates",
    "score_pick",
]
