"""Draft controller - orchestrates pick flow and state updates."""

import logging
from typing import Dict, List, Optional

import numpy as np

from src.draft_engine.config import SAFEGUARD_PICKS_LEFT
from src.draft_engine.forced_pick import remaining_picks
from src.draft_engine.models import PickDecision, TieredPlayer
from src.draft_engine.roster_needs import (
    compute_essential_needs,
    essential_slots_remaining,
)
from src.mock_draft.advisory import Advisor, resolve_pick
from src.mock_draft.draft_rules import DraftRules, ValidationError
from src.mock_draft.draft_state import DraftLogEntry, DraftState

logger = logging.getLogger(__name__)


class DraftController:
    """Main controller for draft orchestration.

    Coordinates between DraftRules (validation), the advisory boundary /
    draft engine (pick decisions) and DraftState (state mutation).

    Opponents may be made less predictable with ``opponent_randomness``:
    the chance an opponent takes a random player from its candidate window
    instead of the engine's choice. ``rng`` makes that reproducible.
    """

    def __init__(
        self,
        draft_state: DraftState,
        advisor: Optional[Advisor] = None,
        opponent_randomness: float = 0.0,
        rng: Optional[np.random.Generator] = None,
    ):
        if not 0.0 <= opponent_randomness <= 1.0:
            raise ValueError("opponent_randomness must be between 0 and 1")
        self.draft_state = draft_state
        self.rules = DraftRules(draft_state)
        self.advisor = advisor
        self.opponent_randomness = opponent_randomness
        self.rng = rng if rng is not None else np.random.default_rng()

    # ------------------------------------------------------------------
    # Picks
    # ------------------------------------------------------------------

    def make_pick(self, team: int, player_id: str, explanation: str = "") -> DraftLogEntry:
        """Validate and execute a draft pick.

        Args:
            team: Team number (1-based) making the pick.
            player_id: ID of the player being drafted.
            explanation: Why the player was chosen, kept in the draft log.

        Returns:
            The DraftLogEntry recorded for the pick.

        Raises:
            ValidationError: If the pick is illegal (wrong turn, player
                already drafted or blocked, roster full, draft complete, etc.)
        """
        is_valid, error_msg = self.rules.validate_pick(team, player_id)
        if not is_valid:
            logger.warning("Invalid pick attempted: %s", error_msg)
            raise ValidationError(error_msg)

        state = self.draft_state
        player = state.get_player(player_id)

        entry = DraftLogEntry(
            pick=state.current_pick,
            round=state.current_round(),
            pick_in_round=state.current_pick_in_round(),
            team=team,
            player=player,
            explanation=explanation,
        )

        state.rosters[team].append(player)
        state.available_players.remove(player_id)
        state.draft_log.append(entry)

        logger.info(
            "Pick %d (Rd %d): Team %d selects %s (%s, tier %d)",
            entry.pick,
            entry.round,
            team,
            player.name,
            player.position,
            player.tier,
        )

        state.advance_to_next_pick()
        return entry

    def block_player(self, player_id: str):
        """Remove a player from the board and never recommend them."""
        player = self.draft_state.get_player(player_id)
        if player is None:
            raise ValidationError(f"Player {player_id} not found in player pool")
        self.draft_state.blocked_names.add(player.name)
        if player_id in self.draft_state.available_players:
            self.draft_state.available_players.remove(player_id)
        logger.info("Blocked %s", player.name)

    def mark_drafted(self, player_id: str):
        """Assistant mode: another team took this player.

        The pick still uses up a slot in the draft order, so the user's
        later picks are logged with the right pick and round numbers.
        """
        self._require_mode("assistant")
        state = self.draft_state
        if state.is_complete:
            raise ValidationError("Draft is already complete")
        if not state.is_player_available(player_id):
            raise ValidationError(f"Player {player_id} is not on the board")
        state.available_players.remove(player_id)
        logger.info("Marked %s as drafted", state.get_player(player_id).name)
        state.advance_to_next_pick()

    def add_to_my_team(self, player_id: str, explanation: str = "") -> DraftLogEntry:
        """Assistant mode: the user drafted this player."""
        self._require_mode("assistant")
        return self.make_pick(self.draft_state.user_team, player_id, explanation)

    # ------------------------------------------------------------------
    # Decisions
    # ------------------------------------------------------------------

    def recommend_pick(self, team: Optional[int] = None) -> PickDecision:
        """Recommend the next pick for a team (the user's by default)."""
        if team is None:
            team = self.draft_state.user_team
        return self._decide(team, self.draft_state.get_available_players())

    def auto_pick(self, team: int) -> Optional[DraftLogEntry]:
        """Make an automated pick for ``team``.

        Opponents only consider the top ``candidate_pool_size`` players on the
        board, unless a forced essential pick or the end-of-draft K/DST
        safeguard is due. Returns None when the board is empty.
        """
        state = self.draft_state
        if not state.available_players:
            logger.warning("No available players left to pick")
            return None

        # Essential picks see the whole board so the hard guards can act
        windowed = team != state.user_team and not self._essential_pick_due(team)
        window = state.settings.candidate_pool_size if windowed else None
        candidates = state.get_available_players(window)

        if windowed and self._roll_random_pick():
            reachable = [p for p in candidates if p.name not in state.blocked_names]
            if reachable:
                player = reachable[int(self.rng.integers(len(reachable)))]
                return self.make_pick(
                    team, player.player_id,
                    f"Tier {player.tier} {player.position} - opponent reach",
                )

        decision = self._decide(team, candidates)
        if decision.is_empty:
            # Whole window blocked; fall back to the rest of the board
            decision = self._decide(team, state.get_available_players())
        if decision.is_empty:
            logger.warning("Team %d has no eligible players left", team)
            return None

        return self.make_pick(team, decision.player.player_id, decision.explanation)

    def simulate_until_user_turn(self) -> List[DraftLogEntry]:
        """Mock mode: simulate opponent picks until the user is on the clock."""
        self._require_mode("mock")
        entries = []
        state = self.draft_state
        while not state.is_complete and not state.is_users_turn():
            entry = self.auto_pick(state.get_current_team())
            if entry is None:
                break
            entries.append(entry)
        return entries

    def run_to_completion(self) -> List[DraftLogEntry]:
        """Mock mode: auto-pick for every team, the user's included."""
        self._require_mode("mock")
        entries = []
        state = self.draft_state
        while not state.is_complete:
            entry = self.auto_pick(state.get_current_team())
            if entry is None:
                break
            entries.append(entry)
        return entries

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_complete(self) -> bool:
        """Whether the draft is finished."""
        return self.draft_state.is_complete

    def get_current_team(self) -> Optional[int]:
        """Get the team currently on the clock."""
        return self.draft_state.get_current_team()

    def get_available_players(self, position: Optional[str] = None) -> List[TieredPlayer]:
        """Players on the board, optionally filtered to one position."""
        players = self.draft_state.get_available_players()
        if position is None:
            return players
        return [p for p in players if p.position == position]

    def get_draft_summary(self) -> Dict:
        """Generate summary of draft results so far."""
        state = self.draft_state
        return {
            "draft_id": state.draft_id,
            "completed_at": state.completed_at,
            "is_complete": state.is_complete,
            "total_picks": len(state.draft_log),
            "teams": [
                {
                    "team": team,
                    "is_user": team == state.user_team,
                    "roster": [p.name for p in roster],
                    "position_counts": state.position_counts(team),
                }
                for team, roster in state.rosters.items()
            ],
        }

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _decide(self, team: int, available: List[TieredPlayer]) -> PickDecision:
        state = self.draft_state
        roster = state.get_roster(team)
        return resolve_pick(
            self.advisor,
            team,
            roster,
            available,
            state.position_counts(team),
            state.settings.total_rounds,
            state.blocked_names,
        )

    def _essential_pick_due(self, team: int) -> bool:
        """Whether the engine must fill an essential need with this pick."""
        state = self.draft_state
        needs = compute_essential_needs(state.position_counts(team))
        picks_left = remaining_picks(
            len(state.get_roster(team)), state.settings.total_rounds
        )
        if essential_slots_remaining(needs) >= picks_left:
            return True
        return picks_left <= SAFEGUARD_PICKS_LEFT and (needs.need_k or needs.need_dst)

    def _roll_random_pick(self) -> bool:
        if self.opponent_randomness <= 0.0:
            return False
        return bool(self.rng.random() < self.opponent_randomness)

    def _require_mode(self, mode: str):
        if self.draft_state.settings.mode != mode:
            raise ValidationError(
                f"Only available in {mode} mode "
                f"(draft is in {self.draft_state.settings.mode} mode)"
            )
