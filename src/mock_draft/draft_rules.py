"""Draft rule enforcement and pick validation."""

from typing import Optional, Tuple

from src.mock_draft.draft_state import DraftState


class ValidationError(Exception):
    """Raised when a pick violates draft rules."""

    pass


class DraftRules:
    """Enforces all draft rules and validation logic."""

    def __init__(self, draft_state: DraftState):
        self.draft_state = draft_state

    def validate_pick(
        self, team: int, player_id: str
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate if a pick is legal.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        state = self.draft_state

        if state.is_complete:
            return False, "Draft is already complete"

        if team not in state.rosters:
            return False, f"Team {team} is not in this league"

        # Check 1: Is it this team's turn? (Skip in assistant mode)
        if state.settings.mode == "mock":
            current = state.get_current_team()
            if team != current:
                return False, f"Not team {team}'s turn (current: {current})"

        # Check 2: Does player exist in data?
        player = state.get_player(player_id)
        if player is None:
            return False, f"Player {player_id} not found in player pool"

        # Check 3: Is player blocked?
        if player.name in state.blocked_names:
            return False, f"{player.name} has been blocked"

        # Check 4: Is player available?
        if not state.is_player_available(player_id):
            return False, f"{player.name} has already been drafted"

        # Check 5: Roster capacity
        roster_size = len(state.get_roster(team))
        if roster_size >= state.settings.total_rounds:
            return False, (
                f"Team {team} roster is full "
                f"({roster_size}/{state.settings.total_rounds})"
            )

        return True, None
