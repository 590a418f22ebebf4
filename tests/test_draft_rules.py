"""Tests for draft rule enforcement."""

from src.mock_draft.draft_rules import DraftRules
from src.mock_draft.draft_state import DraftSettings, DraftState


# ── Helpers ──────────────────────────────────────────────────────────

def _make_rules(board, mode="mock", total_rounds=16):
    settings = DraftSettings(
        league_size=4, pick_position=1, total_rounds=total_rounds, mode=mode
    )
    state = DraftState.create_new(settings, board)
    return DraftRules(state), state


def _first_id(state):
    return state.available_players[0]


# ── Validate Pick ────────────────────────────────────────────────────

class TestValidatePick:
    def test_valid_pick(self, board):
        rules, state = _make_rules(board)
        assert rules.validate_pick(1, _first_id(state)) == (True, None)

    def test_wrong_turn_in_mock_mode(self, board):
        rules, state = _make_rules(board)
        valid, msg = rules.validate_pick(2, _first_id(state))
        assert not valid
        assert msg == "Not team 2's turn (current: 1)"

    def test_any_team_in_assistant_mode(self, board):
        rules, state = _make_rules(board, mode="assistant")
        assert rules.validate_pick(3, _first_id(state)) == (True, None)

    def test_unknown_team(self, board):
        rules, state = _make_rules(board)
        valid, msg = rules.validate_pick(7, _first_id(state))
        assert not valid
        assert "not in this league" in msg

    def test_unknown_player(self, board):
        rules, _ = _make_rules(board)
        valid, msg = rules.validate_pick(1, "ghost-XXX")
        assert not valid
        assert msg == "Player ghost-XXX not found in player pool"

    def test_blocked_player(self, board):
        rules, state = _make_rules(board)
        player = state.get_available_players()[0]
        state.blocked_names.add(player.name)
        valid, msg = rules.validate_pick(1, player.player_id)
        assert not valid
        assert msg == f"{player.name} has been blocked"

    def test_already_drafted(self, board):
        rules, state = _make_rules(board)
        player_id = _first_id(state)
        state.available_players.remove(player_id)
        valid, msg = rules.validate_pick(1, player_id)
        assert not valid
        assert "already been drafted" in msg

    def test_full_roster(self, board):
        rules, state = _make_rules(board, mode="assistant", total_rounds=9)
        state.rosters[2].extend(board[-9:])
        valid, msg = rules.validate_pick(2, _first_id(state))
        assert not valid
        assert msg == "Team 2 roster is full (9/9)"

    def test_draft_complete(self, board):
        rules, state = _make_rules(board)
        state.current_pick = len(state.draft_order) + 1
        valid, msg = rules.validate_pick(1, _first_id(state))
        assert not valid
        assert msg == "Draft is already complete"
