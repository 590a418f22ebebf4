"""Draft state data models - single source of truth for all draft information."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Set
import uuid

from src.draft_engine.forced_pick import check_essential_capacity
from src.draft_engine.models import TieredPlayer
from src.draft_engine.roster_needs import compute_essential_needs, count_positions
from src.mock_draft.config import (
    CANDIDATE_POOL_SIZE,
    DEFAULT_DRAFT_FORMAT,
    DEFAULT_DRAFT_MODE,
    DEFAULT_LEAGUE_SIZE,
    DEFAULT_PICK_POSITION,
    DEFAULT_SCORING_FORMAT,
    DEFAULT_TOTAL_ROUNDS,
    MAX_LEAGUE_SIZE,
    MIN_LEAGUE_SIZE,
    VALID_DRAFT_FORMATS,
    VALID_DRAFT_MODES,
    VALID_SCORING_FORMATS,
)


@dataclass
class DraftSettings:
    """League and draft configuration settings."""

    league_size: int = DEFAULT_LEAGUE_SIZE
    pick_position: int = DEFAULT_PICK_POSITION  # 1-based team number of the user
    draft_format: str = DEFAULT_DRAFT_FORMAT  # "snake" or "linear"
    scoring_format: str = DEFAULT_SCORING_FORMAT  # "ppr", "half_ppr", "standard"
    total_rounds: int = DEFAULT_TOTAL_ROUNDS  # roster capacity per team
    mode: str = DEFAULT_DRAFT_MODE  # "assistant" or "mock"
    candidate_pool_size: int = CANDIDATE_POOL_SIZE

    def validate(self):
        """Raise ValueError for settings no draft can run with."""
        if not MIN_LEAGUE_SIZE <= self.league_size <= MAX_LEAGUE_SIZE:
            raise ValueError(
                f"League size must be between {MIN_LEAGUE_SIZE} and "
                f"{MAX_LEAGUE_SIZE} (got {self.league_size})"
            )
        if not 1 <= self.pick_position <= self.league_size:
            raise ValueError(
                f"Pick position ({self.pick_position}) must be between 1 "
                f"and {self.league_size}"
            )
        if self.draft_format not in VALID_DRAFT_FORMATS:
            raise ValueError(
                f"Invalid draft format '{self.draft_format}'. "
                f"Must be one of: {sorted(VALID_DRAFT_FORMATS)}"
            )
        if self.scoring_format not in VALID_SCORING_FORMATS:
            raise ValueError(
                f"Invalid scoring format '{self.scoring_format}'. "
                f"Must be one of: {sorted(VALID_SCORING_FORMATS)}"
            )
        if self.mode not in VALID_DRAFT_MODES:
            raise ValueError(
                f"Invalid draft mode '{self.mode}'. "
                f"Must be one of: {sorted(VALID_DRAFT_MODES)}"
            )
        if self.total_rounds < 1:
            raise ValueError("total_rounds must be at least 1")
        if self.candidate_pool_size < 1:
            raise ValueError("candidate_pool_size must be at least 1")

    def total_picks(self) -> int:
        return self.league_size * self.total_rounds


@dataclass
class DraftLogEntry:
    """Represents a single draft pick."""

    pick: int
    round: int
    pick_in_round: int
    team: int
    player: TieredPlayer
    explanation: str = ""
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


def build_draft_order(league_size: int, total_rounds: int, draft_format: str) -> List[int]:
    """Team number (1-based) on the clock for every overall pick.

    Snake drafts reverse the order in even rounds.
    """
    order = []
    for round_number in range(1, total_rounds + 1):
        picks = list(range(1, league_size + 1))
        if draft_format == "snake" and round_number % 2 == 0:
            picks.reverse()
        order.extend(picks)
    return order


@dataclass
class DraftState:
    """Complete draft state - single source of truth."""

    draft_id: str
    settings: DraftSettings
    draft_start_time: str
    draft_order: List[int]
    players: Dict[str, TieredPlayer]
    available_players: List[str]  # player ids in board order
    rosters: Dict[int, List[TieredPlayer]]
    draft_log: List[DraftLogEntry] = field(default_factory=list)
    blocked_names: Set[str] = field(default_factory=set)
    current_pick: int = 1
    completed_at: Optional[str] = None

    @classmethod
    def create_new(
        cls, settings: DraftSettings, players: List[TieredPlayer]
    ) -> "DraftState":
        """Factory method to create a new draft.

        ``players`` must already be in board order (see
        ``src.player_pool.loader``).

        Raises:
            ValueError: for invalid settings.
            RosterCapacityError: if the roster capacity cannot hold the
                essential position floors.
        """
        settings.validate()
        check_essential_capacity(
            0, compute_essential_needs(count_positions([])), settings.total_rounds
        )

        return cls(
            draft_id=str(uuid.uuid4()),
            settings=settings,
            draft_start_time=datetime.now().isoformat(),
            draft_order=build_draft_order(
                settings.league_size, settings.total_rounds, settings.draft_format
            ),
            players={p.player_id: p for p in players},
            available_players=[p.player_id for p in players],
            rosters={team: [] for team in range(1, settings.league_size + 1)},
        )

    @property
    def user_team(self) -> int:
        return self.settings.pick_position

    @property
    def is_complete(self) -> bool:
        return self.current_pick > len(self.draft_order)

    def get_current_team(self) -> Optional[int]:
        """Team currently on the clock, or None once the draft is over."""
        if self.is_complete:
            return None
        return self.draft_order[self.current_pick - 1]

    def is_users_turn(self) -> bool:
        return self.get_current_team() == self.user_team

    def current_round(self) -> int:
        return (self.current_pick - 1) // self.settings.league_size + 1

    def current_pick_in_round(self) -> int:
        return (self.current_pick - 1) % self.settings.league_size + 1

    def get_roster(self, team: int) -> List[TieredPlayer]:
        return self.rosters[team]

    def position_counts(self, team: int) -> Dict[str, int]:
        """Fresh position counts for a team's roster."""
        return count_positions(self.rosters[team])

    def is_player_available(self, player_id: str) -> bool:
        """Check if player is still on the board."""
        return player_id in self.available_players

    def get_player(self, player_id: str) -> Optional[TieredPlayer]:
        return self.players.get(player_id)

    def get_available_players(self, limit: Optional[int] = None) -> List[TieredPlayer]:
        """Players still on the board, in board order."""
        ids = self.available_players if limit is None else self.available_players[:limit]
        return [self.players[pid] for pid in ids]

    def find_available_by_name(self, name: str) -> Optional[TieredPlayer]:
        for pid in self.available_players:
            if self.players[pid].name == name:
                return self.players[pid]
        return None

    def advance_to_next_pick(self):
        """Move to next pick and stamp completion when the order runs out."""
        if self.is_complete:
            return
        self.current_pick += 1
        if self.is_complete and not self.completed_at:
            self.completed_at = datetime.now().isoformat()
