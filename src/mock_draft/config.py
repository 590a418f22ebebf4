from src.draft_engine.config import DEFAULT_TOTAL_ROSTER_SLOTS

# Default league settings
DEFAULT_LEAGUE_SIZE = 12
DEFAULT_PICK_POSITION = 1
DEFAULT_DRAFT_FORMAT = "snake"
DEFAULT_SCORING_FORMAT = "ppr"
DEFAULT_TOTAL_ROUNDS = DEFAULT_TOTAL_ROSTER_SLOTS
DEFAULT_DRAFT_MODE = "mock"

MIN_LEAGUE_SIZE = 2
MAX_LEAGUE_SIZE = 20

VALID_DRAFT_FORMATS = {"snake", "linear"}
VALID_SCORING_FORMATS = {"ppr", "half_ppr", "standard"}
VALID_DRAFT_MODES = {"assistant", "mock"}

# Opponents only consider the top N players on the board
CANDIDATE_POOL_SIZE = 15

# Auto mock parameters
AUTO_MOCK_SIMULATIONS = 10
AUTO_MOCK_PARALLEL_WORKERS = 4  # CPU cores for parallel simulation
AUTO_MOCK_BASE_SEED = 42
OPPONENT_RANDOMNESS = 0.15  # chance an opponent ignores the engine

# Aggregation
MOST_FREQUENT_PLAYERS = 10
EARLY_K_DST_ROSTER_SIZE = 12  # K/DST taken before this roster size is "early"
