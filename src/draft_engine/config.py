# Roster capacity (rounds x 1 pick per team)
DEFAULT_TOTAL_ROSTER_SLOTS = 16

POSITIONS = ("QB", "RB", "WR", "TE", "K", "DST")

# Per-position floors for RB/WR and the combined RB+WR depth floor
RB_FLOOR = 2
WR_FLOOR = 2
FLEX_FLOOR = 5

# Draft phase thresholds
LATE_PHASE_MIN_ROSTER = 8
LATE_PHASE_FRACTION = 0.75
END_PHASE_PICKS_LEFT = 2

# Picks remaining at which a missing K/DST is taken regardless of score
SAFEGUARD_PICKS_LEFT = 2

# How much position priority offsets tier in the composite score
POSITION_PRIORITY_WEIGHT = 0.55

# Essential bonus applied on top of position priority
ESSENTIAL_BONUS = {
    "QB": 1.2,
    "TE": 1.0,
    "RB": 1.5,
    "WR": 1.5,
    "FLEX": 0.6,
    "DST": 2.2,
    "K": 2.0,
}

# K/DST only receive their essential bonus from this roster size on.
# Fixed literal, does not scale with total roster capacity.
K_DST_BONUS_MIN_ROSTER = 12

# Position priority returned for any position outside POSITIONS
DEFAULT_POSITION_PRIORITY = 1.0

# Priority above which a pick is explained as filling a need
NEED_PRIORITY_THRESHOLD = 2
