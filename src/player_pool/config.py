# Keys every uploaded JSON player object must carry
REQUIRED_JSON_KEYS = ("rank", "name", "team", "position", "tier")

# FantasyPros rankings export columns -> uploaded-player keys
CSV_COLUMN_MAP = {
    "RK": "rank",
    "TIERS": "tier",
    "PLAYER NAME": "name",
    "TEAM": "team",
    "POS": "position",
}

# Aliases that map to canonical position names
POSITION_ALIASES = {
    "PK": "K",
    "DEF": "DST",
    "D/ST": "DST",
    "D": "DST",
}

# Team label used when an upload leaves it blank (free agents)
UNKNOWN_TEAM = "FA"
