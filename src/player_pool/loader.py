"""Load uploaded player rankings into validated tiered players.

Accepts two formats:
- JSON: a non-empty array of objects with rank, name, team, position, tier
- CSV: a FantasyPros rankings export (RK, TIERS, PLAYER NAME, TEAM, POS)
  where POS carries the positional rank (e.g. "WR12")
"""

import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from src.draft_engine.config import POSITIONS
from src.draft_engine.models import TieredPlayer
from src.player_pool.config import (
    CSV_COLUMN_MAP,
    POSITION_ALIASES,
    REQUIRED_JSON_KEYS,
    UNKNOWN_TEAM,
)

logger = logging.getLogger(__name__)

# Letters (or D/ST) followed by an optional positional rank
_POS_PATTERN = re.compile(r"^([A-Za-z/]+?)(\d+)?$")
_WHITESPACE = re.compile(r"\s+")


class PlayerPoolError(Exception):
    """Raised when uploaded ranking data is malformed."""


def normalize_position(pos_str) -> Optional[str]:
    """Canonical position for a raw position string.

    Examples:
        "WR12" -> "WR"
        "PK3"  -> "K"
        "DEF"  -> "DST"
        "LB1"  -> None
    """
    if pos_str is None or pd.isna(pos_str):
        return None

    m = _POS_PATTERN.match(str(pos_str).strip())
    if not m:
        return None

    letters = m.group(1).upper()
    canonical = POSITION_ALIASES.get(letters, letters)
    return canonical if canonical in POSITIONS else None


def make_player_id(name: str, team: str) -> str:
    """Stable player id from name and team ("Bijan Robinson-ATL" style)."""
    return _WHITESPACE.sub("-", f"{name}-{team}".strip())


def players_from_records(records: Iterable[Dict]) -> List[TieredPlayer]:
    """Validate uploaded player records and build tiered players.

    Returned players are in board order: ascending tier, then rank, then
    upload order.

    Raises:
        PlayerPoolError: on an empty upload, a missing key, an unknown
            position or a non-integer tier.
    """
    df = pd.DataFrame(list(records))
    if df.empty:
        raise PlayerPoolError("Player list must be a non-empty array of players")

    missing = [key for key in REQUIRED_JSON_KEYS if key not in df.columns]
    if missing:
        raise PlayerPoolError(
            f'Each player object must contain the key: "{missing[0]}"'
        )

    df["name"] = df["name"].astype(str).str.strip()
    df["team"] = df["team"].fillna("").astype(str).str.strip()
    df.loc[df["team"] == "", "team"] = UNKNOWN_TEAM

    df["canonical_position"] = df["position"].apply(normalize_position)
    bad = df["canonical_position"].isna()
    if bad.any():
        bad_value = df.loc[bad, "position"].iloc[0]
        raise PlayerPoolError(
            f'Invalid position "{bad_value}". Must be one of: {", ".join(POSITIONS)}'
        )

    df["tier"] = pd.to_numeric(df["tier"], errors="coerce")
    if df["tier"].isna().any():
        bad_name = df.loc[df["tier"].isna(), "name"].iloc[0]
        raise PlayerPoolError(f"Player {bad_name} has no numeric tier")
    fractional = df["tier"] % 1 != 0
    if fractional.any():
        bad = df.loc[fractional].iloc[0]
        raise PlayerPoolError(
            f"Player {bad['name']} has a non-integer tier ({bad['tier']})"
        )
    df["rank"] = pd.to_numeric(df["rank"], errors="coerce")

    df["player_id"] = [
        make_player_id(name, team) for name, team in zip(df["name"], df["team"])
    ]
    dupes = df["player_id"].duplicated()
    if dupes.any():
        logger.warning(
            "Dropping %d duplicate players: %s",
            dupes.sum(),
            df.loc[dupes, "player_id"].tolist(),
        )
        df = df[~dupes].copy()

    df["upload_order"] = range(len(df))
    df = df.sort_values(
        ["tier", "rank", "upload_order"], na_position="last", kind="stable"
    )

    players = [
        TieredPlayer(
            player_id=row.player_id,
            name=row.name,
            position=row.canonical_position,
            team=row.team,
            tier=int(row.tier),
            rank=None if pd.isna(row.rank) else int(row.rank),
        )
        for row in df.itertuples(index=False)
    ]
    logger.info("Loaded %d ranked players across %d tiers",
                len(players), df["tier"].nunique())
    return players


def load_rankings(path: Path) -> List[TieredPlayer]:
    """Load a rankings file (.json or .csv) into tiered players.

    Raises:
        FileNotFoundError: if the file does not exist.
        PlayerPoolError: if the content is malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rankings file not found: {path}")

    suffix = path.suffix.lower()
    logger.info("Reading rankings: %s", path.name)
    if suffix == ".json":
        return players_from_records(_read_json(path))
    if suffix == ".csv":
        return players_from_records(_read_csv(path))
    raise PlayerPoolError(f"Unsupported rankings format '{suffix}' (use .json or .csv)")


def _strip_quotes(value):
    if isinstance(value, str):
        return value.strip('"').strip()
    return value


def _read_json(path: Path) -> List[Dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise PlayerPoolError(f"Error parsing file: {e}") from e

    if not isinstance(data, list) or not data:
        raise PlayerPoolError("JSON must be a non-empty array of players")
    if not all(isinstance(item, dict) for item in data):
        raise PlayerPoolError("Each player entry must be a JSON object")
    return data


def _read_csv(path: Path) -> List[Dict]:
    df = pd.read_csv(path, quotechar='"')

    missing = [col for col in CSV_COLUMN_MAP if col not in df.columns]
    if missing:
        raise PlayerPoolError(f"Rankings CSV missing columns: {missing}")

    df = df[list(CSV_COLUMN_MAP)].rename(columns=CSV_COLUMN_MAP)

    # Strip surrounding quotes from string values
    for col in ("name", "team", "position"):
        df[col] = df[col].apply(_strip_quotes)
    df["rank"] = pd.to_numeric(df["rank"], errors="coerce")

    # Drop rows where RK is NaN (e.g., blank rows)
    df = df.dropna(subset=["rank"])
    return df.to_dict(orient="records")
