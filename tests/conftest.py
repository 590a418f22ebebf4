"""Shared fixtures for the draft assistant test suite."""

import json

import pytest

from src.draft_engine.models import TieredPlayer


def _add(board, position, count, tier_of):
    for i in range(count):
        name = f"{position}{i + 1:02d}"
        board.append(
            TieredPlayer(
                player_id=f"{name}-TST",
                name=name,
                position=position,
                team="TST",
                tier=tier_of(i),
                rank=None,
            )
        )


def build_board():
    """Board for a 4-team, 16-round league with K in tier 16, DST in tier 17."""
    board = []
    _add(board, "RB", 24, lambda i: 1 + i // 4)
    _add(board, "WR", 24, lambda i: 1 + i // 4)
    _add(board, "QB", 8, lambda i: 2 + i // 2)
    _add(board, "TE", 8, lambda i: 2 + i // 2)
    _add(board, "K", 6, lambda i: 16)
    _add(board, "DST", 6, lambda i: 17)
    ordered = sorted(board, key=lambda p: p.tier)
    return [
        TieredPlayer(p.player_id, p.name, p.position, p.team, p.tier, rank)
        for rank, p in enumerate(ordered, start=1)
    ]


# ------------------------------------------------------------------
# Lightweight factories: cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def board():
    return build_board()


@pytest.fixture
def rankings_json(tmp_path, board):
    """Uploaded-rankings JSON file for the standard test board."""
    path = tmp_path / "rankings.json"
    records = [
        {
            "rank": p.rank,
            "name": p.name,
            "team": p.team,
            "position": p.position,
            "tier": p.tier,
        }
        for p in board
    ]
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def build_league_board(teams):
    """Board deep enough for every team of a 16-round league to fill its needs.

    K and DST sit below every other tier, so a candidate window near the top
    of the board never shows them.
    """
    board = []
    _add(board, "RB", 7 * teams, lambda i: 1 + i // 8)
    _add(board, "WR", 7 * teams, lambda i: 1 + i // 8)
    _add(board, "QB", 3 * teams, lambda i: 2 + i // 4)
    _add(board, "TE", 3 * teams, lambda i: 2 + i // 4)
    _add(board, "K", teams + 2, lambda i: 20)
    _add(board, "DST", teams + 2, lambda i: 21)
    ordered = sorted(board, key=lambda p: p.tier)
    return [
        TieredPlayer(p.player_id, p.name, p.position, p.team, p.tier, rank)
        for rank, p in enumerate(ordered, start=1)
    ]


@pytest.fixture
def league_board():
    """Board for a 12-team, 16-round league."""
    return build_league_board(12)
