"""Tests for loading uploaded rankings into tiered players."""

import json

import pytest

from src.player_pool.loader import (
    PlayerPoolError,
    load_rankings,
    make_player_id,
    normalize_position,
    players_from_records,
)


def _record(name, position, tier, rank=1, team="TST"):
    return {"rank": rank, "name": name, "team": team, "position": position, "tier": tier}


CSV_HEADER = '"RK",TIERS,"PLAYER NAME",TEAM,"POS","BYE WEEK"\n'


class TestNormalizePosition:
    @pytest.mark.parametrize("raw,expected", [
        ("WR12", "WR"),
        ("rb3", "RB"),
        ("QB", "QB"),
        ("PK3", "K"),
        ("DEF", "DST"),
        ("D/ST1", "DST"),
        ("DST2", "DST"),
        (" TE7 ", "TE"),
    ])
    def test_known_positions(self, raw, expected):
        assert normalize_position(raw) == expected

    @pytest.mark.parametrize("raw", ["LB1", "", "12", None, float("nan")])
    def test_unknown_positions(self, raw):
        assert normalize_position(raw) is None


class TestMakePlayerId:
    def test_name_and_team(self):
        assert make_player_id("Ja'Marr Chase", "CIN") == "Ja'Marr-Chase-CIN"

    def test_collapses_whitespace(self):
        assert make_player_id("A  B", "SF") == "A-B-SF"


class TestPlayersFromRecords:
    def test_board_order_by_tier_then_rank(self):
        records = [
            _record("Late", "RB", 3, rank=1),
            _record("Second", "WR", 1, rank=5),
            _record("First", "QB", 1, rank=2),
        ]
        players = players_from_records(records)
        assert [p.name for p in players] == ["First", "Second", "Late"]

    def test_upload_order_breaks_full_ties(self):
        records = [_record("B", "RB", 2, rank=7), _record("A", "RB", 2, rank=7)]
        assert [p.name for p in players_from_records(records)] == ["B", "A"]

    def test_fields_normalized(self):
        players = players_from_records([_record(" Kicker ", "PK1", "4", rank="9", team="")])
        player = players[0]
        assert player.name == "Kicker"
        assert player.position == "K"
        assert player.team == "FA"
        assert player.tier == 4
        assert player.rank == 9
        assert player.player_id == "Kicker-FA"

    def test_missing_rank_allowed(self):
        players = players_from_records([_record("A", "TE", 2, rank=None)])
        assert players[0].rank is None

    def test_duplicates_dropped(self, caplog):
        records = [_record("A", "RB", 1), _record("A", "RB", 2)]
        players = players_from_records(records)
        assert len(players) == 1
        assert players[0].tier == 1
        assert "duplicate" in caplog.text

    def test_empty_upload(self):
        with pytest.raises(PlayerPoolError, match="non-empty"):
            players_from_records([])

    def test_missing_key(self):
        record = _record("A", "RB", 1)
        del record["tier"]
        with pytest.raises(PlayerPoolError, match='key: "tier"'):
            players_from_records([record])

    def test_invalid_position(self):
        with pytest.raises(PlayerPoolError, match='Invalid position "LB"'):
            players_from_records([_record("A", "LB", 1)])

    def test_non_numeric_tier(self):
        with pytest.raises(PlayerPoolError, match="A has no numeric tier"):
            players_from_records([_record("A", "RB", "elite")])

    def test_fractional_tier_rejected(self):
        records = [_record("A", "RB", 2), _record("B", "WR", 2.7)]
        with pytest.raises(PlayerPoolError, match=r"B has a non-integer tier \(2\.7\)"):
            players_from_records(records)

    def test_whole_number_float_tier_accepted(self):
        players = players_from_records([_record("A", "RB", 3.0)])
        assert players[0].tier == 3


class TestLoadRankings:
    def test_json_file(self, rankings_json, board):
        players = load_rankings(rankings_json)
        assert players == board

    def test_csv_export(self, tmp_path):
        path = tmp_path / "rankings.csv"
        path.write_text(
            CSV_HEADER
            + '"1",1,"Bijan Robinson",ATL,"RB1","5"\n'
            + '"2",1,"Ja\'Marr Chase",CIN,"WR1","10"\n'
            + '"3",9,"Justin Tucker",BAL,"K1","14"\n'
            + ",,,,,\n",
            encoding="utf-8",
        )
        players = load_rankings(path)
        assert [p.name for p in players] == [
            "Bijan Robinson", "Ja'Marr Chase", "Justin Tucker",
        ]
        assert [p.position for p in players] == ["RB", "WR", "K"]
        assert players[1].player_id == "Ja'Marr-Chase-CIN"

    def test_csv_missing_columns(self, tmp_path):
        path = tmp_path / "rankings.csv"
        path.write_text("RK,PLAYER NAME\n1,A\n", encoding="utf-8")
        with pytest.raises(PlayerPoolError, match="missing columns"):
            load_rankings(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_rankings(tmp_path / "nope.json")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "rankings.txt"
        path.write_text("hello", encoding="utf-8")
        with pytest.raises(PlayerPoolError, match="Unsupported"):
            load_rankings(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "rankings.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(PlayerPoolError, match="Error parsing"):
            load_rankings(path)

    def test_json_must_be_array(self, tmp_path):
        path = tmp_path / "rankings.json"
        path.write_text(json.dumps({"name": "A"}), encoding="utf-8")
        with pytest.raises(PlayerPoolError, match="non-empty array"):
            load_rankings(path)
