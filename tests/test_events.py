# Area: Engine Tests
"""Tests for event records, snapshots and the event display."""

import io
from unittest.mock import Mock

from treasure_hunt._engine.engine import TreasureHuntEngine
from treasure_hunt._engine.enums import Direction
from treasure_hunt._engine.events import (
    GameStarted,
    GameWon,
    InvalidMove,
    PlayerMoved,
    TreasureMoved,
)
from treasure_hunt._engine.randomness import FixedSequenceRandomness
from treasure_hunt._shared.event_display import EventDisplay, RESET

OWNER = "0xOwner"
ALICE = "0xAlice"
BOB = "0xBob"
MIN_BET = 10 ** 16


class TestEventRecords:
    """Tests for GameEvent dataclasses."""

    def test_name(self):
        assert GameWon(1, ALICE, 5).name == "GameWon"

    def test_to_dict(self):
        event = PlayerMoved(2, ALICE, 55, 45, Direction.UP)
        assert event.to_dict() == {
            "event": "PlayerMoved",
            "round_number": 2,
            "player": ALICE,
            "from_position": 55,
            "to_position": 45,
            "direction": 0,
        }

    def test_started_carries_round_only(self):
        assert GameStarted(4).to_dict() == {"event": "GameStarted", "round_number": 4}


class TestSnapshot:
    """Tests for TreasureHuntEngine.snapshot()."""

    def test_players_in_turn_order(self):
        engine = TreasureHuntEngine(OWNER, Mock(), FixedSequenceRandomness([98, 37, 12]))
        engine.join_game(ALICE, MIN_BET)
        engine.join_game(BOB, MIN_BET)

        snapshot = engine.snapshot()

        assert snapshot["round_number"] == 1
        assert snapshot["active"] is True
        assert snapshot["treasure_position"] == 98
        assert snapshot["pot"] == 2 * MIN_BET
        assert snapshot["current_player"] == ALICE
        assert [p["address"] for p in snapshot["players"]] == [ALICE, BOB]
        assert snapshot["players"][0] == {
            "address": ALICE,
            "position": 37,
            "row": 3,
            "col": 7,
            "is_active": True,
        }


class TestEventDisplay:
    """Tests for EventDisplay formatting."""

    def test_format_line(self):
        display = EventDisplay()
        line = display.format(GameWon(3, ALICE, 18 * 10 ** 17))

        assert "ROUND: 003" in line
        assert "TREASURE-FOUND" in line
        assert line.endswith("0xAlice wins 1.8 ETH")

    def test_treasure_moved_line(self):
        line = EventDisplay().format(TreasureMoved(1, 98, 16, "divisible_by_five"))
        assert line.endswith("98 → 16 (divisible_by_five)")

    def test_show_without_color(self):
        stream = io.StringIO()
        EventDisplay(stream=stream, color=False).show(InvalidMove(1, ALICE, Direction.LEFT))

        output = stream.getvalue()
        assert "INVALID-MOVE" in output
        assert "0xAlice LEFT blocked by the edge" in output
        assert RESET not in output

    def test_subscribed_display_sees_committed_events(self):
        stream = io.StringIO()
        engine = TreasureHuntEngine(OWNER, Mock(), FixedSequenceRandomness([98, 37]))
        engine.subscribe(EventDisplay(stream=stream, color=False).show)

        engine.join_game(ALICE, MIN_BET)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 2
        assert "JOINED" in lines[0]
        assert "NEXT-TURN" in lines[1]
