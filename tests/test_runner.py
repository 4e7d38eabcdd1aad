# Area: Runner Tests
"""Tests for the GameRunner simulation loop."""

import pytest
from unittest.mock import Mock

from treasure_hunt.config import SimulationConfig
from treasure_hunt.errors import InsufficientFunds
from treasure_hunt.runner import GameRunner

ETHER = 10 ** 18


def make_config(**overrides):
    """Quiet, seeded config with a generous move limit."""
    settings = {
        "players": 3,
        "rounds": 2,
        "seed": 7,
        "max_turns": 5000,
        "show_events": False,
    }
    settings.update(overrides)
    return SimulationConfig(**settings)


class TestSetup:
    """Tests for GameRunner.setup()."""

    def test_player_addresses(self):
        runner = GameRunner(make_config(players=2))
        assert runner.player_addresses() == ["0xPlayer01", "0xPlayer02"]

    def test_funds_accounts_and_deploys(self):
        runner = GameRunner(make_config())
        engine = runner.setup()

        assert engine.owner == "0xOwner"
        assert engine.is_active is True
        for address in runner.players:
            assert runner.chain.balance_of(address) == ETHER

    def test_event_display_subscribed(self, capsys):
        runner = GameRunner(make_config(rounds=1, show_events=True))
        runner.run()
        assert "TREASURE-FOUND" in capsys.readouterr().out


class TestRun:
    """Tests for GameRunner.run()."""

    def test_rounds_finish_with_winners(self):
        report = GameRunner(make_config()).run()

        assert [s.round_number for s in report.rounds] == [1, 2]
        for summary in report.rounds:
            assert summary.finished is True
            assert summary.winner in ("0xPlayer01", "0xPlayer02", "0xPlayer03")
            assert summary.pot == 3 * 10 ** 16
            assert summary.reward == summary.pot * 90 // 100

    def test_fees_withdrawn_to_owner(self):
        runner = GameRunner(make_config())
        report = runner.run()

        expected_fees = sum(s.pot - s.reward for s in report.rounds)
        assert report.fees_withdrawn == expected_fees
        assert report.balances["0xOwner"] == ETHER + expected_fees
        assert runner.chain.balance_of(runner.chain.contract_address) == 0

    def test_value_is_conserved(self):
        runner = GameRunner(make_config(players=4, rounds=3))
        report = runner.run()
        assert sum(report.balances.values()) == 5 * ETHER

    def test_same_seed_same_report(self):
        first = GameRunner(make_config()).run()
        second = GameRunner(make_config()).run()
        assert first == second

    def test_unfinished_round_stops_run(self):
        runner = GameRunner(make_config(rounds=3, max_turns=4))
        engine = runner.setup()
        engine.move = Mock(return_value=[])

        report = runner.run()

        assert len(report.rounds) == 1
        summary = report.rounds[0]
        assert summary.finished is False
        assert summary.winner is None
        assert summary.moves == 4
        assert report.fees_withdrawn == 0

    def test_players_cannot_afford_bet(self):
        runner = GameRunner(make_config(starting_balance=10 ** 15))
        with pytest.raises(InsufficientFunds):
            runner.run()
