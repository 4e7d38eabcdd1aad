"""
main.py — Run a Treasure Hunt simulation
========================================

Seats your strategy from my_player.py at a table of demo players,
plays a few rounds on the local chain and prints the results.

    python main.py

The runner will:
  1. Fund the owner and every player
  2. Deploy the engine and join every player each round
  3. Ask each strategy for a direction when it holds the turn
  4. Withdraw the owner's fees at the end
"""

from treasure_hunt import GameRunner, SimulationConfig, format_ether
from treasure_hunt._shared.logging_config import enable_event_mode, setup_logging
from my_player import make_player

# ── Setup logging (JSON file + colored event feed) ──
setup_logging("treasure_hunt.log")
enable_event_mode()

# ── Configuration ──
config = SimulationConfig(
    players=4,
    rounds=3,
    seed=2024,
    bet="0.05 ether",
)

runner = GameRunner(config)
runner.players["0xPlayer01"] = make_player("0xPlayer01", seed=1)

report = runner.run()

for summary in report.rounds:
    print(f"Round {summary.round_number}: {summary.winner} in {summary.moves} moves")
for address, balance in report.balances.items():
    print(f"{address:14} {format_ether(balance)} ETH")
