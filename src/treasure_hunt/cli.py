"""
treasure_hunt.cli — Command-line interface
==========================================

Runs a local Treasure Hunt simulation with demo players.

Usage:
    python -m treasure_hunt                          # 3 players, 1 round
    python -m treasure_hunt --players 5 --rounds 3 --seed 42
    python -m treasure_hunt --config simulation.json --quiet

Settings come from (later wins): defaults, --config JSON file,
.env / TREASURE_HUNT_* environment variables, command-line flags.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import SimulationConfig, load_config
from .errors import TreasureHuntError
from .runner import GameRunner, SimulationReport
from .units import format_ether
from ._shared.logging_config import (
    disable_event_mode,
    enable_event_mode,
    log_engine_error,
    setup_logging,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="treasure-hunt",
        description="Treasure Hunt - simulate rounds of the grid betting game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m treasure_hunt --players 4 --rounds 2 --seed 7
  python -m treasure_hunt --bet "0.05 ether" --max-turns 500
  TREASURE_HUNT_SEED=7 python -m treasure_hunt --config simulation.json
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--players", type=int, help="Number of demo players")
    parser.add_argument("--rounds", type=int, help="Rounds to play")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible run")
    parser.add_argument("--bet", type=str, help='Bet per player, in wei or e.g. "0.01 ether"')
    parser.add_argument("--max-turns", type=int, help="Move limit per round")
    parser.add_argument("--log-file", type=str, help="Path of the JSON log file")
    parser.add_argument("--log-level", type=str, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Hide the live event feed and show standard logs instead",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Merge command-line overrides into the loaded config."""
    config = load_config(args.config)
    overrides = {
        "players": args.players,
        "rounds": args.rounds,
        "seed": args.seed,
        "bet": args.bet,
        "max_turns": args.max_turns,
        "log_file": args.log_file,
        "log_level": args.log_level,
    }
    data = config.model_dump()
    data.update({key: value for key, value in overrides.items() if value is not None})
    if args.quiet:
        data["show_events"] = False
    return SimulationConfig.model_validate(data)


def print_report(report: SimulationReport) -> None:
    """Print a plain-text summary of a simulation run."""
    print()
    print("=" * 60)
    print("  Treasure Hunt - Simulation Summary")
    print("=" * 60)
    for summary in report.rounds:
        if summary.finished:
            print(
                f"  Round {summary.round_number}: {summary.winner} won "
                f"{format_ether(summary.reward)} ETH of a "
                f"{format_ether(summary.pot)} ETH pot in {summary.moves} moves"
            )
        else:
            print(
                f"  Round {summary.round_number}: no winner after "
                f"{summary.moves} moves"
            )
    print(f"  Fees withdrawn: {format_ether(report.fees_withdrawn)} ETH")
    print()
    for address, balance in report.balances.items():
        print(f"  {address:14} {format_ether(balance)} ETH")
    print()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        config = build_config(args)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(log_file_path=config.log_file, level=getattr(logging, config.log_level))
    if config.show_events:
        enable_event_mode()

    try:
        report = GameRunner(config).run()
    except TreasureHuntError as e:
        log_engine_error(e)
        return 1
    finally:
        disable_event_mode()

    print_report(report)
    return 0
