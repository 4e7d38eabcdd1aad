"""
treasure_hunt.runner — Local simulation loop
============================================

The GameRunner deploys the engine on a LocalChain, seats a table of
DemoPlayers, and plays rounds until someone finds the treasure. The
owner restarts each following round and collects the fees at the end.

Usage
-----
    from treasure_hunt import GameRunner, SimulationConfig

    report = GameRunner(SimulationConfig(players=4, rounds=3, seed=7)).run()
    for summary in report.rounds:
        print(summary.round_number, summary.winner, summary.reward)
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ._engine.engine import TreasureHuntEngine
from ._engine.events import GameWon
from ._engine.randomness import ChainStateRandomness
from ._host.local_chain import LocalChain
from ._shared.event_display import get_event_display
from .config import SimulationConfig
from .demo_player import DemoPlayer

logger = logging.getLogger("treasure_hunt.runner")


@dataclass
class RoundSummary:
    """
    Outcome of one simulated round.

    Attributes:
        round_number: Round that was played
        winner: Address that found the treasure, or None if unfinished
        reward: Wei paid to the winner
        pot: Wei collected from bets this round
        moves: Move calls submitted, invalid moves included
        finished: False when the round hit max_turns
    """

    round_number: int
    winner: Optional[str]
    reward: int
    pot: int
    moves: int
    finished: bool


@dataclass
class SimulationReport:
    """Everything a simulation run produced."""

    rounds: List[RoundSummary] = field(default_factory=list)
    fees_withdrawn: int = 0
    balances: Dict[str, int] = field(default_factory=dict)


class GameRunner:
    """
    Drives the engine through whole rounds with demo players.

    Attributes:
        config: Simulation settings
        chain: The LocalChain the engine is deployed on
        engine: The deployed engine (set by setup())
        players: Demo players keyed by address
    """

    def __init__(self, config: SimulationConfig, chain: Optional[LocalChain] = None):
        self.config = config
        self.chain = chain or LocalChain(start_timestamp=config.seed)
        self.engine: Optional[TreasureHuntEngine] = None
        rng = random.Random(config.seed)
        self.players: Dict[str, DemoPlayer] = {
            address: DemoPlayer(address, random.Random(rng.random()), wander=config.wander)
            for address in self.player_addresses()
        }

    def player_addresses(self) -> List[str]:
        return [f"0xPlayer{index:02d}" for index in range(1, self.config.players + 1)]

    def setup(self) -> TreasureHuntEngine:
        """Fund every account and deploy the engine as the owner."""
        config = self.config
        self.chain.fund(config.owner, config.starting_balance)
        for address in self.players:
            self.chain.fund(address, config.starting_balance)

        randomness = ChainStateRandomness(self.chain.block_context)
        self.engine = self.chain.call(
            config.owner, TreasureHuntEngine,
            self.chain, randomness, config.engine,
        )
        if config.show_events:
            self.engine.subscribe(get_event_display().show)
        logger.info(f"Deployed with {len(self.players)} players, {config.rounds} round(s)")
        return self.engine

    def run(self) -> SimulationReport:
        """
        Play every configured round, then withdraw the fees.

        Stops early if a round reaches max_turns without a winner.
        """
        engine = self.engine or self.setup()
        owner = self.config.owner
        report = SimulationReport()

        for index in range(self.config.rounds):
            if index > 0:
                self.chain.call(owner, engine.start_new_game)
            summary = self.play_round()
            report.rounds.append(summary)
            if not summary.finished:
                logger.warning(
                    f"Round {summary.round_number} unfinished after {summary.moves} moves"
                )
                break

        report.fees_withdrawn = engine.accrued_fees
        self.chain.call(owner, engine.withdraw_fees)
        report.balances = {
            address: self.chain.balance_of(address)
            for address in [owner, *self.players]
        }
        return report

    def play_round(self) -> RoundSummary:
        """Seat every player, then take turns until the treasure is found."""
        engine = self.engine
        bet = self.config.bet
        round_number = engine.round_number

        for address in self.players:
            self.chain.call(address, engine.join_game, value=bet)
        pot = engine.pot

        moves = 0
        while engine.is_active and moves < self.config.max_turns:
            current = engine.current_player
            direction = self.players[current].choose_direction(engine.snapshot())
            events = self.chain.call(current, engine.move, direction)
            moves += 1
            for event in events:
                if isinstance(event, GameWon):
                    return RoundSummary(
                        round_number=round_number,
                        winner=event.winner,
                        reward=event.reward,
                        pot=pot,
                        moves=moves,
                        finished=True,
                    )

        return RoundSummary(
            round_number=round_number,
            winner=None,
            reward=0,
            pot=pot,
            moves=moves,
            finished=False,
        )
