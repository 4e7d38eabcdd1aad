"""
treasure_hunt — Turn-based treasure hunt betting game
=====================================================

Players pay an entry bet, take turns moving on a 10x10 grid, and the
first to land on the treasure wins 90% of the pot. The owner collects
the remaining 10% as fees and restarts rounds.

Quick Start (local simulation):
    from treasure_hunt import GameRunner, SimulationConfig
    report = GameRunner(SimulationConfig(players=3, seed=7)).run()

Driving the engine directly:
    from treasure_hunt import (
        ChainStateRandomness, Direction, LocalChain, TreasureHuntEngine,
    )
    chain = LocalChain()
    engine = chain.call(
        "0xOwner", TreasureHuntEngine,
        chain, ChainStateRandomness(chain.block_context),
    )
    chain.fund("0xAlice", 10**18)
    chain.call("0xAlice", engine.join_game, value=10**16)
    chain.call("0xAlice", engine.move, Direction.UP)

The chain passes the sender as the caller of every operation and the
attached value as the bet of join_game.

The default randomness is derived from caller-visible chain state and
is predictable to anyone who controls block production.
"""

from .errors import (
    TreasureHuntError,
    InsufficientBet,
    AlreadyJoined,
    RoundNotActive,
    RoundStillActive,
    NotYourTurn,
    PlayerNotActive,
    Unauthorized,
    InvalidDirection,
    InvalidPosition,
    TransferFailed,
    NotPayable,
    InsufficientFunds,
)
from .config import EngineConfig, SimulationConfig, load_config
from .units import WEI_PER_ETHER, format_ether, parse_ether
from ._engine import (
    TreasureHuntEngine,
    Direction,
    RoundState,
    GameEvent,
    PlayerJoined,
    NextTurn,
    PlayerMoved,
    InvalidMove,
    TreasureMoved,
    GameWon,
    GameStarted,
    FeesWithdrawn,
    RandomnessSource,
    ChainStateRandomness,
    FixedSequenceRandomness,
)
from ._host import LocalChain, ValueTransfer, payable
from .demo_player import DemoPlayer
from .runner import GameRunner, RoundSummary, SimulationReport
from .types import GameSnapshot, PlayerView

__all__ = [
    # Engine
    "TreasureHuntEngine",
    "Direction",
    "RoundState",
    # Events
    "GameEvent",
    "PlayerJoined",
    "NextTurn",
    "PlayerMoved",
    "InvalidMove",
    "TreasureMoved",
    "GameWon",
    "GameStarted",
    "FeesWithdrawn",
    # Randomness
    "RandomnessSource",
    "ChainStateRandomness",
    "FixedSequenceRandomness",
    # Host
    "LocalChain",
    "ValueTransfer",
    "payable",
    # Errors
    "TreasureHuntError",
    "InsufficientBet",
    "AlreadyJoined",
    "RoundNotActive",
    "RoundStillActive",
    "NotYourTurn",
    "PlayerNotActive",
    "Unauthorized",
    "InvalidDirection",
    "InvalidPosition",
    "TransferFailed",
    "NotPayable",
    "InsufficientFunds",
    # Config and units
    "EngineConfig",
    "SimulationConfig",
    "load_config",
    "WEI_PER_ETHER",
    "parse_ether",
    "format_ether",
    # Simulation
    "DemoPlayer",
    "GameRunner",
    "RoundSummary",
    "SimulationReport",
    # Views
    "GameSnapshot",
    "PlayerView",
]
__version__ = "1.0.0"
