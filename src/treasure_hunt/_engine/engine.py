# Area: Engine
"""
treasure_hunt._engine.engine — Treasure Hunt game engine
========================================================

Owns the whole game: players join with a bet, take turns moving on
the 10x10 grid, and the first to land on the treasure wins 90% of
the pot. The owner restarts rounds and withdraws the fee share.

Every entry operation:
1. Runs under one global lock (the host's lock when the host shares one)
2. Validates against the current state and raises on rejection
3. Mutates state and queues the events it emits
4. Performs any value transfer as its final step

If anything raises, the state checkpoint taken before the call is
restored and the queued events are dropped, so a rejected operation
(including a failed payout) is never partially visible.
"""

from __future__ import annotations
import copy
import logging
import threading
from functools import wraps
from typing import Any, Callable, List, Optional, Tuple

from .enums import Direction, RelocationRule, RoundEvent
from .events import (
    FeesWithdrawn,
    GameEvent,
    GameStarted,
    GameWon,
    InvalidMove,
    NextTurn,
    PlayerJoined,
    PlayerMoved,
    TreasureMoved,
)
from .grid import GRID_CELLS, apply_move, is_valid_position, relocation_rule
from .randomness import RandomnessSource
from .snapshot import build_state_snapshot
from .state import GameState
from ..config import EngineConfig
from ..errors import (
    AlreadyJoined,
    InsufficientBet,
    InvalidDirection,
    InvalidPosition,
    NotYourTurn,
    PlayerNotActive,
    RoundNotActive,
    RoundStillActive,
    Unauthorized,
)
from .._host.local_chain import ValueTransfer, payable
from ..types import GameSnapshot

logger = logging.getLogger("treasure_hunt.engine")

EventListener = Callable[[GameEvent], None]


def atomic(func):
    """
    Run an entry operation as one all-or-nothing step.

    On success the queued events are committed to the log, handed to
    listeners and returned. On any exception the state is restored
    from the checkpoint and the exception is re-raised.
    """
    @wraps(func)
    def wrapper(self: "TreasureHuntEngine", *args, **kwargs) -> List[GameEvent]:
        with self._lock:
            checkpoint = copy.deepcopy(self.state)
            self._pending = []
            try:
                func(self, *args, **kwargs)
            except Exception as e:
                logger.warning(
                    f"{func.__name__} rejected: {e}",
                    extra={"error_type": getattr(e, "error_type", type(e).__name__)},
                )
                self.state = checkpoint
                self._pending = []
                raise
            emitted, self._pending = self._pending, []
            self._commit(emitted)
            return emitted

    return wrapper


def _coerce_direction(direction: Any) -> Direction:
    if isinstance(direction, bool):
        raise InvalidDirection(direction)
    try:
        return Direction(direction)
    except ValueError:
        raise InvalidDirection(direction) from None


class TreasureHuntEngine:
    """
    Single-instance game engine.

    Usage (deployed on a LocalChain, which supplies caller and value):
        chain = LocalChain()
        engine = chain.call(
            "0xOwner", TreasureHuntEngine,
            chain, ChainStateRandomness(chain.block_context),
        )
        chain.fund("0xAlice", 10**18)
        chain.call("0xAlice", engine.join_game, value=10**16)
        chain.call("0xAlice", engine.move, Direction.UP)

    Calling the operations directly (engine.move("0xAlice", 0)) trusts
    the caller and value arguments as given.

    Attributes:
        config: Deployment rules (minimum bet, winner share)
        state: The live GameState; treat as read-only outside the engine
        events: Every committed event, oldest first
    """

    def __init__(
        self,
        owner: str,
        transfer: ValueTransfer,
        randomness: RandomnessSource,
        config: Optional[EngineConfig] = None,
    ):
        self.config = config or EngineConfig()
        self._transfer = transfer
        self._randomness = randomness
        host_lock = transfer.shared_lock() if isinstance(transfer, ValueTransfer) else None
        self._lock = host_lock or threading.RLock()
        self._listeners: List[EventListener] = []
        self._pending: List[GameEvent] = []
        self.events: List[GameEvent] = []

        self.state = GameState(owner=owner)
        self.state.treasure_position = self._random_position()
        logger.info(
            f"Deployed by {owner}: round 1 active, "
            f"minimum bet {self.config.minimum_bet} wei"
        )

    # ══════════════════════════════════════════════════════════
    # ENTRY OPERATIONS
    # ══════════════════════════════════════════════════════════

    @payable
    @atomic
    def join_game(self, caller: str, attached_value: int) -> List[GameEvent]:
        """
        Join the current round by paying attached_value.

        Raises:
            RoundNotActive: No round is in progress
            InsufficientBet: attached_value is below the minimum bet
            AlreadyJoined: caller is already seated this round
        """
        state = self.state
        if not state.active:
            raise RoundNotActive("join_game", state.round_number)
        if attached_value < self.config.minimum_bet:
            raise InsufficientBet(attached_value, self.config.minimum_bet)
        if state.is_player_active(caller):
            raise AlreadyJoined(caller)

        position = self._random_position()
        state.add_player(caller, position, attached_value)
        logger.info(
            f"{caller} joined round {state.round_number} at {position} "
            f"with {attached_value} wei (pot {state.pot})",
            extra={"round_number": state.round_number, "player": caller},
        )
        self._emit(PlayerJoined(state.round_number, caller, position, attached_value))

        if state.total_players == 1:
            self._emit(NextTurn(state.round_number, caller))

    @atomic
    def move(self, caller: str, direction: Any) -> List[GameEvent]:
        """
        Move the caller one cell in direction (0 Up, 1 Down, 2 Left, 3 Right).

        A move off the grid is not an error: it emits InvalidMove and
        the caller keeps the turn.

        Raises:
            InvalidDirection: direction is not 0-3
            RoundNotActive: No round is in progress
            PlayerNotActive: caller has not joined this round
            NotYourTurn: another player holds the turn
            TransferFailed: the winner could not be paid
        """
        direction = _coerce_direction(direction)
        state = self.state
        if not state.active:
            raise RoundNotActive("move", state.round_number)
        if not state.is_player_active(caller):
            raise PlayerNotActive(caller)
        current = state.current_player()
        if current != caller:
            raise NotYourTurn(caller, current)

        player = state.players[caller]
        old_position = player.position
        new_position = apply_move(old_position, direction)
        if new_position is None:
            logger.info(f"{caller} tried {direction.name} from {old_position}: off the grid")
            self._emit(InvalidMove(state.round_number, caller, direction))
            return

        player.position = new_position
        self._emit(PlayerMoved(state.round_number, caller, old_position, new_position, direction))

        if new_position == state.treasure_position:
            self._end_round(caller)
            return

        self._apply_relocation(new_position)

        next_player = state.advance_turn()
        if next_player is not None:
            self._emit(NextTurn(state.round_number, next_player))

    @atomic
    def start_new_game(self, caller: str) -> List[GameEvent]:
        """
        Open the next round (owner only, previous round must be over).

        Raises:
            Unauthorized: caller is not the owner
            RoundStillActive: the current round has not been won yet
        """
        state = self.state
        self._require_owner(caller, "start_new_game")
        if state.active:
            raise RoundStillActive(state.round_number)

        state.round_number += 1
        state.machine.transition(RoundEvent.START_NEW_GAME)
        state.reset_for_new_round(self._random_position())
        logger.info(f"Round {state.round_number} started")
        self._emit(GameStarted(state.round_number))

    @atomic
    def withdraw_fees(self, caller: str) -> List[GameEvent]:
        """
        Send every accrued fee to the owner (owner only).

        Raises:
            Unauthorized: caller is not the owner
            TransferFailed: the owner could not be paid
        """
        state = self.state
        self._require_owner(caller, "withdraw fees")

        amount = state.accrued_fees
        state.accrued_fees = 0
        self._emit(FeesWithdrawn(state.round_number, state.owner, amount))
        if amount > 0:
            self._transfer.transfer(amount, state.owner)
        logger.info(f"Owner withdrew {amount} wei in fees")

    @atomic
    def set_player_position(self, caller: str, player: str, position: int) -> List[GameEvent]:
        """
        Place an active player on a cell (owner-only test hook).

        Raises:
            Unauthorized: caller is not the owner
            PlayerNotActive: player is not seated this round
            InvalidPosition: position is outside 0-99
        """
        self._require_owner(caller, "set player position")
        if not self.state.is_player_active(player):
            raise PlayerNotActive(player)
        if not is_valid_position(position):
            raise InvalidPosition(position)
        self.state.players[player].position = position
        logger.debug(f"{player} placed at {position}")

    @atomic
    def set_treasure_position(self, caller: str, position: int) -> List[GameEvent]:
        """
        Place the treasure on a cell (owner-only test hook).

        Raises:
            Unauthorized: caller is not the owner
            InvalidPosition: position is outside 0-99
        """
        self._require_owner(caller, "set treasure position")
        if not is_valid_position(position):
            raise InvalidPosition(position)
        self.state.treasure_position = position
        logger.debug(f"Treasure placed at {position}")

    # ══════════════════════════════════════════════════════════
    # OBSERVERS
    # ══════════════════════════════════════════════════════════

    @property
    def owner(self) -> str:
        return self.state.owner

    @property
    def treasure_position(self) -> int:
        return self.state.treasure_position

    @property
    def round_number(self) -> int:
        return self.state.round_number

    @property
    def is_active(self) -> bool:
        return self.state.active

    @property
    def total_players(self) -> int:
        return self.state.total_players

    @property
    def pot(self) -> int:
        return self.state.pot

    @property
    def accrued_fees(self) -> int:
        return self.state.accrued_fees

    @property
    def current_player(self) -> Optional[str]:
        return self.state.current_player()

    @property
    def turn_order(self) -> Tuple[str, ...]:
        return tuple(self.state.turn_order)

    def is_player_active(self, address: str) -> bool:
        return self.state.is_player_active(address)

    def get_player_position(self, address: str) -> Optional[int]:
        """Last known position of address, or None if it never joined."""
        player = self.state.get_player(address)
        return player.position if player else None

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return build_state_snapshot(self.state)

    def subscribe(self, listener: EventListener) -> None:
        """Register a callable that receives every committed event."""
        self._listeners.append(listener)

    # ══════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════

    def _require_owner(self, caller: str, operation: str) -> None:
        if caller != self.state.owner:
            raise Unauthorized(operation, caller)

    def _emit(self, event: GameEvent) -> None:
        self._pending.append(event)

    def _commit(self, emitted: List[GameEvent]) -> None:
        for event in emitted:
            self.events.append(event)
            logger.debug(f"Event: {event}")
            for listener in self._listeners:
                try:
                    listener(event)
                except Exception:
                    logger.error(f"Event listener failed on {event.name}", exc_info=True)

    def _draw(self, n: int) -> int:
        value = self._randomness.next_in_range(n)
        if not 0 <= value < n:
            raise ValueError(f"Randomness source returned {value}, expected [0, {n})")
        return value

    def _random_position(self, exclude: Optional[int] = None) -> int:
        """
        Draw a uniformly random cell.

        With exclude set, one draw over the 99 other cells is mapped
        around the excluded cell, so the result can never equal it.
        """
        if exclude is None:
            return self._draw(GRID_CELLS)
        value = self._draw(GRID_CELLS - 1)
        return value if value < exclude else value + 1

    def _apply_relocation(self, landing: int) -> None:
        rule = relocation_rule(landing)
        if rule == RelocationRule.NONE:
            return
        state = self.state
        old_treasure = state.treasure_position
        if rule == RelocationRule.DIVISIBLE_BY_FIVE:
            state.treasure_position = self._random_position(exclude=landing)
        else:
            state.treasure_position = self._random_position()
        logger.info(
            f"Landing on {landing} ({rule.value}) moved the treasure "
            f"{old_treasure} → {state.treasure_position}"
        )
        self._emit(TreasureMoved(
            state.round_number, old_treasure, state.treasure_position, rule.value,
        ))

    def _end_round(self, winner: str) -> None:
        """Settle the pot, close the round, then pay the winner last."""
        state = self.state
        pot = state.pot
        reward = pot * self.config.winner_share_percent // 100
        fee = pot - reward

        state.accrued_fees += fee
        state.pot = 0
        state.clear_players()
        state.machine.transition(RoundEvent.TREASURE_FOUND)
        self._emit(GameWon(state.round_number, winner, reward))

        if reward > 0:
            self._transfer.transfer(reward, winner)
        logger.info(
            f"{winner} found the treasure in round {state.round_number}: "
            f"reward {reward} wei, fee {fee} wei",
            extra={"round_number": state.round_number, "player": winner},
        )
