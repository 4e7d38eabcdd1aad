# Area: Host
"""
treasure_hunt._host.local_chain — In-process execution environment
==================================================================

A small stand-in for the chain the game was written for. It keeps
account balances and executes calls one at a time. The sender of a
call becomes the caller the operation sees, and only payable
operations receive the attached value. A call that raises has every
balance change reverted. The chain also exposes the block metadata
randomness is derived from and pays value out of the contract account.
"""

from __future__ import annotations
import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Set

from ..errors import InsufficientFunds, NotPayable, TransferFailed

logger = logging.getLogger("treasure_hunt.host")

DEFAULT_CONTRACT_ADDRESS = "0xTreasureHunt"
DEFAULT_BLOCK_INTERVAL = 12


@dataclass(frozen=True)
class BlockContext:
    """Metadata of the block the current call executes in."""
    number: int
    timestamp: int
    caller: Optional[str]


def payable(func):
    """
    Mark an operation as accepting attached value.

    LocalChain.call passes the attached value as the argument right
    after the sender for payable operations, and rejects value sent
    to any other operation.
    """
    func.payable = True
    return func


def _is_payable(fn: Callable[..., Any]) -> bool:
    return getattr(fn, "payable", False) is True


class ValueTransfer(ABC):
    """Capability the engine uses to pay out value."""

    @abstractmethod
    def transfer(self, amount: int, recipient: str) -> None:
        """
        Send amount wei from the contract to recipient.

        Raises:
            TransferFailed: The transfer did not happen; nothing moved
        """
        pass

    def shared_lock(self) -> Optional[Any]:
        """
        Lock the host serializes its own calls with, if any.

        An engine deployed on the host takes this lock instead of its
        own, so engine operations and host calls are ordered by one lock.
        """
        return None


class LocalChain(ValueTransfer):
    """
    Serialized, single-contract execution environment.

    The sender of a call is the caller the operation sees, and the
    attached value is the value a payable operation receives; neither
    can be chosen by the call's arguments.

    Usage:
        chain = LocalChain()
        chain.fund("0xAlice", 10**18)
        engine = chain.call("0xOwner", TreasureHuntEngine, chain, randomness)
        chain.call("0xAlice", engine.join_game, value=10**16)
        chain.call("0xAlice", engine.move, Direction.UP)
    """

    def __init__(
        self,
        contract_address: str = DEFAULT_CONTRACT_ADDRESS,
        start_timestamp: Optional[int] = None,
        block_interval: int = DEFAULT_BLOCK_INTERVAL,
    ):
        self.contract_address = contract_address
        self.block_number = 0
        self.timestamp = int(time.time()) if start_timestamp is None else start_timestamp
        self.block_interval = block_interval
        self._balances: Dict[str, int] = {}
        self._rejecting: Set[str] = set()
        self._caller: Optional[str] = None
        self._lock = threading.RLock()

    # ── Accounts ────────────────────────────────────────────

    def fund(self, address: str, amount: int) -> None:
        """Credit an account out of thin air (test and simulation setup)."""
        if amount < 0:
            raise ValueError(f"Cannot fund a negative amount: {amount}")
        with self._lock:
            self._balances[address] = self._balances.get(address, 0) + amount

    def shared_lock(self) -> threading.RLock:
        return self._lock

    def balance_of(self, address: str) -> int:
        return self._balances.get(address, 0)

    def reject_transfers_to(self, address: str, reject: bool = True) -> None:
        """Make transfers to address fail, like a recipient that reverts."""
        if reject:
            self._rejecting.add(address)
        else:
            self._rejecting.discard(address)

    # ── Blocks ──────────────────────────────────────────────

    def mine(self) -> BlockContext:
        """Advance to the next block."""
        self.block_number += 1
        self.timestamp += self.block_interval
        return self.block_context()

    def block_context(self) -> BlockContext:
        return BlockContext(
            number=self.block_number,
            timestamp=self.timestamp,
            caller=self._caller,
        )

    # ── Execution ───────────────────────────────────────────

    def call(self, sender: str, fn: Callable[..., Any], *args: Any,
             value: int = 0, **kwargs: Any) -> Any:
        """
        Execute fn as one transaction sent by sender.

        fn is invoked as fn(sender, *args), or fn(sender, value, *args)
        when fn is marked payable. The attached value moves from sender
        to the contract account before fn runs. If fn raises, every
        balance change made during the call is reverted and the
        exception propagates.

        Raises:
            NotPayable: value was attached to an operation that takes none
            InsufficientFunds: sender cannot cover value
        """
        if value < 0:
            raise ValueError(f"Attached value cannot be negative: {value}")
        takes_value = _is_payable(fn)
        if value and not takes_value:
            raise NotPayable(getattr(fn, "__name__", repr(fn)), value)
        bound_args = (sender, value, *args) if takes_value else (sender, *args)

        with self._lock:
            balance = self.balance_of(sender)
            if balance < value:
                raise InsufficientFunds(sender, balance, value)

            checkpoint = dict(self._balances)
            self.mine()
            self._caller = sender
            self._balances[sender] = balance - value
            self._balances[self.contract_address] = (
                self.balance_of(self.contract_address) + value
            )
            try:
                return fn(*bound_args, **kwargs)
            except Exception:
                logger.debug("Call from %s reverted", sender)
                self._balances = checkpoint
                raise
            finally:
                self._caller = None

    def transfer(self, amount: int, recipient: str) -> None:
        if amount < 0:
            raise ValueError(f"Cannot transfer a negative amount: {amount}")
        with self._lock:
            if recipient in self._rejecting:
                raise TransferFailed(recipient, amount, "recipient rejected the transfer")
            available = self.balance_of(self.contract_address)
            if available < amount:
                raise TransferFailed(
                    recipient, amount,
                    f"contract balance {available} wei is too low",
                )
            self._balances[self.contract_address] = available - amount
            self._balances[recipient] = self.balance_of(recipient) + amount
        logger.info("Transferred %d wei to %s", amount, recipient)
