# Area: Host
"""
Execution environment the engine runs inside.

This package contains:
- LocalChain: balances, value-attached calls with revert, block metadata
- ValueTransfer: the payout capability the engine depends on
- payable: marks operations that receive the attached value
"""

from .local_chain import BlockContext, LocalChain, ValueTransfer, payable

__all__ = [
    "BlockContext",
    "LocalChain",
    "ValueTransfer",
    "payable",
]
