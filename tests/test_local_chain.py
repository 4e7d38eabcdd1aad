# Area: Host Tests
"""Tests for the in-process LocalChain host."""

import pytest
from unittest.mock import Mock

from treasure_hunt._host.local_chain import LocalChain, payable
from treasure_hunt.errors import InsufficientFunds, NotPayable, TransferFailed

ALICE = "0xAlice"


def funded_chain(amount=1000):
    chain = LocalChain(start_timestamp=100, block_interval=12)
    chain.fund(ALICE, amount)
    return chain


def payable_mock(**kwargs):
    """Mock operation marked as accepting value."""
    return payable(Mock(**kwargs))


class TestCall:
    """Tests for LocalChain.call()."""

    def test_sender_is_first_argument(self):
        chain = funded_chain()
        fn = Mock(return_value="ok")

        result = chain.call(ALICE, fn, 1, key="x")

        assert result == "ok"
        fn.assert_called_once_with(ALICE, 1, key="x")

    def test_payable_receives_attached_value(self):
        chain = funded_chain()
        fn = payable_mock()

        chain.call(ALICE, fn, "arg", value=300)

        fn.assert_called_once_with(ALICE, 300, "arg")
        assert chain.balance_of(ALICE) == 700
        assert chain.balance_of(chain.contract_address) == 300

    def test_payable_without_value_receives_zero(self):
        chain = funded_chain()
        fn = payable_mock()
        chain.call(ALICE, fn)
        fn.assert_called_once_with(ALICE, 0)

    def test_value_to_non_payable_rejected(self):
        chain = funded_chain()
        fn = Mock(__name__="move")

        with pytest.raises(NotPayable) as exc_info:
            chain.call(ALICE, fn, value=300)

        assert exc_info.value.value == 300
        fn.assert_not_called()
        assert chain.balance_of(ALICE) == 1000

    def test_failed_call_reverts_value(self):
        chain = funded_chain()
        fn = payable_mock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            chain.call(ALICE, fn, value=300)

        assert chain.balance_of(ALICE) == 1000
        assert chain.balance_of(chain.contract_address) == 0

    def test_failed_call_reverts_transfers(self):
        chain = funded_chain()
        chain.fund(chain.contract_address, 500)

        def pay_then_fail(sender):
            chain.transfer(200, "0xBob")
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            chain.call(ALICE, pay_then_fail)

        assert chain.balance_of("0xBob") == 0
        assert chain.balance_of(chain.contract_address) == 500

    def test_insufficient_funds(self):
        chain = funded_chain(10)
        fn = payable_mock()
        with pytest.raises(InsufficientFunds) as exc_info:
            chain.call(ALICE, fn, value=11)

        assert exc_info.value.required == 11
        fn.assert_not_called()

    def test_caller_visible_during_call(self):
        chain = funded_chain()
        seen = chain.call(ALICE, lambda sender: chain.block_context().caller)

        assert seen == ALICE
        assert chain.block_context().caller is None

    def test_each_call_mines_a_block(self):
        chain = funded_chain()
        chain.call(ALICE, Mock())
        chain.call(ALICE, Mock())

        ctx = chain.block_context()
        assert ctx.number == 2
        assert ctx.timestamp == 124

class TestTransfer:
    """Tests for LocalChain.transfer()."""

    def test_transfer_pays_recipient(self):
        chain = LocalChain()
        chain.fund(chain.contract_address, 100)
        chain.transfer(40, ALICE)

        assert chain.balance_of(ALICE) == 40
        assert chain.balance_of(chain.contract_address) == 60

    def test_rejecting_recipient(self):
        chain = LocalChain()
        chain.fund(chain.contract_address, 100)
        chain.reject_transfers_to(ALICE)

        with pytest.raises(TransferFailed):
            chain.transfer(40, ALICE)
        assert chain.balance_of(chain.contract_address) == 100

    def test_contract_balance_too_low(self):
        chain = LocalChain()
        chain.fund(chain.contract_address, 10)
        with pytest.raises(TransferFailed):
            chain.transfer(40, ALICE)

    def test_negative_amounts_rejected(self):
        chain = LocalChain()
        with pytest.raises(ValueError):
            chain.transfer(-1, ALICE)
        with pytest.raises(ValueError):
            chain.fund(ALICE, -1)
