"""
Tests for gateway value types.
"""
import pytest

from cosmos_signer import proto
from cosmos_signer.address import Address
from cosmos_signer.gateway.exceptions import DecodeError
from cosmos_signer.gateway.types import (
    AccountKind, AccountType, BroadcastMode, ChainState, LatestBlock, SimulationResult, TxResponse
)
from cosmos_signer import type_urls

ADDRESS = Address(bytes(range(20)), "cosmos")


def _base(**fields):
    return proto.BaseAccount(address=str(ADDRESS), **fields)


class TestAccountType:
    """Tests for decoding account kinds."""

    @pytest.mark.parametrize("type_url,message", [
        (type_urls.BASE_ACCOUNT_TYPE_URL, _base(account_number=4, sequence=9)),
        (type_urls.MODULE_ACCOUNT_TYPE_URL,
         proto.ModuleAccount(base_account=_base(account_number=4, sequence=9), name="gov")),
        (type_urls.CONTINUOUS_VESTING_ACCOUNT_TYPE_URL,
         proto.ContinuousVestingAccount(base_vesting_account=proto.BaseVestingAccount(
             base_account=_base(account_number=4, sequence=9)), start_time=1)),
        (type_urls.DELAYED_VESTING_ACCOUNT_TYPE_URL,
         proto.DelayedVestingAccount(base_vesting_account=proto.BaseVestingAccount(
             base_account=_base(account_number=4, sequence=9)))),
        (type_urls.PERIODIC_VESTING_ACCOUNT_TYPE_URL,
         proto.PeriodicVestingAccount(base_vesting_account=proto.BaseVestingAccount(
             base_account=_base(account_number=4, sequence=9)))),
        (type_urls.PERMANENT_LOCKED_ACCOUNT_TYPE_URL,
         proto.PermanentLockedAccount(base_vesting_account=proto.BaseVestingAccount(
             base_account=_base(account_number=4, sequence=9)))),
    ])
    def test_every_kind_has_a_base_account(self, type_url, message):
        wrapped = proto.Any(type_url=type_url, value=message.SerializeToString())
        account = AccountType.decode(wrapped)
        assert account.kind is AccountKind(type_url)
        base = account.get_base_account()
        assert base.address == ADDRESS
        assert (base.account_number, base.sequence) == (4, 9)

    def test_pubkey_is_kept(self):
        pub_key = proto.Any(type_url=type_urls.SECP256K1_PUBKEY_TYPE_URL, value=b"\x0a\x01\x02")
        wrapped = proto.Any(
            type_url=type_urls.BASE_ACCOUNT_TYPE_URL,
            value=_base(pub_key=pub_key).SerializeToString(),
        )
        assert AccountType.decode(wrapped).get_base_account().pubkey == pub_key

    def test_unknown_type(self):
        with pytest.raises(DecodeError):
            AccountType.decode(proto.Any(type_url="/custom.Account", value=b""))

    def test_corrupt_payload(self):
        with pytest.raises(DecodeError):
            AccountType.decode(proto.Any(type_url=type_urls.BASE_ACCOUNT_TYPE_URL, value=b"\xff\xff"))

    def test_bad_address(self):
        wrapped = proto.Any(
            type_url=type_urls.BASE_ACCOUNT_TYPE_URL,
            value=proto.BaseAccount(address="not-an-address").SerializeToString(),
        )
        with pytest.raises(DecodeError):
            AccountType.decode(wrapped).get_base_account()


class TestLatestBlock:

    def test_waiting_has_no_height(self):
        latest = LatestBlock.waiting_to_start()
        assert latest.state is ChainState.WAITING_TO_START
        assert latest.height is None
        assert latest.chain_id is None

    def test_syncing_keeps_block(self):
        block = proto.Block(header=proto.Header(chain_id="c", height=3))
        assert LatestBlock.syncing(block).height == 3


class TestTxResponse:
    """Tests for TxResponse conversion."""

    def test_proto_round_trip_keeps_duplicate_attributes(self):
        response = TxResponse(
            txhash="AB",
            height=2,
            code=0,
            gas_wanted=10,
            gas_used=5,
            events=[{"type": "transfer", "attributes": [("amount", "1a"), ("amount", "2a")]}],
        )
        assert TxResponse.from_proto(response.to_proto()) == response
        assert response.success

    def test_failure(self):
        assert not TxResponse(code=3, codespace="sdk").success


class TestSimulationResult:

    def test_from_proto(self):
        message = proto.SimulateResponse(
            gas_info=proto.GasInfo(gas_wanted=8, gas_used=6),
            result=proto.Result(log="done", events=[proto.Event(type="message")]),
        )
        result = SimulationResult.from_proto(message)
        assert (result.gas_wanted, result.gas_used, result.log) == (8, 6, "done")
        assert result.events == [{"type": "message", "attributes": []}]


def test_broadcast_mode_values():
    assert [int(mode) for mode in (BroadcastMode.BLOCK, BroadcastMode.SYNC, BroadcastMode.ASYNC)] == [1, 2, 3]
