import dataclasses

import pytest

from cosmkit.environment import (
    BlockInfo,
    ChainState,
    ChainUpload,
    Coin,
    StateInterface,
    TxHandler,
)
from cosmkit.errors import AddrNotInStore, CodeIdNotInStore, CwOrchError


class DictState(StateInterface):
    def __init__(self):
        self._addresses = {}
        self._code_ids = {}

    def get_address(self, contract_id):
        try:
            return self._addresses[contract_id]
        except KeyError:
            raise AddrNotInStore(contract_id) from None

    def set_address(self, contract_id, address):
        self._addresses[contract_id] = address

    def get_code_id(self, contract_id):
        try:
            return self._code_ids[contract_id]
        except KeyError:
            raise CodeIdNotInStore(contract_id) from None

    def set_code_id(self, contract_id, code_id):
        self._code_ids[contract_id] = code_id

    def get_all_addresses(self):
        return dict(self._addresses)

    def get_all_code_ids(self):
        return dict(self._code_ids)


class RecordingChain(TxHandler):
    def __init__(self):
        self.waited = []
        self._state = DictState()

    def state(self):
        return self._state

    def sender(self):
        return "sender"

    def wait_blocks(self, amount):
        self.waited.append(amount)

    def wait_seconds(self, secs):
        self.waited.append(("secs", secs))

    def block_info(self):
        return BlockInfo(height=len(self.waited), time=0, chain_id="local")

    def execute(self, exec_msg, coins, contract_address):
        return (exec_msg, list(coins), contract_address)

    def instantiate(self, code_id, init_msg, label=None, admin=None, coins=()):
        return code_id

    def query(self, query_msg, contract_address):
        return query_msg

    def migrate(self, migrate_msg, new_code_id, contract_address):
        return new_code_id


def test_next_block_waits_one_block():
    chain = RecordingChain()
    TxHandler.next_block(chain)
    TxHandler.next_block(chain)
    assert chain.waited == [1, 1]
    assert chain.block_info() == BlockInfo(height=2, time=0, chain_id="local")


def test_incomplete_state_cannot_be_created():
    with pytest.raises(TypeError):
        StateInterface()

    class Partial(StateInterface):
        def get_address(self, contract_id):
            return ""

    with pytest.raises(TypeError):
        Partial()


def test_abstract_bases_cannot_be_created():
    with pytest.raises(TypeError):
        ChainState()
    with pytest.raises(TypeError):
        TxHandler()


def test_chain_upload_requires_upload():
    with pytest.raises(TypeError):
        ChainUpload()

    class NoUpload(ChainUpload, RecordingChain):
        pass

    with pytest.raises(TypeError):
        NoUpload()

    class WithUpload(RecordingChain, ChainUpload):
        def upload(self, contract_source):
            return f"uploaded {contract_source}"

    chain = WithUpload()
    assert isinstance(chain, ChainUpload)
    assert chain.upload("code") == "uploaded code"


def test_state_round_trip_through_chain():
    chain = RecordingChain()
    TxHandler.next_block(chain)
    assert chain.waited == [1]
    state = chain.state()
    assert isinstance(state, StateInterface)
    state.set_address("counter", "addr0")
    state.set_code_id("counter", 7)
    assert state.get_address("counter") == "addr0"
    assert state.get_code_id("counter") == 7
    assert state.get_all_addresses() == {"counter": "addr0"}
    assert state.get_all_code_ids() == {"counter": 7}

    expected_addr_error = AddrNotInStore("other")
    expected_code_error = CodeIdNotInStore("other")
    assert isinstance(expected_addr_error, CwOrchError)
    assert isinstance(expected_code_error, CwOrchError)

    with pytest.raises(AddrNotInStore) as addr_info:
        state.get_address("other")
    assert str(addr_info.value) == "Contract address for other not found in store"
    assert str(addr_info.value) == str(expected_addr_error)
    with pytest.raises(CodeIdNotInStore) as code_info:
        state.get_code_id("other")
    assert str(code_info.value) == "Code id for other not found in store"
    assert str(code_info.value) == str(expected_code_error)


def test_coin_str_joins_amount_and_denom():
    assert str(Coin(100, "uatom")) == "100uatom"


@pytest.mark.parametrize("amount", [-1, 2**128])
def test_coin_amount_out_of_range(amount):
    with pytest.raises(ValueError):
        Coin(amount, "ujuno")


@pytest.mark.parametrize("amount", ["5", 1.5, True])
def test_coin_amount_must_be_int(amount):
    with pytest.raises(TypeError):
        Coin(amount, "ujuno")


def test_coin_max_amount_accepted():
    assert Coin(2**128 - 1, "u").amount == 2**128 - 1


def test_block_info_is_frozen():
    info = BlockInfo(height=5, time=10, chain_id="juno-1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.height = 6
    assert info == BlockInfo(5, 10, "juno-1")


def test_execute_passes_coins_through():
    chain = RecordingChain()
    coins = [Coin(1, "a"), Coin(2, "b")]
    assert chain.execute({"inc": {}}, coins, "addr") == ({"inc": {}}, coins, "addr")