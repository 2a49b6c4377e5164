"""Abstract execution environments and the value types they exchange."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

_UINT128_LIMIT = 2**128


@dataclass(frozen=True)
class Coin:
    """An amount of a single denomination."""

    amount: int
    denom: str

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError("coin amount must be an integer")
        if not 0 <= self.amount < _UINT128_LIMIT:
            raise ValueError("coin amount must fit in an unsigned 128-bit integer")

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


@dataclass(frozen=True)
class BlockInfo:
    """Height, time (nanoseconds since the Unix epoch) and chain id of a block."""

    height: int
    time: int
    chain_id: str


class StateInterface(ABC):
    """Local record of the code ids and addresses of a deployment."""

    @abstractmethod
    def get_address(self, contract_id: str) -> str:
        """Return the address of a contract; raise AddrNotInStore if unknown."""

    @abstractmethod
    def set_address(self, contract_id: str, address: str) -> None:
        """Store the address of a contract."""

    @abstractmethod
    def get_code_id(self, contract_id: str) -> int:
        """Return the code id of a contract; raise CodeIdNotInStore if unknown."""

    @abstractmethod
    def set_code_id(self, contract_id: str, code_id: int) -> None:
        """Store the code id of a contract."""

    @abstractmethod
    def get_all_addresses(self) -> dict[str, str]:
        """Return every stored address, keyed by contract id."""

    @abstractmethod
    def get_all_code_ids(self) -> dict[str, int]:
        """Return every stored code id, keyed by contract id."""


class ChainState(ABC):
    """Something that has access to a deployment state."""

    @abstractmethod
    def state(self) -> StateInterface:
        """Return the deployment state."""


class TxHandler(ChainState):
    """An environment that signs and sends contract messages."""

    @abstractmethod
    def sender(self) -> str:
        """Return the address of the wallet that signs transactions."""

    @abstractmethod
    def wait_blocks(self, amount: int) -> None:
        """Wait until ``amount`` more blocks have been produced."""

    @abstractmethod
    def wait_seconds(self, secs: int) -> None:
        """Wait for ``secs`` seconds."""

    def next_block(self) -> None:
        """Wait for the next block."""
        self.wait_blocks(1)

    @abstractmethod
    def block_info(self) -> BlockInfo:
        """Return information about the current block."""

    @abstractmethod
    def execute(
        self, exec_msg: Any, coins: Sequence[Coin], contract_address: str
    ) -> Any:
        """Send an execute message to a contract."""

    @abstractmethod
    def instantiate(
        self,
        code_id: int,
        init_msg: Any,
        label: str | None = None,
        admin: str | None = None,
        coins: Sequence[Coin] = (),
    ) -> Any:
        """Instantiate a contract from uploaded code."""

    @abstractmethod
    def query(self, query_msg: Any, contract_address: str) -> Any:
        """Send a query message to a contract and return its answer."""

    @abstractmethod
    def migrate(self, migrate_msg: Any, new_code_id: int, contract_address: str) -> Any:
        """Migrate a contract to new code."""


class ChainUpload(TxHandler):
    """An environment that can store contract code."""

    @abstractmethod
    def upload(self, contract_source: Any) -> Any:
        """Upload contract code and return the transaction response."""