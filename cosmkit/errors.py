"""Exception hierarchy for contract orchestration and key handling."""

from __future__ import annotations


class CwOrchError(Exception):
    """Base class of every error raised by the package."""


class JsonConversionError(CwOrchError):
    """A message could not be converted to or from JSON."""

    def __init__(self) -> None:
        super().__init__("JSON Conversion Error")


class AddrNotInStore(CwOrchError):
    """No address is stored for the contract id."""

    def __init__(self, contract_id: str) -> None:
        self.contract_id = contract_id
        super().__init__(f"Contract address for {contract_id} not found in store")


class CodeIdNotInStore(CwOrchError):
    """No code id is stored for the contract id."""

    def __init__(self, contract_id: str) -> None:
        self.contract_id = contract_id
        super().__init__(f"Code id for {contract_id} not found in store")


class NotImplementedAction(CwOrchError):
    """The contract was called with an action it does not implement."""

    def __init__(self) -> None:
        super().__init__("calling contract with unimplemented action")


class StdError(CwOrchError):
    """A generic error carrying a free-form message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Generic Error {message}")


class DaemonError(CwOrchError):
    """Base class of errors raised while talking to a live chain or handling keys."""


class ConversionError(DaemonError):
    """A bech32 key or address could not be decoded."""

    def __init__(self, key: str, source: object) -> None:
        self.key = key
        self.source = source
        super().__init__(f"could not convert {key}: {source}")


class ConversionLengthError(DaemonError):
    """A tendermint key has a length that matches no known key type."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"can not convert a key of length {length}")


class ConversionLengthED25519HexError(DaemonError):
    """A hex tendermint address does not have 40 characters."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"expected a hex tendermint address of 40 characters, got {length}"
        )


class ConversionSecp256k1Error(DaemonError):
    """A key lacks the secp256k1 amino prefix."""

    def __init__(self) -> None:
        super().__init__("key does not carry the secp256k1 prefix")


class ConversionED25519Error(DaemonError):
    """A key lacks the ed25519 amino prefix."""

    def __init__(self) -> None:
        super().__init__("key does not carry the ed25519 prefix")


class ConversionPrefixED25519Error(DaemonError):
    """A prefixed ed25519 key does not have 37 bytes."""

    def __init__(self, length: int, key_hex: str) -> None:
        self.length = length
        self.key_hex = key_hex
        super().__init__(
            f"prefixed ed25519 key must be 37 bytes, got {length}: {key_hex}"
        )


class Bech32DecodeError(DaemonError):
    """Bech32 encoding or decoding failed."""

    def __init__(self) -> None:
        super().__init__("bech32 encoding or decoding failed")


class Bech32PrefixLengthError(DaemonError):
    """A bech32 string has an unexpected prefix or length."""

    def __init__(
        self, hrp: str, length: int, expected_prefix: str, expected_length: int
    ) -> None:
        self.hrp = hrp
        self.length = length
        self.expected_prefix = expected_prefix
        self.expected_length = expected_length
        super().__init__(
            f"bech32 string has prefix {hrp!r} and length {length}, "
            f"expected prefix {expected_prefix!r} and length {expected_length}"
        )


class ImplementationError(DaemonError):
    """The key material needed for the operation is missing."""

    def __init__(self) -> None:
        super().__init__("the key material needed for this operation is missing")


class SignatureError(DaemonError):
    """A signature, public key or message could not be parsed or verified."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"signature verification failed: {reason}")