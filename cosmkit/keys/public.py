"""Public keys and the bech32 addresses derived from them."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from Crypto.Hash import RIPEMD160
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ..errors import (
    Bech32DecodeError,
    Bech32PrefixLengthError,
    ConversionED25519Error,
    ConversionError,
    ConversionLengthED25519HexError,
    ConversionLengthError,
    ConversionPrefixED25519Error,
    ConversionSecp256k1Error,
    ImplementationError,
)
from . import bech32

logger = logging.getLogger(__name__)

BECH32_PUBKEY_DATA_PREFIX_SECP256K1 = bytes([0xEB, 0x5A, 0xE9, 0x87, 0x21])
BECH32_PUBKEY_DATA_PREFIX_ED25519 = bytes([0x16, 0x24, 0xDE, 0x64, 0x20])
_VALCONSPUB_PREFIX = "terravalconspub"


def _words_to_bytes(words: Sequence[int], key: str) -> bytes:
    try:
        return bech32.from_base32(words)
    except ValueError as exc:
        raise ConversionError(key, exc) from exc


def _hex_to_bytes(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise ConversionError(text, exc) from exc


def _check_prefix_and_length(prefix: str, data: str, length: int) -> list[int]:
    try:
        hrp, words = bech32.decode(data)
    except ValueError as exc:
        raise ConversionError(data, exc) from exc
    if hrp == prefix and len(data) == length:
        return words
    raise Bech32PrefixLengthError(hrp, len(data), prefix, length)


def _encode(hrp: str, raw: bytes) -> str:
    try:
        return bech32.encode(hrp, bech32.to_base32(raw))
    except ValueError as exc:
        raise Bech32DecodeError() from exc


@dataclass
class PublicKey:
    """A public key and/or the raw address derived from it."""

    raw_pub_key: bytes | None = None
    raw_address: bytes | None = None

    @classmethod
    def from_public_key(cls, bpub: bytes) -> PublicKey:
        """Build from a compressed secp256k1 public key."""
        return cls(
            raw_pub_key=cls.pubkey_from_public_key(bpub),
            raw_address=cls.address_from_public_key(bpub),
        )

    @classmethod
    def from_account(cls, acc_address: str, prefix: str) -> PublicKey:
        """Build from a 44-character bech32 account address with ``prefix``."""
        words = _check_prefix_and_length(prefix, acc_address, 44)
        return cls(raw_address=_words_to_bytes(words, acc_address))

    @classmethod
    def from_tendermint_key(cls, tendermint_public_key: str) -> PublicKey:
        """Build from a ``terravalconspub`` consensus public key."""
        length = len(tendermint_public_key)
        if length == 83:
            words = _check_prefix_and_length(_VALCONSPUB_PREFIX, tendermint_public_key, length)
            raw = _words_to_bytes(words, tendermint_public_key)
            logger.debug("%s", raw.hex())
            if not raw.startswith(BECH32_PUBKEY_DATA_PREFIX_SECP256K1):
                raise ConversionSecp256k1Error()
            public_key = cls.public_key_from_pubkey(raw)
            return cls(raw_pub_key=raw, raw_address=cls.address_from_public_key(public_key))
        if length == 82:
            words = _check_prefix_and_length(_VALCONSPUB_PREFIX, tendermint_public_key, length)
            raw = _words_to_bytes(words, tendermint_public_key)
            logger.info("ED25519 public keys are not fully supported")
            if not raw.startswith(BECH32_PUBKEY_DATA_PREFIX_ED25519):
                raise ConversionED25519Error()
            return cls(raw_pub_key=raw, raw_address=cls.address_from_public_ed25519_key(raw))
        raise ConversionLengthError(length)

    @classmethod
    def from_tendermint_address(cls, tendermint_hex_address: str) -> PublicKey:
        """Build from a 40-character hex tendermint address."""
        length = len(tendermint_hex_address)
        if length != 40:
            raise ConversionLengthED25519HexError(length)
        return cls(raw_address=_hex_to_bytes(tendermint_hex_address))

    @classmethod
    def from_operator_address(cls, valoper_address: str) -> PublicKey:
        """Build from a 51-character ``terravaloper`` operator address."""
        words = _check_prefix_and_length("terravaloper", valoper_address, 51)
        return cls(raw_address=_words_to_bytes(words, valoper_address))

    @classmethod
    def from_raw_address(cls, raw_address: str) -> PublicKey:
        """Build from a hex-encoded raw address."""
        return cls(raw_address=_hex_to_bytes(raw_address))

    @staticmethod
    def pubkey_from_public_key(public_key: bytes) -> bytes:
        """Prefix a secp256k1 public key with its amino prefix."""
        return BECH32_PUBKEY_DATA_PREFIX_SECP256K1 + bytes(public_key)

    @staticmethod
    def pubkey_from_ed25519_public_key(public_key: bytes) -> bytes:
        """Prefix an ed25519 public key with its amino prefix."""
        return BECH32_PUBKEY_DATA_PREFIX_ED25519 + bytes(public_key)

    @staticmethod
    def public_key_from_pubkey(pub_key: bytes) -> bytes:
        """Strip the amino prefix from a prefixed public key."""
        if pub_key.startswith(BECH32_PUBKEY_DATA_PREFIX_SECP256K1):
            return bytes(pub_key[len(BECH32_PUBKEY_DATA_PREFIX_SECP256K1) :])
        if pub_key.startswith(BECH32_PUBKEY_DATA_PREFIX_ED25519):
            body = bytes(pub_key[len(BECH32_PUBKEY_DATA_PREFIX_ED25519) :])
            try:
                key = Ed25519PublicKey.from_public_bytes(body)
            except ValueError as exc:
                raise ConversionError(body.hex(), exc) from exc
            return key.public_bytes(Encoding.Raw, PublicFormat.Raw)
        logger.info("pub key does not start with BECH32 PREFIX")
        raise Bech32DecodeError()

    @staticmethod
    def address_from_public_key(public_key: bytes) -> bytes:
        """Return RIPEMD-160 of SHA-256 of a compressed public key."""
        sha = hashlib.sha256(public_key).digest()
        return RIPEMD160.new(sha).digest()[:20]

    @staticmethod
    def address_from_public_ed25519_key(public_key: bytes) -> bytes:
        """Return the first 20 bytes of SHA-256 of a prefixed ed25519 key's body."""
        expected = 32 + len(BECH32_PUBKEY_DATA_PREFIX_ED25519)
        if len(public_key) != expected:
            raise ConversionPrefixED25519Error(len(public_key), public_key.hex())
        logger.debug("address_from_public_ed25519_key public key - %s", public_key.hex())
        address = hashlib.sha256(public_key[5:]).digest()[:20]
        logger.debug("address_from_public_ed25519_key sha result - %s", address.hex())
        return address

    def _address(self) -> bytes:
        if self.raw_address is None:
            raise ImplementationError()
        return self.raw_address

    def _pub_key(self) -> bytes:
        if self.raw_pub_key is None:
            raise ImplementationError()
        return self.raw_pub_key

    def account(self, prefix: str) -> str:
        """Return the account address."""
        return _encode(prefix, self._address())

    def operator_address(self, prefix: str) -> str:
        """Return the validator operator address."""
        return _encode(f"{prefix}valoper", self._address())

    def application_public_key(self, prefix: str) -> str:
        """Return the application public key."""
        if self.raw_pub_key is None:
            logger.warning("Missing Public Key. Can't continue")
        return _encode(f"{prefix}pub", self._pub_key())

    def operator_address_public_key(self, prefix: str) -> str:
        """Return the validator operator public key."""
        return _encode(f"{prefix}valoperpub", self._pub_key())

    def tendermint(self, prefix: str) -> str:
        """Return the consensus address."""
        return _encode(f"{prefix}valcons", self._address())

    def tendermint_pubkey(self, prefix: str) -> str:
        """Return the consensus public key."""
        return _encode(f"{prefix}valconspub", self._pub_key())