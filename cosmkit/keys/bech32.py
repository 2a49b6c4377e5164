"""Bech32 encoding and decoding of byte strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_INDEX = {char: value for value, char in enumerate(CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_BECH32_CONST = 1
_BECH32M_CONST = 0x2BC830A3
_CHECKSUM_LENGTH = 6


def _polymod(values: Iterable[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    codes = [ord(char) for char in hrp]
    return [code >> 5 for code in codes] + [0] + [code & 31 for code in codes]


def _check_hrp(hrp: str) -> None:
    if not hrp:
        raise ValueError("human-readable part is empty")
    if any(not 33 <= ord(char) <= 126 for char in hrp):
        raise ValueError("human-readable part holds an invalid character")
    if hrp.lower() != hrp and hrp.upper() != hrp:
        raise ValueError("human-readable part mixes upper and lower case")


def _convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    accumulator = 0
    bits = 0
    result: list[int] = []
    max_value = (1 << to_bits) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise ValueError(f"value {value} does not fit in {from_bits} bits")
        accumulator = (accumulator << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((accumulator >> bits) & max_value)
    if pad:
        if bits:
            result.append((accumulator << (to_bits - bits)) & max_value)
    elif bits >= from_bits or (accumulator << (to_bits - bits)) & max_value:
        raise ValueError("invalid padding")
    return result


def to_base32(data: bytes) -> list[int]:
    """Split bytes into 5-bit words, zero-padding the last one."""
    return _convert_bits(data, 8, 5, pad=True)


def from_base32(words: Sequence[int]) -> bytes:
    """Join 5-bit words back into bytes; the padding must be short and zero."""
    return bytes(_convert_bits(words, 5, 8, pad=False))


def encode(hrp: str, data: Sequence[int]) -> str:
    """Encode 5-bit words under ``hrp`` with a Bech32 checksum."""
    _check_hrp(hrp)
    if any(not 0 <= word < 32 for word in data):
        raise ValueError("data words must be 5-bit values")
    hrp = hrp.lower()
    words = list(data)
    polymod = _polymod(_hrp_expand(hrp) + words + [0] * _CHECKSUM_LENGTH) ^ _BECH32_CONST
    checksum = [(polymod >> 5 * (5 - shift)) & 31 for shift in range(_CHECKSUM_LENGTH)]
    return hrp + "1" + "".join(CHARSET[word] for word in words + checksum)


def decode(text: str) -> tuple[str, list[int]]:
    """Decode a Bech32 or Bech32m string into its lowercase hrp and data words."""
    if text.lower() != text and text.upper() != text:
        raise ValueError("string mixes upper and lower case")
    text = text.lower()
    separator = text.rfind("1")
    if separator < 0:
        raise ValueError("missing separator")
    hrp, payload = text[:separator], text[separator + 1 :]
    _check_hrp(hrp)
    if len(payload) < _CHECKSUM_LENGTH:
        raise ValueError("data part is too short")
    try:
        words = [_CHARSET_INDEX[char] for char in payload]
    except KeyError as exc:
        raise ValueError(f"invalid data character {exc.args[0]!r}") from None
    if _polymod(_hrp_expand(hrp) + words) not in (_BECH32_CONST, _BECH32M_CONST):
        raise ValueError("invalid checksum")
    return hrp, words[:-_CHECKSUM_LENGTH]