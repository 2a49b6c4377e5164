"""Verification of secp256k1 ECDSA signatures over SHA-256 message digests."""

from __future__ import annotations

import base64
import binascii
import hashlib

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    Prehashed,
    encode_dss_signature,
)

from ..errors import SignatureError

SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_HALF_ORDER = SECP256K1_ORDER // 2
_COMPACT_LENGTH = 64


def _b64decode(text: str, what: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SignatureError(f"invalid base64 {what}: {exc}") from exc


def _load_public_key(raw: bytes) -> ec.EllipticCurvePublicKey:
    if len(raw) not in (33, 65):
        raise SignatureError(f"public key must be 33 or 65 bytes, got {len(raw)}")
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), raw)
    except ValueError as exc:
        raise SignatureError(f"malformed public key: {exc}") from exc


def _parse_compact(raw: bytes) -> tuple[int, int]:
    if len(raw) != _COMPACT_LENGTH:
        raise SignatureError(
            f"compact signature must be {_COMPACT_LENGTH} bytes, got {len(raw)}"
        )
    r = int.from_bytes(raw[:32], "big")
    s = int.from_bytes(raw[32:], "big")
    if r >= SECP256K1_ORDER or s >= SECP256K1_ORDER:
        raise SignatureError("signature component overflows the curve order")
    return r, s


def verify(pub_key: str, signature: str, blob: str) -> None:
    """Check a base64 compact signature of ``blob`` against a base64 public key.

    The message is the SHA-256 digest of the UTF-8 encoded blob. Signatures
    must be in low-S form. Raises SignatureError if anything fails.
    """
    public_bytes = _b64decode(pub_key, "public key")
    signature_bytes = _b64decode(signature, "signature")
    public_key = _load_public_key(public_bytes)
    digest = hashlib.sha256(blob.encode("utf-8")).digest()
    r, s = _parse_compact(signature_bytes)
    if r == 0 or s == 0:
        raise SignatureError("signature does not match")
    if s > _HALF_ORDER:
        raise SignatureError("signature is not in low-S form")
    try:
        public_key.verify(
            encode_dss_signature(r, s),
            digest,
            ec.ECDSA(Prehashed(hashes.SHA256())),
        )
    except InvalidSignature as exc:
        raise SignatureError("signature does not match") from exc