"""Proof operations that turn a leaf and its inner path into a root hash."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from .proof import ProofInnerNode, _encode_varint

# Length prefix placed before each 32-byte SHA-256 child hash.
_CHILD_HASH_LENGTH = bytes([0x20])


class HashOp(enum.IntEnum):
    """Hash functions a proof step may apply."""

    NO_HASH = 0
    SHA256 = 1
    SHA512 = 2
    KECCAK = 3
    RIPEMD160 = 4
    BITCOIN = 5
    SHA512_256 = 6


class LengthOp(enum.IntEnum):
    """Length-prefix schemes a leaf step may apply to its key and value."""

    NO_PREFIX = 0
    VAR_PROTO = 1
    VAR_RLP = 2
    FIXED32_BIG = 3
    FIXED32_LITTLE = 4
    FIXED64_BIG = 5
    FIXED64_LITTLE = 6
    REQUIRE_32_BYTES = 7
    REQUIRE_64_BYTES = 8


@dataclass(frozen=True)
class LeafOp:
    """How a key/value pair is hashed into a leaf hash."""

    hash: HashOp = HashOp.NO_HASH
    prehash_key: HashOp = HashOp.NO_HASH
    prehash_value: HashOp = HashOp.NO_HASH
    length: LengthOp = LengthOp.NO_PREFIX
    prefix: bytes = b""


@dataclass(frozen=True)
class InnerOp:
    """How a child hash is combined with its sibling into the parent hash."""

    hash: HashOp = HashOp.NO_HASH
    prefix: bytes = b""
    suffix: bytes = b""


def convert_leaf_op(version: int) -> LeafOp:
    """Return the leaf operation for a leaf saved at ``version``."""
    prefix = _encode_varint(0) + _encode_varint(1) + _encode_varint(version)
    return LeafOp(
        hash=HashOp.SHA256,
        prehash_value=HashOp.SHA256,
        length=LengthOp.VAR_PROTO,
        prefix=prefix,
    )


def _convert_inner_op(node: ProofInnerNode) -> InnerOp:
    prefix = (
        _encode_varint(node.height)
        + _encode_varint(node.size)
        + _encode_varint(node.version)
    )
    if node.left:
        prefix += _CHILD_HASH_LENGTH + bytes(node.left) + _CHILD_HASH_LENGTH
        suffix = b""
    else:
        prefix += _CHILD_HASH_LENGTH
        suffix = _CHILD_HASH_LENGTH + bytes(node.right or b"")
    return InnerOp(hash=HashOp.SHA256, prefix=prefix, suffix=suffix)


def convert_inner_ops(path: Iterable[ProofInnerNode]) -> list[InnerOp]:
    """Return inner operations ordered from the leaf up to the root.

    ``path`` runs from the root down to the leaf, so it is walked backwards.
    """
    return [_convert_inner_op(node) for node in reversed(list(path))]