"""Proof nodes and their hashing rules."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _encode_uvarint(value: int) -> bytes:
    if value < 0:
        raise ValueError(f"unsigned varint cannot encode {value}")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def _encode_varint(value: int) -> bytes:
    """Zigzag-encode a signed 64-bit integer as a varint."""
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise OverflowError(f"{value} does not fit in 64 bits")
    zigzag = value << 1 if value >= 0 else ((-value) << 1) - 1
    return _encode_uvarint(zigzag)


def _encode_bytes(data: bytes | None) -> bytes:
    """Length-prefix ``data`` with an unsigned varint."""
    data = data or b""
    return _encode_uvarint(len(data)) + bytes(data)


def _hex(data: bytes | None) -> str:
    return (data or b"").hex().upper()


@dataclass
class ProofInnerNode:
    """An inner node on a path from the root to a leaf.

    At most one of ``left`` and ``right`` is set: the other side is the
    child hash supplied when hashing.
    """

    height: int = 0
    size: int = 0
    version: int = 0
    left: bytes | None = None
    right: bytes | None = None

    def __str__(self) -> str:
        return self.indented("")

    def indented(self, indent: str) -> str:
        """Render the node, prefixing inner lines with ``indent``."""
        return (
            "ProofInnerNode{\n"
            f"{indent}  Height:  {self.height}\n"
            f"{indent}  Size:    {self.size}\n"
            f"{indent}  Version: {self.version}\n"
            f"{indent}  Left:    {_hex(self.left)}\n"
            f"{indent}  Right:   {_hex(self.right)}\n"
            f"{indent}}}"
        )

    def hash(self, child_hash: bytes) -> bytes:
        """Hash this node with ``child_hash`` filling the unset side."""
        if self.left and self.right:
            raise ValueError("both left and right child hashes are set")
        preimage = (
            _encode_varint(self.height)
            + _encode_varint(self.size)
            + _encode_varint(self.version)
        )
        if not self.left:
            preimage += _encode_bytes(child_hash) + _encode_bytes(self.right)
        else:
            preimage += _encode_bytes(self.left) + _encode_bytes(child_hash)
        return hashlib.sha256(preimage).digest()


@dataclass
class ProofLeafNode:
    """A leaf at the end of a proof path."""

    key: bytes = b""
    value_hash: bytes = b""
    version: int = 0

    def __str__(self) -> str:
        return self.indented("")

    def indented(self, indent: str) -> str:
        """Render the leaf, prefixing inner lines with ``indent``."""
        return (
            "ProofLeafNode{\n"
            f"{indent}  Key:       {_hex(self.key)}\n"
            f"{indent}  ValueHash: {_hex(self.value_hash)}\n"
            f"{indent}  Version:   {self.version}\n"
            f"{indent}}}"
        )

    def hash(self) -> bytes:
        """Hash the leaf: height 0, size 1, version, key, value hash."""
        preimage = (
            _encode_varint(0)
            + _encode_varint(1)
            + _encode_varint(self.version)
            + _encode_bytes(self.key)
            + _encode_bytes(self.value_hash)
        )
        return hashlib.sha256(preimage).digest()