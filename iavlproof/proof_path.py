"""Paths of inner nodes from a tree root down to a leaf."""

from __future__ import annotations

from .proof import ProofInnerNode

_MAX_SHOWN = 20


class PathToLeaf(list):
    """A list of :class:`ProofInnerNode` ordered from the root down."""

    def __str__(self) -> str:
        return self.indented("")

    def indented(self, indent: str) -> str:
        """Render the path, prefixing inner lines with ``indent``."""
        if not self:
            return "empty-PathToLeaf"
        parts = [
            f"{i}:{node.indented(indent + '  ')}"
            for i, node in enumerate(self[:_MAX_SHOWN])
        ]
        if len(self) > _MAX_SHOWN:
            parts.append(f"... ({len(self)} total)")
        body = ("\n" + indent + "  ").join(parts)
        return f"PathToLeaf{{\n{indent}  {body}\n{indent}}}"

    def index(self) -> int:  # type: ignore[override]
        """Return the leaf's position in key order, or -1 if the path is invalid."""
        next_sizes = [node.size for node in self[1:]] + [1]
        idx = 0
        for node, next_size in zip(self, next_sizes):
            node: ProofInnerNode
            if node.left is None:
                continue
            if node.right is None:
                idx += node.size - next_size
            else:
                return -1
        return idx