# iavlproof

Building blocks for proofs over versioned IAVL Merkle trees: hashing proof
nodes, describing the path from a root down to a leaf, turning that path into
commitment-proof operations, and iterating over saved and unsaved key/value
state in key order.

The package has no runtime dependencies.

## Installation

```
pip install iavlproof
```

To run the test suite:

```
pip install "iavlproof[test]"
pytest
```

## Modules

### `iavlproof.proof`

- `ProofInnerNode(height, size, version, left, right)`: an inner node on a
  proof path. At most one of `left` and `right` is set; `hash(child_hash)`
  fills the other side with `child_hash` and returns the SHA-256 digest of
  the varint-encoded height, size and version followed by the two
  length-prefixed child hashes. It raises `ValueError` if both sides are set.
- `ProofLeafNode(key, value_hash, version)`: a leaf. `hash()` returns the
  SHA-256 digest of height 0, size 1, the version, the key and the value hash.
- Both render themselves with `str()` or `indented(indent)`.

### `iavlproof.proof_path`

- `PathToLeaf`: a `list` of `ProofInnerNode`, ordered from the root down.
  `index()` returns the leaf's position in key order, counted from the nodes
  whose `right` is `None`. It returns -1 if a node has both `left` and
  `right` set. `str()` and `indented(indent)` show the first 20 nodes and
  then the total count.

### `iavlproof.proof_ops`

- `HashOp` and `LengthOp`: enums of hash functions and length-prefix schemes.
- `LeafOp` and `InnerOp`: frozen dataclasses describing one proof step.
- `convert_leaf_op(version)`: the SHA-256 / VAR_PROTO leaf operation for a
  leaf saved at `version`, with the value prehashed with SHA-256.
- `convert_inner_ops(path)`: one `InnerOp` per node of a path, returned from
  the leaf up to the root.

### `iavlproof.unsaved_iterator`

- `UnsavedFastIterator(start, end, ascending, disk_iterator, additions, removals)`
  merges a sorted iterator over saved state with pending changes. `start` is
  inclusive and `end` exclusive; either may be `None`. `additions` maps keys
  to values and takes precedence over saved copies of the same key. Saved
  keys in `removals` are skipped. Passing `None` for `disk_iterator`,
  `additions` or `removals` raises `ValueError`.
- `disk_iterator` is any object with `valid()`, `key()`, `value()`, `next()`
  and `close()` (the `DiskIterator` protocol).
- The iterator offers `domain()`, `valid()`, `key()`, `value()`, `next()` and
  `close()`. Iterating it with `for` yields `(key, value)` pairs.

### `iavlproof.options`

- `Options(sync=False, initial_version=0, stat=None)`: tree options.
  `default_options()` returns the defaults.
- `Statistics`: thread-safe cache counters. It is updated with
  `inc_cache_hit()`, `inc_cache_miss()`, `inc_fast_cache_hit()` and
  `inc_fast_cache_miss()`, read through `cache_hit_count`,
  `cache_miss_count`, `fast_cache_hit_count` and `fast_cache_miss_count`, and
  cleared with `reset()`.

### `iavlproof.colors`

- `green(*args)`, `blue(*args)`, `cyan(*args)`: wrap each argument in an ANSI
  colour, leave arguments that are already coloured unchanged, and join the
  results.
- `colored_bytes(data, text_color, bytes_color)`: when the environment
  variable `TENDERMINT_IAVL_COLORS_ON` is non-empty, it renders printable
  bytes as characters with `text_color` and other bytes as two hex digits
  with `bytes_color`. Otherwise it returns only the first byte as a
  character, or `""` for empty data.

### `iavlproof.version`

- `VersionInfo` and `get_version_info()`. The result holds the module-level
  `VERSION`, `COMMIT` and `BRANCH` strings, which are empty by default, and
  the running Python version and platform.

## Example

```python
from iavlproof.proof import ProofInnerNode, ProofLeafNode
from iavlproof.proof_path import PathToLeaf
from iavlproof.proof_ops import convert_leaf_op, convert_inner_ops

leaf = ProofLeafNode(key=b"k", value_hash=b"\x00" * 32, version=1)
leaf_hash = leaf.hash()

inner = ProofInnerNode(height=1, size=2, version=1, left=None, right=b"\x11" * 32)
root_hash = inner.hash(leaf_hash)

path = PathToLeaf([inner])
print(path.index())              # 0
print(convert_leaf_op(1))        # LeafOp(...)
print(convert_inner_ops(path))   # [InnerOp(...)]
```

## What this package does not do

It contains no tree. Nothing in it inserts, removes or looks up keys, saves
or loads versions, or stores nodes on disk. It builds no proofs from a tree
and verifies no proofs against a root hash. It only provides the node, path
and operation types, their hashing, and the merging iterator. The saved-state
iterator passed to `UnsavedFastIterator` must come from the caller.