# zewif

Basic data types for the Zcash Wallet Interchange Format (ZeWIF). The package reads the
little-endian binary encodings found in wallet files and encodes values as CBOR with
`cbor2`.

## Modules

- `zewif.compact_size`: `read_exact(stream, length)` reads an exact number of bytes and
  raises `EOFError` when the stream runs short. `parse_compact_size(stream)` and
  `CompactSize.parse(stream)` read Bitcoin-style variable-length integers. A value with a
  `0xfd`, `0xfe` or `0xff` prefix that would fit a shorter encoding raises `ValueError`.
- `zewif.blob`: `Blob` is an immutable byte string. `Blob20`, `Blob32` and `Blob64` have
  fixed lengths. `blob_type(name, size)` makes a new named fixed-size type. Blobs offer
  `from_hex`, `hex`, `parse`, `to_cbor` and `from_cbor`. Bad hex, or hex of the wrong
  length, raises `HexParseError`, which is a `ValueError`.
- `zewif.data`: `Data` is an immutable byte string of any length. `Data.parse` reads a
  compact-size length prefix and then that many bytes. `Data.parse_len` reads a fixed
  count, and `Data.concat` joins byte sequences. `data_type(name)` makes a new named
  variable-length type.
- `zewif.digest_utils`: `sha256` hashes once and `hash256` hashes twice. Both return a
  `Blob32`, and a `str` argument is hashed as UTF-8.
- `zewif.amount`: `Amount` counts zatoshis in the range `-MAX_BALANCE..=MAX_BALANCE`
  (`COIN` and `MAX_MONEY` are defined there too). Out-of-range values and the results of
  `+`, `-`, unary `-` and `*` raise `ValueError`. `Amount.sum` returns `None` instead of
  raising. The `from_*_le_bytes` constructors and `to_i64_le_bytes` convert to and from
  8-byte little-endian integers.
- `zewif.block_height`: `BlockHeight` is an unsigned 32-bit height. Adding or subtracting
  a block count saturates at the ends of the range. Subtracting one height from another
  gives a non-negative block count. `H0` is the genesis height.
- `zewif.block_hash`: `BlockHash` stores 32 bytes in internal order. `str()` and
  `from_hex` use the byte-reversed hex that block explorers show. `read` and `write` work
  on binary streams.
- `zewif.branch_id`: `BranchId` is an `IntEnum` of the consensus branch IDs from Sprout to
  NU6. `str()` gives names such as `Sapling` or `Nu5`. An unknown value raises
  `ValueError`.
- `zewif.expiry_height`: `ExpiryHeight.as_option()` returns `None` for height 0, which
  means "no expiry".
- `zewif.int_id`: `IntID` is a 32-bit identifier shown as `0x` followed by eight hex
  digits.
- `zewif.indexed`: `Indexed` is a protocol for objects with an `index` attribute.
  `set_indexes` numbers items from zero. `sorted_by_index` orders items by index and is
  stable.
- `zewif.incremental_merkle_tree`: `IncrementalMerkleTree` holds optional `left` and
  `right` hashes and a list of optional `parents`. It can be read with `parse` and
  converted with `to_cbor` / `from_cbor`. `Anchor` is an alias of `Blob32`.
- `zewif.incremental_witness`: `IncrementalWitness.parse(stream, depth, hash_type)` reads
  a tree, a vector of `hash_type` values and an optional cursor tree.

## Installation

```
pip install zewif
```

## Examples

```python
from zewif.amount import Amount

total = Amount.sum([Amount.from_u64(100_000_000), Amount.from_u64(50_000_000)])
assert int(total) == 150_000_000
```

```python
import io
from zewif.compact_size import parse_compact_size
from zewif.data import Data

assert parse_compact_size(io.BytesIO(bytes([0xFD, 0x00, 0x01]))) == 256

memo = Data.parse(io.BytesIO(b"\x03abc"))
assert memo.hex() == "616263"
```

```python
from zewif.block_hash import BlockHash

text = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
block_hash = BlockHash.from_hex(text)
assert str(block_hash) == text
assert BlockHash.from_cbor(block_hash.to_cbor()) == block_hash
```

## What it does not do

This package provides only the basic value types. It has no wallet, account, address or
transaction records. It cannot read or write a complete wallet file. It has no
command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```