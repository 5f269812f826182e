# merkchain

A small hash-linked chain of blocks. Each block holds a list of
transactions. A SHA-256 Merkle root sums up those transactions, and each
block is linked to the block before it by that block's hash.

## Installing

```
pip install .
```

## Commands

```
merkchain
```

Builds a chain with a genesis block and three blocks of sample
transactions. It prints every block and reports whether the chain is
valid. It then reads the second block and reports validity again. The
chain is left unchanged, so both reports say `Yes`.

```
merkchain-merkle
```

Prints five numbered sample transactions and the Merkle root computed
over them.

Both commands take no options except `--help`.

## Using it from Python

```python
from merkchain.blockchain import Blockchain
from merkchain.transaction import Transaction

chain = Blockchain()
chain.add_block([Transaction("Alice", "Bob", 10.0),
                 Transaction("Bob", "Charlie", 5.0)])
block = chain.add_block([Transaction("Charlie", "David", 15.0)])

print(chain.is_valid())   # True
print(len(chain))         # 3, counting the genesis block
print(chain[1].hash)      # blocks can be indexed and iterated
print(chain.describe())   # every block, with its transactions
```

### Transactions

`Transaction(sender, receiver, amount, timestamp=...)` is a frozen
dataclass. By default its timestamp is the creation time in whole
seconds, stored as text. `payload()` returns the text that gets hashed:
the sender, receiver, amount and timestamp joined together.
`describe()` returns a one-line summary. `format_amount(amount)`
formats amounts with six significant digits, so `10.0` becomes `10`
and `3.2` stays `3.2`.

### Merkle roots

```python
from merkchain.merkle import MerkleTree, merkle_root, sha256_hex

tree = MerkleTree([Transaction("Alice", "Bob", 10.0)])
print(tree.root, tree.leaf_hashes)
print(tree.describe())

root = merkle_root([sha256_hex("a"), sha256_hex("b"), sha256_hex("c")])
```

`sha256_hex(text)` returns the lowercase hex SHA-256 digest of the
UTF-8 text. Each leaf is the `sha256_hex` of a transaction's payload.
The root is built as follows:

- With no transactions the root is the empty string.
- With one transaction the root is that transaction's hash.
- Otherwise, each pair of neighbouring hex hashes is concatenated and
  hashed to give the next level up. When a level has an odd number of
  hashes, the last one is paired with itself. This repeats until one
  hash is left.

### Blocks and the chain

`Block(transactions, previous_hash, timestamp=None)` records its
transactions, the Merkle root over them and its creation time in whole
seconds, unless you pass a timestamp. Its `hash` is the SHA-256 of the
Merkle root, the previous hash and the timestamp. `calculate_hash()`
computes that value again from the block's current fields.

A `Blockchain` starts with a genesis block that has no transactions and
the previous hash `"0"`. `add_block(transactions)` appends a block
linked to the last block and returns it. The `chain` property gives the
blocks as a tuple. `is_valid()` checks every block after the genesis
block. Each must name its predecessor's hash, and its stored hash must
match `calculate_hash()`.

## What it does not do

The chain exists only in memory. Nothing is saved or loaded. There is
no mining or proof of work and no networking. Nothing checks balances
or signatures on transactions.

## Running the tests

```
pip install ".[test]"
pytest
```