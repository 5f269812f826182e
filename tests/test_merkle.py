from merkchain.merkle import MerkleTree, merkle_root, sha256_hex
from merkchain.transaction import Transaction


def test_sha256_hex_known_vectors():
    assert sha256_hex("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert sha256_hex("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_sha256_hex_is_lowercase_64_chars():
    digest = sha256_hex("Alice")
    assert len(digest) == 64
    assert digest == digest.lower()
    int(digest, 16)


def test_empty_root_is_empty_string():
    assert merkle_root([]) == ""


def test_single_leaf_is_its_own_root():
    leaf = sha256_hex("only")
    assert merkle_root([leaf]) == leaf


def test_two_leaves_hash_concatenation():
    a, b = sha256_hex("a"), sha256_hex("b")
    assert merkle_root([a, b]) == sha256_hex(a + b)


def test_odd_level_duplicates_last_leaf():
    leaves = [sha256_hex(s) for s in "abc"]
    assert merkle_root(leaves) == merkle_root(leaves + [leaves[-1]])


def test_root_depends_on_order():
    a, b = sha256_hex("a"), sha256_hex("b")
    assert merkle_root([a, b]) != merkle_root([b, a])


def test_root_is_built_from_pair_roots():
    leaves = [sha256_hex(s) for s in "abcd"]
    left = merkle_root(leaves[:2])
    right = merkle_root(leaves[2:])
    assert merkle_root(leaves) == sha256_hex(left + right)


def test_tree_hashes_transaction_payloads():
    txs = [
        Transaction("Alice", "Bob", 10.0, timestamp="1"),
        Transaction("Bob", "Charlie", 5.0, timestamp="1"),
    ]
    tree = MerkleTree(txs)
    assert tree.leaf_hashes == tuple(sha256_hex(tx.payload()) for tx in txs)
    assert tree.root == merkle_root(tree.leaf_hashes)


def test_tree_without_transactions():
    tree = MerkleTree([])
    assert tree.leaf_hashes == ()
    assert tree.root == ""
    assert tree.describe() == "Merkle Root: "


def test_describe_shows_root():
    tree = MerkleTree([Transaction("Frank", "Grace", 12.0, timestamp="5")])
    assert tree.describe() == f"Merkle Root: {tree.root}"
    assert tree.root == tree.leaf_hashes[0]