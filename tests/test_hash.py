import pytest

from cryptotool.crypto.hash import digest, hash_dir, hash_file, md5_bytes, sha1_bytes, sha256_bytes, sha512_bytes

ABC = {
    "md5": "900150983cd24fb0d6963f7d28e17f72",
    "sha1": "a9993e364706816aba3e25717850c26c9cd0d89d",
    "sha256": "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    "sha512": "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
              "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
}


@pytest.mark.parametrize("name", sorted(ABC))
def test_known_vectors(name):
    assert digest(name, b"abc").hex() == ABC[name]


def test_named_helpers():
    assert md5_bytes(b"abc").hex() == ABC["md5"]
    assert sha1_bytes(b"abc").hex() == ABC["sha1"]
    assert sha256_bytes(b"abc").hex() == ABC["sha256"]
    assert sha512_bytes(b"abc").hex() == ABC["sha512"]


def test_unknown_algorithm():
    with pytest.raises(ValueError):
        digest("sha3", b"abc")


def test_hash_file_matches_digest(tmp_path):
    f = tmp_path / "big.bin"
    data = bytes(range(256)) * 1000
    f.write_bytes(data)
    assert hash_file(f, "sha256") == digest("sha256", data).hex()


def make_tree(root):
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"alpha")
    (root / "sub" / "b.txt").write_bytes(b"beta")


def test_hash_dir_is_stable(tmp_path):
    one, two = tmp_path / "one", tmp_path / "two"
    make_tree(one)
    make_tree(two)
    assert hash_dir(one, "md5") == hash_dir(two, "md5")
    assert hash_dir(one, "sha256") == digest("sha256", b"a.txt\x00alpha" + b"sub/b.txt\x00beta").hex()


def test_hash_dir_sees_content_and_names(tmp_path):
    root = tmp_path / "tree"
    make_tree(root)
    before = hash_dir(root, "sha1")

    (root / "sub" / "b.txt").write_bytes(b"BETA")
    edited = hash_dir(root, "sha1")
    assert edited != before

    (root / "sub" / "b.txt").rename(root / "sub" / "c.txt")
    assert hash_dir(root, "sha1") != edited


def test_hash_dir_rejects_file(tmp_path):
    f = tmp_path / "f"
    f.write_bytes(b"x")
    with pytest.raises(NotADirectoryError):
        hash_dir(f, "md5")
