import hashlib

import pytest

from tristram.md5 import MD5, md5_hexdigest


@pytest.mark.parametrize(
    "message, expected",
    [
        (b"", "d41d8cd98f00b204e9800998ecf8427e"),
        (b"abc", "900150983cd24fb0d6963f7d28e17f72"),
        (b"message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
        (b"abcdefghijklmnopqrstuvwxyz", "c3fcd3d76192e4007dfb496cca67e13b"),
        (
            b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
            "d174ab98d277d9f5a5611c2c9f419d9f",
        ),
        (
            b"1234567890" * 8,
            "57edf4a22be3c955ac49da2e2107b67a",
        ),
    ],
)
def test_rfc_vectors(message, expected):
    assert md5_hexdigest(message) == expected
    assert MD5(message).hexdigest() == expected


@pytest.mark.parametrize("length", [1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_standard_library_across_padding_boundaries(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert MD5(data).digest() == hashlib.md5(data).digest()


def test_digest_is_sixteen_bytes_and_hex_matches():
    h = MD5(b"tristram")
    raw = h.digest()
    assert len(raw) == 16
    assert h.hexdigest() == raw.hex()


def test_incremental_updates_equal_single_update():
    data = bytes(range(256)) * 3
    h = MD5()
    for start in range(0, len(data), 37):
        h.update(data[start:start + 37])
    assert h.digest() == MD5(data).digest()


def test_digest_does_not_change_state():
    h = MD5(b"part one ")
    first = h.hexdigest()
    assert h.hexdigest() == first
    h.update(b"part two")
    assert h.hexdigest() == md5_hexdigest(b"part one part two")


def test_copy_is_independent():
    h = MD5(b"shared prefix ")
    clone = h.copy()
    h.update(b"left")
    clone.update(b"right")
    assert h.hexdigest() == md5_hexdigest(b"shared prefix left")
    assert clone.hexdigest() == md5_hexdigest(b"shared prefix right")


def test_accepts_bytearray_and_memoryview():
    data = b"buffer input"
    expected = md5_hexdigest(data)
    assert MD5(bytearray(data)).hexdigest() == expected
    assert MD5(memoryview(data)).hexdigest() == expected


def test_rejects_text():
    with pytest.raises(TypeError):
        MD5("not bytes")
    with pytest.raises(TypeError):
        MD5().update("not bytes")