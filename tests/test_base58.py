"""
Methods for testing Base58 and Base58Check encoding and decoding
"""
from secrets import token_bytes

import pytest

from bip85.core import Base58Error
from bip85.data import decode_base58, decode_base58check, encode_base58, encode_base58check

# --- Messages
msg1 = "Decoded Base58 data doesn't match original byte data"
msg2 = "Leading zero bytes not encoded as leading 1s"


def test_known_values():
    assert encode_base58(b'') == ""
    assert encode_base58(b'\x00') == "1"
    assert encode_base58(b'\x00\x00\x01') == "112"
    assert encode_base58(b'hello world') == "StV1DL6CwTryKyV"
    assert decode_base58("StV1DL6CwTryKyV") == b'hello world'


def test_base58_codec():
    data = b'\x00\x00' + token_bytes(30)
    encoded = encode_base58(data)
    assert encoded.startswith("11"), msg2
    assert decode_base58(encoded) == data, msg1


def test_base58check_codec():
    data = token_bytes(78)
    assert decode_base58check(encode_base58check(data)) == data, msg1


def test_base58check_rejects_bad_checksum():
    encoded = encode_base58check(b'\x04\x88\xad\xe4' + token_bytes(20))
    # Swap the last character for a different one
    tampered = encoded[:-1] + ("2" if encoded[-1] != "2" else "3")
    with pytest.raises(Base58Error):
        decode_base58check(tampered)


@pytest.mark.parametrize("bad", ["0abc", "Ol", "abc!"])
def test_base58_rejects_invalid_characters(bad):
    with pytest.raises(Base58Error):
        decode_base58(bad)


def test_base58check_too_short():
    with pytest.raises(Base58Error):
        decode_base58check("1")
