"""
Methods for Base58 and Base58Check encoding, as used by serialized extended keys and WIF
"""
from bip85.core import Base58Error, XKEYS
from bip85.cryptography import hash256

__all__ = ["BASE58_ALPHABET", "encode_base58", "decode_base58", "encode_base58check", "decode_base58check"]

# --- BASE58 ENCODING --- #
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE = len(BASE58_ALPHABET)


def encode_base58(data: bytes) -> str:
    """
    Given bytes we return the base58 encoded string. Each leading zero byte becomes a leading '1'
    """
    n = int.from_bytes(data, "big")
    encoded = ""
    while n > 0:
        n, remainder = divmod(n, BASE)
        encoded = BASE58_ALPHABET[remainder] + encoded

    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return "1" * leading_zeros + encoded


def decode_base58(encoded: str) -> bytes:
    """
    Given a base58 encoded string, return the underlying bytes
    """
    total = 0
    for char in encoded:
        char_i = BASE58_ALPHABET.find(char)
        if char_i < 0:
            raise Base58Error(f"Invalid base58 character: {char!r}")
        total = total * BASE + char_i

    leading_zeros = len(encoded) - len(encoded.lstrip("1"))
    body = total.to_bytes((total.bit_length() + 7) // 8, "big")
    return b'\x00' * leading_zeros + body


def encode_base58check(data: bytes) -> str:
    """
    Append the first 4 bytes of HASH256(data) and base58 encode
    """
    return encode_base58(data + hash256(data)[:XKEYS.CHECKSUM_BYTES])


def decode_base58check(encoded: str) -> bytes:
    """
    Decode and verify the trailing checksum. Returns the payload without the checksum.
    """
    decoded = decode_base58(encoded)
    if len(decoded) < XKEYS.CHECKSUM_BYTES:
        raise Base58Error("Decoded data too short to contain a checksum")

    payload, checksum = decoded[:-XKEYS.CHECKSUM_BYTES], decoded[-XKEYS.CHECKSUM_BYTES:]
    if hash256(payload)[:XKEYS.CHECKSUM_BYTES] != checksum:
        raise Base58Error("Decoded checksum does not equal given checksum")
    return payload
