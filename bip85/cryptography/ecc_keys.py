"""
Public keys on secp256k1, as needed for BIP32 fingerprints and xpub export
"""
from bip85.core import ECC, ECCError, PubKeyError
from bip85.cryptography.ecc import SECP256K1, Point
from bip85.cryptography.hash_functions import hash160

__all__ = ["PubKey", "validate_private_key"]


def validate_private_key(private_key: int | bytes) -> int:
    """
    Return the private key as an integer, raising ECCError if it is not in [1, n-1]
    """
    if isinstance(private_key, bytes):
        if len(private_key) != ECC.PRIVKEY_BYTES:
            raise ECCError(f"Private key must be {ECC.PRIVKEY_BYTES} bytes")
        private_key = int.from_bytes(private_key, "big")
    if not 0 < private_key < SECP256K1.order:
        raise ECCError("Private key out of range for secp256k1")
    return private_key


class PubKey:
    """
    The point k*G for a private key k
    """
    __slots__ = ("x", "y")

    def __init__(self, private_key: int | bytes):
        self.x, self.y = SECP256K1.multiply_generator(validate_private_key(private_key))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PubKey):
            raise PubKeyError("Compared Pubkey with different type")
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    @classmethod
    def from_point(cls, point: Point):
        if not point or not SECP256K1.is_point_on_curve(point):
            raise PubKeyError("Given point not on SECP256K1 curve")
        obj = object.__new__(cls)  # bypass __init__
        obj.x, obj.y = point
        return obj

    @classmethod
    def from_compressed(cls, compressed_pubkey: bytes):
        if len(compressed_pubkey) != ECC.COMPRESSED_BYTES:
            raise PubKeyError("Compressed pubkey must be 33 bytes")
        prefix = compressed_pubkey[0]
        if prefix not in (0x02, 0x03):
            raise PubKeyError("Invalid prefix for compressed pubkey")
        x = int.from_bytes(compressed_pubkey[1:], "big")
        if not 0 < x < SECP256K1.p:
            raise PubKeyError("x out of range")

        # p = 3 (mod 4) so the square root is a single exponentiation
        rhs = (pow(x, 3, SECP256K1.p) + SECP256K1.a * x + SECP256K1.b) % SECP256K1.p
        y = pow(rhs, (SECP256K1.p + 1) >> 2, SECP256K1.p)
        if (y * y) % SECP256K1.p != rhs:
            raise PubKeyError("Given x coordinate not on curve")
        if (y & 1) != (prefix & 1):
            y = SECP256K1.p - y

        obj = object.__new__(cls)
        obj.x, obj.y = x, y
        return obj

    def compressed(self) -> bytes:
        y_byte = b'\x02' if self.y % 2 == 0 else b'\x03'
        return y_byte + self.x.to_bytes(ECC.COORD_BYTES, "big")

    def to_point(self) -> Point:
        return Point(self.x, self.y)

    def pubkey_hash(self) -> bytes:
        return hash160(self.compressed())
