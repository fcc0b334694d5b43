"""
Extended Keys (xpub/xprv)
Implements BIP32 Hierarchical Deterministic key derivation and the Base58Check serialization of extended keys

"""
import json
from io import BytesIO

from bip85.core import ECC, ECCError, ExtendedKeyError, PubKeyError, XKEYS, get_stream, read_big_int, read_stream, \
    remaining
from bip85.core.logging import get_logger
from bip85.cryptography import SECP256K1, PubKey, hash160, hmac_sha512, validate_private_key
from bip85.data import decode_base58check, encode_base58check

__all__ = ["ExtendedKey"]

logger = get_logger(__name__)

HARDENED_INDEX = XKEYS.HARDENED_OFFSET
SEED_KEY = XKEYS.SEED_KEY
PRIVATE_VERSIONS = XKEYS.PRIVATE_VERSIONS
PUBLIC_VERSIONS = XKEYS.PUBLIC_VERSIONS
ZERO_FINGERPRINT = b'\x00' * 4


class ExtendedKey:
    """
    BIP32 extended key. key_data is the 32-byte private scalar for an xprv and the 33-byte compressed public key
    for an xpub.
    """
    __slots__ = ('version', 'depth', 'parent_fingerprint', 'child_number', 'chain_code', 'key_data')

    def __init__(self,
                 key_data: bytes,
                 chain_code: bytes,
                 depth: int = 0,
                 parent_fingerprint: bytes = ZERO_FINGERPRINT,
                 child_number: int = 0,
                 version: bytes = XKEYS.MAINNET_PRIVATE,
                 ):
        """
        Fields in serialization order. Raises ExtendedKeyError on any field of the wrong width or range;
        the private scalar itself is range-checked by from_master_seed and from_serial.
        """
        widths = ((version, 4, "version"), (parent_fingerprint, 4, "parent fingerprint"),
                  (chain_code, XKEYS.CHAIN_LENGTH, "chain code"))
        for value, width, field in widths:
            if len(value) != width:
                raise ExtendedKeyError(f"{field.capitalize()} must be {width} bytes, got {len(value)}")
        if len(key_data) not in (ECC.PRIVKEY_BYTES, ECC.COMPRESSED_BYTES):
            raise ExtendedKeyError(f"Key data must be 32 bytes (private) or 33 bytes (public), got {len(key_data)}")
        if not 0 <= depth <= XKEYS.MAX_DEPTH:
            raise ExtendedKeyError(f"Depth {depth} out of range")
        if not 0 <= child_number <= XKEYS.MAX_INDEX:
            raise ExtendedKeyError(f"Child number {child_number} out of range")

        self.version, self.depth, self.child_number = version, depth, child_number
        self.parent_fingerprint, self.chain_code, self.key_data = parent_fingerprint, chain_code, key_data

    # --- OVERRIDES --- #

    def __eq__(self, other) -> bool:
        """
        Two ExtendedKey objects are equal if and only if their serialized bytes are equal
        """
        if not isinstance(other, ExtendedKey):
            return False
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        kind = "xprv" if self.is_private else "xpub"
        return f"ExtendedKey({kind}, depth={self.depth}, child_number={self.child_number})"

    # --- CLASS METHODS --- #
    @classmethod
    def from_master_seed(cls, seed: bytes, version: bytes = XKEYS.MAINNET_PRIVATE):
        """
        BIP32 master key: I = HMAC-SHA512("Bitcoin seed", seed), key = I_L, chain code = I_R
        """
        if not 16 <= len(seed) <= 64:
            raise ExtendedKeyError(f"Seed must be between 16 and 64 bytes, received {len(seed)}")

        seed_hash = hmac_sha512(key=SEED_KEY, message=seed)
        privkey, chain_code = seed_hash[:32], seed_hash[32:]

        try:
            validate_private_key(privkey)
        except ECCError as e:
            raise ExtendedKeyError("Seed produced an invalid master key") from e

        return cls(privkey, chain_code, depth=0, parent_fingerprint=ZERO_FINGERPRINT, child_number=0,
                   version=version)

    @classmethod
    def from_address(cls, address: str):
        """
        Given a Base58Check string (xprv.../xpub...), we decode and return the from_serial method
        """
        return cls.from_serial(decode_base58check(address))

    @classmethod
    def from_serial(cls, byte_stream: bytes | BytesIO):
        """
        We read in the 78-byte serialized extended key:
        version || depth || parent fingerprint || index || chain code || key data
        """
        stream = get_stream(byte_stream)

        version = read_stream(stream, 4, "version")
        depth = read_big_int(stream, 1, "depth")
        parent_fingerprint = read_stream(stream, 4, "parent fingerprint")
        child_number = read_big_int(stream, 4, "child number")
        chain_code = read_stream(stream, XKEYS.CHAIN_LENGTH, "chain code")
        key_data = read_stream(stream, ECC.COMPRESSED_BYTES, "key")
        if remaining(stream):
            raise ExtendedKeyError("Trailing data after serialized extended key")

        # Private keys carry a 0x00 tag byte in front of the scalar
        if version in PRIVATE_VERSIONS:
            if key_data[0] != 0:
                raise ExtendedKeyError("Private key data must start with 0x00")
            key_data = key_data[1:]
            try:
                validate_private_key(key_data)
            except ECCError as e:
                raise ExtendedKeyError("Serialized private key out of range") from e
        elif version in PUBLIC_VERSIONS:
            try:
                PubKey.from_compressed(key_data)
            except PubKeyError as e:
                raise ExtendedKeyError("Serialized public key is not a valid point") from e
        else:
            raise ExtendedKeyError(f"Unknown extended key version: {version.hex()}")

        if depth == 0 and (parent_fingerprint != ZERO_FINGERPRINT or child_number != 0):
            raise ExtendedKeyError("Zero depth key with non-zero parent fingerprint or index")

        return cls(key_data, chain_code, depth, parent_fingerprint, child_number, version)

    # --- PROPERTIES --- #
    @property
    def is_private(self) -> bool:
        return len(self.key_data) == 32

    @property
    def is_public(self) -> bool:
        return len(self.key_data) == 33

    @property
    def is_mainnet(self) -> bool:
        return self.version[:2] == b'\x04\x88'

    @property
    def is_testnet(self) -> bool:
        return self.version[:2] == b'\x04\x35'

    @property
    def private_key(self) -> bytes:
        """The 32-byte private scalar"""
        if not self.is_private:
            raise ExtendedKeyError("Public extended key has no private key")
        return self.key_data

    # --- METHODS --- #

    def to_bytes(self) -> bytes:
        """
        returns the 78-byte serialization of the key
        version || depth || parent fingerprint || index || chain code || key data
        """
        tagged = b"\x00" + self.key_data if self.is_private else self.key_data
        header = self.version + bytes([self.depth]) + self.parent_fingerprint + self.child_number.to_bytes(4, "big")
        return header + self.chain_code + tagged

    def address(self) -> str:
        """The Base58Check string (xprv.../xpub...)"""
        return encode_base58check(self.to_bytes())

    def public_key(self) -> bytes:
        """Compressed public key"""
        if self.is_public:
            return self.key_data
        return PubKey(self.key_data).compressed()

    def fingerprint(self) -> bytes:
        """
        First 4 bytes of HASH160 of the compressed public key
        """
        return hash160(self.public_key())[:4]

    def derive_child(self, index: int) -> "ExtendedKey":
        """
        Derive a child at the given index. An index >= 2^31 is a hardened child and needs the private key.
        Raises ExtendedKeyError for the (astronomically rare) invalid child; callers move on to the next index.
        """
        if not 0 <= index <= XKEYS.MAX_INDEX:
            raise ExtendedKeyError(f"Child index {index} out of range")
        if self.depth >= XKEYS.MAX_DEPTH:
            raise ExtendedKeyError("Maximum depth reached")

        index_bytes = index.to_bytes(4, "big")
        if index >= HARDENED_INDEX:
            if self.is_public:
                raise ExtendedKeyError("Cannot derive hardened child from public key")
            data = b'\x00' + self.key_data + index_bytes
        else:
            data = self.public_key() + index_bytes

        key_hash = hmac_sha512(key=self.chain_code, message=data)
        tweak_int = int.from_bytes(key_hash[:32], "big")
        child_chain_code = key_hash[32:]

        if tweak_int >= SECP256K1.order:
            logger.warning(f"Invalid child at index {index}")
            raise ExtendedKeyError(f"Invalid child at index {index}: tweak out of range")

        if self.is_private:
            child_int = (int.from_bytes(self.key_data, "big") + tweak_int) % SECP256K1.order
            if child_int == 0:
                raise ExtendedKeyError(f"Invalid child at index {index}: zero private key")
            child_key_data = child_int.to_bytes(32, "big")
        else:
            parent_pt = PubKey.from_compressed(self.key_data).to_point()
            child_pt = SECP256K1.add_points(parent_pt, SECP256K1.multiply_generator(tweak_int))
            if not child_pt:
                raise ExtendedKeyError(f"Invalid child at index {index}: point at infinity")
            child_key_data = PubKey.from_point(child_pt).compressed()

        return ExtendedKey(
            version=self.version,
            depth=self.depth + 1,
            parent_fingerprint=self.fingerprint(),
            child_number=index,
            chain_code=child_chain_code,
            key_data=child_key_data
        )

    def derive_path(self, path: str) -> "ExtendedKey":
        """
        Derive the key at a textual path, e.g. "m/44'/0'/0'/0/0". Hardened steps use ' or h.
        """
        parts = path.split('/')
        if parts[0] != 'm':
            raise ValueError("Path must start with 'm'")

        key = self
        for part in parts[1:]:
            if part.endswith("'") or part.endswith("h"):
                index = int(part[:-1]) + HARDENED_INDEX
            else:
                index = int(part)
            key = key.derive_child(index)
        return key

    def get_pubkey(self) -> "ExtendedKey":
        """
        Return the corresponding public ExtendedKey
        """
        if self.is_public:
            return self

        version = self.version
        if version in PRIVATE_VERSIONS:
            version = PUBLIC_VERSIONS[PRIVATE_VERSIONS.index(version)]
        return ExtendedKey(
            key_data=self.public_key(),
            chain_code=self.chain_code,
            depth=self.depth,
            parent_fingerprint=self.parent_fingerprint,
            child_number=self.child_number,
            version=version
        )

    # --- DISPLAY --- #
    def to_dict(self) -> dict:
        """
        Metadata only; the private scalar is never included
        """
        return {
            "type": "xprv" if self.is_private else "xpub",
            "version": self.version.hex(),
            "depth": self.depth,
            "parent_fingerprint": self.parent_fingerprint.hex(),
            "child_number": self.child_number,
            "fingerprint": self.fingerprint().hex(),
            "public_key": self.public_key().hex(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
