"""
The BIP32/BIP39/BIP85 standard formats
"""
from typing import Final

__all__ = ["ECC", "WALLET", "XKEYS", "BIP85"]


class ECC:
    COORD_BYTES: Final[int] = 32
    PRIVKEY_BYTES: Final[int] = 32
    COMPRESSED_BYTES: Final[int] = 33


class WALLET:
    """
    BIP39 values. The wordlist itself is owned by the wordlist provider, we only keep the language and the
    values needed for WIF exports here
    """
    DEFAULT_LANGUAGE: Final[str] = "english"
    SEED_BYTES: Final[int] = 64
    WIF_PREFIX: Final[int] = 0x80
    WIF_COMPRESSED: Final[int] = 0x01


class XKEYS:
    """
    Constants related to the extended public and private keys
    """
    SEED_KEY: Final[bytes] = b'Bitcoin seed'
    CHAIN_LENGTH: Final[int] = 32
    MAX_DEPTH: Final[int] = 255
    SERIAL_BYTES: Final[int] = 78
    CHECKSUM_BYTES: Final[int] = 4

    # Version bytes for different key types
    MAINNET_PRIVATE: Final[bytes] = bytes.fromhex("0488ade4")
    MAINNET_PUBLIC: Final[bytes] = bytes.fromhex("0488b21e")
    TESTNET_PRIVATE: Final[bytes] = bytes.fromhex("04358394")
    TESTNET_PUBLIC: Final[bytes] = bytes.fromhex("043587cf")
    PRIVATE_VERSIONS: Final[tuple] = (MAINNET_PRIVATE, TESTNET_PRIVATE)
    PUBLIC_VERSIONS: Final[tuple] = (MAINNET_PUBLIC, TESTNET_PUBLIC)

    # Hardened derivation threshold
    HARDENED_OFFSET: Final[int] = 0x80000000
    MAX_INDEX: Final[int] = 0xffffffff


class BIP85:
    """
    Deterministic entropy from BIP32 keychains. Application numbers are the second element of every path.
    WORD_COUNTS maps a BIP39 word count to the number of entropy bytes taken from the digest.
    """
    PURPOSE: Final[int] = 83696968
    HMAC_KEY: Final[bytes] = b'bip-entropy-from-k'
    ENTROPY_BYTES: Final[int] = 64

    # Application numbers
    APP_BIP39: Final[int] = 39
    APP_XPRV: Final[int] = 32
    APP_HEX: Final[int] = 128169
    APP_WIF: Final[int] = 2

    WORD_COUNTS: Final[dict] = {12: 16, 18: 24, 24: 32}
    HEX_MIN_BYTES: Final[int] = 16
    HEX_MAX_BYTES: Final[int] = 64
