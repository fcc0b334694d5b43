"""
Application codecs: 64 bytes of BIP85 entropy to the artifact each application produces
"""
from typing import Any

from bip85.core import BIP85, ECC, WALLET, ECCError, ExtendedKeyError, KeyDerivationError, MnemonicEncodingError, \
    UnsupportedLanguageError, UnsupportedLengthError, UnsupportedWordCountError
from bip85.cryptography import validate_private_key
from bip85.data import encode_base58check
from bip85.wallet.providers import HDKeyProvider, WordlistProvider
from bip85.wallet.wordlist import Language

__all__ = ["entropy_length_for_words", "mnemonic_from_entropy", "xprv_from_entropy", "hex_from_entropy",
           "wif_from_entropy"]


def entropy_length_for_words(word_count: int) -> int:
    """
    12 -> 16 bytes, 18 -> 24 bytes, 24 -> 32 bytes
    """
    try:
        return BIP85.WORD_COUNTS[word_count]
    except KeyError:
        raise UnsupportedWordCountError(
            f"Unsupported word count: {word_count}. Must be one of {sorted(BIP85.WORD_COUNTS)}") from None


def mnemonic_from_entropy(entropy: bytes, word_count: int, wordlist: WordlistProvider,
                          language: Language = Language.ENGLISH) -> str:
    """
    Truncate the entropy to the byte length for word_count and let the wordlist provider add the checksum
    """
    if not wordlist.supports(language):
        raise UnsupportedLanguageError(f"Language {language.name} (code {language.code}) is not supported")

    truncated = entropy[:entropy_length_for_words(word_count)]
    try:
        return wordlist.encode_entropy(truncated, language)
    except ValueError as e:
        raise MnemonicEncodingError(f"Failed to generate mnemonic from {len(truncated)} bytes: {e}") from e


def xprv_from_entropy(entropy: bytes, provider: HDKeyProvider) -> Any:
    """
    chain code = entropy[0:32], private key = entropy[32:64], as a depth-0 root key
    """
    if len(entropy) != BIP85.ENTROPY_BYTES:
        raise KeyDerivationError(f"XPRV application needs {BIP85.ENTROPY_BYTES} bytes of entropy")

    chain_code, key_bytes = entropy[:32], entropy[32:]
    try:
        validate_private_key(key_bytes)
        return provider.new_private_key(chain_code, key_bytes)
    except (ECCError, ExtendedKeyError) as e:
        raise KeyDerivationError(f"Entropy does not form a valid private key: {e}") from e


def hex_from_entropy(entropy: bytes, num_bytes: int) -> str:
    if not BIP85.HEX_MIN_BYTES <= num_bytes <= BIP85.HEX_MAX_BYTES:
        raise UnsupportedLengthError(
            f"HEX length {num_bytes} must be between {BIP85.HEX_MIN_BYTES} and {BIP85.HEX_MAX_BYTES} bytes")
    return entropy[:num_bytes].hex()


def wif_from_entropy(entropy: bytes) -> str:
    """
    First 32 bytes as a compressed mainnet WIF: Base58Check(0x80 || key || 0x01)
    """
    key_bytes = entropy[:ECC.PRIVKEY_BYTES]
    try:
        validate_private_key(key_bytes)
    except ECCError as e:
        raise KeyDerivationError(f"Entropy does not form a valid private key: {e}") from e
    return encode_base58check(bytes([WALLET.WIF_PREFIX]) + key_bytes + bytes([WALLET.WIF_COMPRESSED]))
