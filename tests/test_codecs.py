"""
Tests for the application codecs: entropy to mnemonic, xprv, hex and WIF
"""
import pytest

from bip85.core import BIP85, XKEYS, KeyDerivationError, MnemonicEncodingError, UnsupportedLanguageError, \
    UnsupportedLengthError, UnsupportedWordCountError
from bip85.data import decode_base58check
from bip85.wallet import Bip32Provider, Bip39Wordlist, Language, entropy_length_for_words, hex_from_entropy, \
    mnemonic_from_entropy, wif_from_entropy, xprv_from_entropy

ENTROPY = bytes(range(64))
ZERO_PHRASE_12 = " ".join(["abandon"] * 11 + ["about"])
ZERO_PHRASE_24 = " ".join(["abandon"] * 23 + ["art"])

# Entropy at m/83696968'/2'/0' of the BIP85 master key and the WIF it encodes to
WIF_ENTROPY = bytes.fromhex("7040bb53104f27367f317558e78a994ada7296c6fde36a364e5baf206e502bb1") + b'\x11' * 32
WIF = "Kzyv4uF39d4Jrw2W7UryTHwZr1zQVNk4dAFyqE6BuMrMh1Za7uhp"


class BrokenWordlist(Bip39Wordlist):
    def encode_entropy(self, entropy, language=Language.ENGLISH):
        raise ValueError("Data length should be one of the following: [16, 20, 24, 28, 32]")


@pytest.mark.parametrize("word_count, length", [(12, 16), (18, 24), (24, 32)])
def test_entropy_length_for_words(word_count, length):
    assert entropy_length_for_words(word_count) == length


@pytest.mark.parametrize("word_count", [0, 11, 15, 21, 25, -12])
def test_unsupported_word_count(word_count):
    with pytest.raises(UnsupportedWordCountError):
        entropy_length_for_words(word_count)


def test_mnemonic_from_entropy(wordlist):
    zeros = b'\x00' * 64
    assert mnemonic_from_entropy(zeros, 12, wordlist) == ZERO_PHRASE_12
    assert mnemonic_from_entropy(zeros, 24, wordlist) == ZERO_PHRASE_24

    for word_count in (12, 18, 24):
        phrase = mnemonic_from_entropy(ENTROPY, word_count, wordlist)
        assert len(phrase.split(" ")) == word_count
        assert wordlist.validate(phrase)


def test_mnemonic_uses_leading_bytes(wordlist):
    changed_tail = ENTROPY[:16] + bytes(48)
    assert mnemonic_from_entropy(ENTROPY, 12, wordlist) == mnemonic_from_entropy(changed_tail, 12, wordlist)


def test_mnemonic_unsupported_word_count(wordlist):
    with pytest.raises(UnsupportedWordCountError):
        mnemonic_from_entropy(ENTROPY, 15, wordlist)


def test_mnemonic_unsupported_language(wordlist):
    with pytest.raises(UnsupportedLanguageError):
        mnemonic_from_entropy(ENTROPY, 12, wordlist, Language.JAPANESE)


def test_mnemonic_encoding_failure():
    with pytest.raises(MnemonicEncodingError) as exc_info:
        mnemonic_from_entropy(ENTROPY, 12, BrokenWordlist())
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_xprv_from_entropy():
    key = xprv_from_entropy(ENTROPY, Bip32Provider())

    assert key.chain_code == ENTROPY[:32], "Chain code must be the first half"
    assert key.private_key == ENTROPY[32:], "Private key must be the second half"
    assert key.depth == 0
    assert key.parent_fingerprint == b'\x00' * 4
    assert key.child_number == 0
    assert key.version == XKEYS.MAINNET_PRIVATE

    serial = decode_base58check(key.address())
    assert len(serial) == XKEYS.SERIAL_BYTES
    assert serial[:4].hex() == "0488ade4"
    assert serial[45] == 0
    assert key.address().startswith("xprv")


@pytest.mark.parametrize("key_half", [
    b'\x00' * 32,
    b'\xff' * 32,
])
def test_xprv_from_entropy_invalid_key(key_half):
    with pytest.raises(KeyDerivationError):
        xprv_from_entropy(ENTROPY[:32] + key_half, Bip32Provider())


def test_xprv_from_short_entropy():
    with pytest.raises(KeyDerivationError):
        xprv_from_entropy(ENTROPY[:63], Bip32Provider())


@pytest.mark.parametrize("num_bytes", [16, 17, 32, 63, 64])
def test_hex_from_entropy(num_bytes):
    hex_str = hex_from_entropy(ENTROPY, num_bytes)
    assert len(hex_str) == 2 * num_bytes
    assert hex_str == hex_str.lower()
    assert bytes.fromhex(hex_str) == ENTROPY[:num_bytes]


@pytest.mark.parametrize("num_bytes", [0, 15, 65, 128])
def test_hex_unsupported_length(num_bytes):
    with pytest.raises(UnsupportedLengthError):
        hex_from_entropy(ENTROPY, num_bytes)


def test_hex_bounds():
    assert BIP85.HEX_MIN_BYTES == 16
    assert BIP85.HEX_MAX_BYTES == 64


def test_wif_from_entropy():
    assert wif_from_entropy(WIF_ENTROPY) == WIF

    payload = decode_base58check(WIF)
    assert payload[0] == 0x80
    assert payload[1:33] == WIF_ENTROPY[:32]
    assert payload[33] == 0x01


def test_wif_invalid_key():
    with pytest.raises(KeyDerivationError):
        wif_from_entropy(b'\x00' * 64)
