"""
The Bip85 class - owns one BIP32 root key and derives child secrets from it (BIP85, deterministic entropy from
keychain). Derivation never touches the root, so a context can be shared between threads.
"""
import json
from typing import Any

from bip85.core import BIP85, XKEYS, Base58Error, DeserializationError, ExtendedKeyError, InvalidMnemonicError, \
    KeyDerivationError, NilKeyError, StreamError, UnsupportedLanguageError, UnsupportedLengthError, \
    UnsupportedWordCountError
from bip85.core.logging import get_logger
from bip85.wallet.codecs import hex_from_entropy, mnemonic_from_entropy, wif_from_entropy, xprv_from_entropy
from bip85.wallet.derivation import DerivationPath
from bip85.wallet.entropy import EntropyLayout, extract_entropy, walk_path
from bip85.wallet.providers import Bip32Provider, HDKeyProvider, WordlistProvider
from bip85.wallet.wordlist import Bip39Wordlist, Language
from bip85.wallet.words import count_words

__all__ = ["Bip85"]

logger = get_logger(__name__)

DEFAULT_LAYOUT = EntropyLayout.SCALAR_TAIL


class Bip85:
    """
    BIP85 context. Create it with from_mnemonic, from_seed, from_xprv or from_key (or the constructor).
    """
    __slots__ = ("_master_key", "_provider", "_wordlist", "_layout")

    def __init__(self,
                 master_key: Any,
                 provider: HDKeyProvider | None = None,
                 wordlist: WordlistProvider | None = None,
                 layout: EntropyLayout = DEFAULT_LAYOUT
                 ):
        """
        Args:
            master_key: Root key as understood by the provider (an ExtendedKey for the default provider)
            provider: HD key provider (default: Bip32Provider)
            wordlist: Wordlist provider used to encode mnemonics (default: English Bip39Wordlist)
            layout: Which private key bytes feed the entropy HMAC
        """
        if master_key is None:
            raise NilKeyError("bip32 key is nil")

        self._master_key = master_key
        self._provider = provider or Bip32Provider()
        self._wordlist = wordlist or Bip39Wordlist()
        self._layout = layout

    def __repr__(self) -> str:
        return f"Bip85(layout={self.layout.value}, provider={self.provider.__class__.__name__})"

    # --- CONSTRUCTORS --- #
    @classmethod
    def from_key(cls, key: Any, **kwargs) -> "Bip85":
        """
        Wrap an existing root key
        """
        return cls(key, **kwargs)

    @classmethod
    def from_seed(cls, seed: bytes, provider: HDKeyProvider | None = None, **kwargs) -> "Bip85":
        """
        Build the BIP32 root from raw seed bytes
        """
        provider = provider or Bip32Provider()
        try:
            master_key = provider.master_key(seed)
        except ExtendedKeyError as e:
            logger.warning("Master key derivation failed")
            raise KeyDerivationError(f"Failed to derive master key from seed: {e}") from e
        return cls(master_key, provider=provider, **kwargs)

    @classmethod
    def from_mnemonic(cls,
                      phrase: str,
                      passphrase: str = "",
                      language: Language = Language.ENGLISH,
                      wordlist: WordlistProvider | None = None,
                      **kwargs) -> "Bip85":
        """
        Validate the BIP39 phrase against the wordlist of `language`, stretch it to a seed and build the root
        """
        wordlist = wordlist or Bip39Wordlist()
        if not wordlist.validate(phrase, language):
            logger.warning(f"Rejected {count_words(phrase)}-word phrase")
            raise InvalidMnemonicError(f"mnemonic is not valid or not in {language.wordlist_name.capitalize()}")

        seed = wordlist.to_seed(phrase, passphrase)
        logger.info(f"Creating Bip85 context from {count_words(phrase)}-word mnemonic")
        return cls.from_seed(seed, wordlist=wordlist, **kwargs)

    @classmethod
    def from_xprv(cls, xprv: str, provider: HDKeyProvider | None = None, **kwargs) -> "Bip85":
        """
        Import a serialized extended key (xprv...)
        """
        if not isinstance(xprv, str):
            raise DeserializationError(f"Expected an extended key string, received {type(xprv).__name__}")

        provider = provider or Bip32Provider()
        try:
            master_key = provider.deserialize(xprv)
        except (Base58Error, ExtendedKeyError, StreamError) as e:
            logger.warning("Extended key deserialization failed")
            raise DeserializationError(f"Failed to deserialize extended key: {e}") from e
        return cls(master_key, provider=provider, **kwargs)

    # --- PROPERTIES --- #
    @property
    def master_key(self) -> Any:
        return self._master_key

    @property
    def provider(self) -> HDKeyProvider:
        return self._provider

    @property
    def wordlist(self) -> WordlistProvider:
        return self._wordlist

    @property
    def layout(self) -> EntropyLayout:
        return self._layout

    # --- DERIVATION --- #
    def derive_entropy(self, path: DerivationPath) -> bytes:
        """
        Walk `path` from the root and return the 64-byte HMAC-SHA512 entropy of the leaf
        """
        logger.debug(f"Deriving entropy at {path}")
        leaf = walk_path(self.provider, self._master_key, path)
        return extract_entropy(self.provider, leaf, self.layout)

    def derive_mnemonic(self, word_count: int, index: int = 0, language: Language | int = Language.ENGLISH) -> str:
        """
        BIP39 application: m/83696968'/39'/{language}'/{word_count}'/{index}'
        word_count must be 12, 18 or 24; only the wordlist provider's languages are accepted
        """
        language = self._language(language)
        if not self.wordlist.supports(language):
            logger.warning(f"Rejected mnemonic derivation in {language.name}")
            raise UnsupportedLanguageError(f"language is not supported: {language.name} (code {language.code})")
        if not self._is_path_element(word_count):
            raise UnsupportedWordCountError(
                f"Unsupported word count: {word_count!r}. Must be one of {sorted(BIP85.WORD_COUNTS)}")

        path = DerivationPath.for_mnemonic(language.code, word_count, index)
        return mnemonic_from_entropy(self.derive_entropy(path), word_count, self.wordlist, language)

    def derive_xprv(self, index: int = 0) -> Any:
        """
        XPRV application: m/83696968'/32'/{index}'. Returns a new depth-0 root key
        """
        path = DerivationPath.for_xprv(index)
        return xprv_from_entropy(self.derive_entropy(path), self.provider)

    def derive_hex(self, num_bytes: int, index: int = 0) -> str:
        """
        HEX application: m/83696968'/128169'/{num_bytes}'/{index}', num_bytes in 16..64
        """
        if not self._is_path_element(num_bytes):
            raise UnsupportedLengthError(
                f"HEX length {num_bytes!r} must be between {BIP85.HEX_MIN_BYTES} and {BIP85.HEX_MAX_BYTES} bytes")
        path = DerivationPath.for_hex(num_bytes, index)
        return hex_from_entropy(self.derive_entropy(path), num_bytes)

    def derive_wif(self, index: int = 0) -> str:
        """
        WIF application: m/83696968'/2'/{index}'
        """
        path = DerivationPath.for_wif(index)
        return wif_from_entropy(self.derive_entropy(path))

    # --- HELPERS --- #
    @staticmethod
    def _is_path_element(value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < XKEYS.HARDENED_OFFSET

    @staticmethod
    def _language(language: Language | int) -> Language:
        if isinstance(language, Language):
            return language
        if isinstance(language, bool) or not isinstance(language, int):
            raise UnsupportedLanguageError(f"Language must be a Language or its integer code, got {language!r}")
        try:
            return Language.from_code(language)
        except ValueError as e:
            raise UnsupportedLanguageError(str(e)) from e

    # --- DISPLAY --- #
    def to_dict(self) -> dict:
        return {
            "master_xprv": self.provider.serialize(self._master_key),
            "layout": self.layout.value,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


# --- TESTING --- #
if __name__ == "__main__":
    context = Bip85.from_mnemonic("all all all all all all all all all all all all")
    for words in (12, 18, 24):
        print(f"{words} WORDS: {context.derive_mnemonic(words, 0)}")
    print(f"XPRV: {context.provider.serialize(context.derive_xprv(0))}")
