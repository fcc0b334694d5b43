"""
BIP39 wordlists, backed by the reference `mnemonic` package. Language codes are the BIP85 ones.
"""
from enum import Enum
from typing import Iterable

from mnemonic import Mnemonic

from bip85.core.logging import get_logger
from bip85.wallet.providers import WordlistProvider

__all__ = ["Language", "Bip39Wordlist", "normalize_phrase"]

logger = get_logger(__name__)


class Language(Enum):
    ENGLISH = (0, "english")
    JAPANESE = (1, "japanese")
    KOREAN = (2, "korean")
    SPANISH = (3, "spanish")
    CHINESE_SIMPLIFIED = (4, "chinese_simplified")
    CHINESE_TRADITIONAL = (5, "chinese_traditional")
    FRENCH = (6, "french")
    ITALIAN = (7, "italian")
    CZECH = (8, "czech")
    PORTUGUESE = (9, "portuguese")

    def __init__(self, code: int, wordlist_name: str):
        self.code = code
        self.wordlist_name = wordlist_name

    @classmethod
    def from_code(cls, code: int) -> "Language":
        for language in cls:
            if language.code == code:
                return language
        raise ValueError(f"Unknown BIP85 language code: {code}")


def normalize_phrase(phrase: str) -> str:
    """
    Collapse any run of whitespace to a single space and strip the ends
    """
    return " ".join(phrase.split())


class Bip39Wordlist(WordlistProvider):
    """
    WordlistProvider over mnemonic.Mnemonic. Only the languages in `languages` are accepted, English by default.
    """
    __slots__ = ("languages", "_codecs")

    def __init__(self, languages: Iterable[Language] = (Language.ENGLISH,)):
        self.languages = tuple(languages)
        self._codecs = {}

    def _codec(self, language: Language) -> Mnemonic:
        # Mnemonic() reads its wordlist from disk, keep one per language
        if language not in self._codecs:
            logger.debug(f"Loading {language.wordlist_name} wordlist")
            self._codecs[language] = Mnemonic(language.wordlist_name)
        return self._codecs[language]

    def supports(self, language: Language) -> bool:
        return language in self.languages

    def validate(self, phrase: str, language: Language = Language.ENGLISH) -> bool:
        """
        True if every word is in the wordlist of the given language and the checksum matches
        """
        if not self.supports(language):
            return False
        return self._codec(language).check(normalize_phrase(phrase))

    def to_seed(self, phrase: str, passphrase: str = "") -> bytes:
        """
        PBKDF2-HMAC-SHA512, 2048 rounds, salt "mnemonic" + passphrase (both NFKD normalized by the package).
        Whitespace runs in the phrase are collapsed to single spaces first. Plain BIP39 hashes the phrase exactly as
        given, so a phrase stored with irregular spacing seeds a different wallet elsewhere than it does here; only
        single-spaced phrases give the same seed in every BIP39 implementation.
        """
        return Mnemonic.to_seed(normalize_phrase(phrase), passphrase)

    def encode_entropy(self, entropy: bytes, language: Language = Language.ENGLISH) -> str:
        """
        Entropy of 16, 20, 24, 28 or 32 bytes to its checksummed phrase. Raises ValueError otherwise
        """
        return self._codec(language).to_mnemonic(entropy)
