"""
The two capability interfaces the Bip85 context is written against, and the BIP32 implementation backed by
ExtendedKey. The wordlist implementation lives in wordlist.py
"""
from abc import ABC, abstractmethod
from typing import Any

from bip85.core import XKEYS
from bip85.wallet.xkeys import ExtendedKey

__all__ = ["HDKeyProvider", "WordlistProvider", "Bip32Provider"]


class HDKeyProvider(ABC):
    """
    Root key construction, child stepping and the textual extended-key format.
    Keys are opaque to the caller; only the provider looks inside them.
    """
    hardened_offset: int = XKEYS.HARDENED_OFFSET

    @abstractmethod
    def master_key(self, seed: bytes) -> Any:
        raise NotImplementedError(f"{self.__class__.__name__} must implement master_key()")

    @abstractmethod
    def derive_child(self, key: Any, index: int) -> Any:
        """index is the final (already hardened) child number"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement derive_child()")

    @abstractmethod
    def deserialize(self, text: str) -> Any:
        raise NotImplementedError(f"{self.__class__.__name__} must implement deserialize()")

    @abstractmethod
    def serialize(self, key: Any) -> str:
        raise NotImplementedError(f"{self.__class__.__name__} must implement serialize()")

    @abstractmethod
    def is_private(self, key: Any) -> bool:
        raise NotImplementedError(f"{self.__class__.__name__} must implement is_private()")

    @abstractmethod
    def private_bytes(self, key: Any) -> bytes:
        """The private scalar as 32 big-endian bytes, without any tag byte"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement private_bytes()")

    @abstractmethod
    def new_private_key(self, chain_code: bytes, key_bytes: bytes) -> Any:
        """A standalone depth-0 private key: zero parent fingerprint, child number 0"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement new_private_key()")


class WordlistProvider(ABC):
    """
    BIP39 phrase validation, seed stretching and entropy encoding
    """

    @abstractmethod
    def validate(self, phrase: str, language) -> bool:
        raise NotImplementedError(f"{self.__class__.__name__} must implement validate()")

    @abstractmethod
    def to_seed(self, phrase: str, passphrase: str = "") -> bytes:
        raise NotImplementedError(f"{self.__class__.__name__} must implement to_seed()")

    @abstractmethod
    def encode_entropy(self, entropy: bytes, language) -> str:
        raise NotImplementedError(f"{self.__class__.__name__} must implement encode_entropy()")

    def supports(self, language) -> bool:
        return True


class Bip32Provider(HDKeyProvider):
    """
    HDKeyProvider over the in-house ExtendedKey
    """

    def __init__(self, version: bytes = XKEYS.MAINNET_PRIVATE):
        self.version = version

    def master_key(self, seed: bytes) -> ExtendedKey:
        return ExtendedKey.from_master_seed(seed, version=self.version)

    def derive_child(self, key: ExtendedKey, index: int) -> ExtendedKey:
        return key.derive_child(index)

    def deserialize(self, text: str) -> ExtendedKey:
        return ExtendedKey.from_address(text.strip())

    def serialize(self, key: ExtendedKey) -> str:
        return key.address()

    def is_private(self, key: ExtendedKey) -> bool:
        return key.is_private

    def private_bytes(self, key: ExtendedKey) -> bytes:
        return key.private_key

    def new_private_key(self, chain_code: bytes, key_bytes: bytes) -> ExtendedKey:
        return ExtendedKey(key_data=key_bytes, chain_code=chain_code, version=XKEYS.MAINNET_PRIVATE)
