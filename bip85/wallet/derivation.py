"""
The DerivationPath for BIP85 applications: m/83696968'/{application}'/{params...}'/{index}'
Every element is hardened when handed to the key provider.
"""
from dataclasses import dataclass
from enum import IntEnum

from bip85.core import BIP85, XKEYS, KeyDerivationError

__all__ = ["Application", "DerivationPath"]


class Application(IntEnum):
    """
    BIP85 application numbers
    """
    WIF = BIP85.APP_WIF
    XPRV = BIP85.APP_XPRV
    BIP39 = BIP85.APP_BIP39
    HEX = BIP85.APP_HEX


@dataclass(frozen=True)
class DerivationPath:
    """
    The unhardened path elements, purpose first. Built fresh for every derivation.
    """
    indices: tuple[int, ...]

    def __post_init__(self):
        for position, index in enumerate(self.indices):
            # bool is an int subclass, floats would truncate
            if isinstance(index, bool) or not isinstance(index, int):
                raise KeyDerivationError(f"Path element {position} must be an integer, got {type(index).__name__}")
            if not 0 <= index < XKEYS.HARDENED_OFFSET:
                raise KeyDerivationError(
                    f"Path element {position} is {index}; must be in [0, {XKEYS.HARDENED_OFFSET - 1}]")

    def __str__(self) -> str:
        return "m/" + "/".join(f"{index}'" for index in self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    @property
    def application(self) -> int | None:
        return self.indices[1] if len(self.indices) > 1 else None

    def hardened(self, offset: int = XKEYS.HARDENED_OFFSET) -> tuple[int, ...]:
        return tuple(index + offset for index in self.indices)

    # --- BUILDERS --- #
    @classmethod
    def for_application(cls, application: int, *params: int) -> "DerivationPath":
        """
        [PURPOSE, application, *params]. The last param is the caller's index
        """
        return cls((BIP85.PURPOSE, int(application), *params))

    @classmethod
    def for_mnemonic(cls, language_code: int, word_count: int, index: int) -> "DerivationPath":
        """
        m/83696968'/39'/{language}'/{words}'/{index}'. The word count is not checked here
        """
        return cls.for_application(Application.BIP39, language_code, word_count, index)

    @classmethod
    def for_xprv(cls, index: int) -> "DerivationPath":
        return cls.for_application(Application.XPRV, index)

    @classmethod
    def for_hex(cls, num_bytes: int, index: int) -> "DerivationPath":
        return cls.for_application(Application.HEX, num_bytes, index)

    @classmethod
    def for_wif(cls, index: int) -> "DerivationPath":
        return cls.for_application(Application.WIF, index)
