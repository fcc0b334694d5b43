"""
Walking a DerivationPath from the root key and turning the leaf key into 64 bytes of entropy:

    entropy = HMAC-SHA512(key=b"bip-entropy-from-k", msg=private key material of the leaf)

Which private bytes make up the message is selected by EntropyLayout. SCALAR is the full 32-byte scalar and
reproduces the vectors published with BIP85. SCALAR_TAIL drops the first byte of the scalar and reproduces the
reference vectors for the "all all ... all" test root; it is the default of a Bip85 context.
"""
from enum import Enum
from typing import Any

from bip85.core import BIP85, ECC, ExtendedKeyError, KeyDerivationError, NotPrivateKeyError
from bip85.core.logging import get_logger
from bip85.cryptography import hmac_sha512
from bip85.wallet.derivation import DerivationPath
from bip85.wallet.providers import HDKeyProvider

__all__ = ["EntropyLayout", "walk_path", "extract_entropy"]

logger = get_logger(__name__)


class EntropyLayout(Enum):
    SCALAR = "scalar"
    SCALAR_TAIL = "scalar_tail"

    def key_material(self, scalar: bytes) -> bytes:
        """
        Select the HMAC message from the 32-byte private scalar
        """
        if len(scalar) != ECC.PRIVKEY_BYTES:
            raise NotPrivateKeyError(f"Private scalar must be {ECC.PRIVKEY_BYTES} bytes, got {len(scalar)}")
        if self is EntropyLayout.SCALAR_TAIL:
            return scalar[1:]
        return scalar


def walk_path(provider: HDKeyProvider, root: Any, path: DerivationPath) -> Any:
    """
    Apply one hardened child step per path element, in order. The result must hold private material.
    """
    key = root
    for step, index in enumerate(path.hardened(provider.hardened_offset)):
        try:
            key = provider.derive_child(key, index)
        except ExtendedKeyError as e:
            logger.warning(f"Child derivation failed at step {step} of {path}")
            raise KeyDerivationError(f"Failed to derive child key at step {step} of {path}: {e}") from e

    if not provider.is_private(key):
        raise NotPrivateKeyError(f"Derived key at {path} is not a private key")

    logger.debug(f"Walked {path}")
    return key


def extract_entropy(provider: HDKeyProvider, key: Any, layout: EntropyLayout = EntropyLayout.SCALAR_TAIL) -> bytes:
    """
    HMAC-SHA512 over the leaf key's private material. Always 64 bytes
    """
    if not provider.is_private(key):
        raise NotPrivateKeyError("Entropy can only be extracted from a private key")

    return hmac_sha512(key=BIP85.HMAC_KEY, message=layout.key_material(provider.private_bytes(key)))
