"""
Fixtures used in the tests
"""
from secrets import token_bytes

import pytest

from bip85 import Bip39Wordlist, Bip85, EntropyLayout, ExtendedKey
from bip85.cryptography import EllipticCurve, Point
from tests.vectors import ALL_MNEMONIC, BIP85_MASTER_XPRV


@pytest.fixture(scope="session")
def wordlist():
    return Bip39Wordlist()


@pytest.fixture(scope="session")
def all_context():
    return Bip85.from_mnemonic(ALL_MNEMONIC, "")


@pytest.fixture(scope="session")
def bip85_context():
    return Bip85.from_xprv(BIP85_MASTER_XPRV, layout=EntropyLayout.SCALAR)


@pytest.fixture()
def random_xprv():
    return ExtendedKey.from_master_seed(token_bytes(64))


@pytest.fixture()
def curve():
    """
    y^2 = x^3 + 7 (mod 11). Eleven affine points plus the point at infinity, so the group has order 12
    """
    return EllipticCurve(a=0, b=7, p=11, order=12, generator=Point(2, 2))
