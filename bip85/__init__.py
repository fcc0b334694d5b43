"""
BIP85: deterministic entropy from BIP32 keychains.

One root key, many reproducible child secrets (BIP39 phrases, xprvs, hex, WIF), each addressed by an
application number and index.
"""
# bip85/__init__.py
from bip85.core.exceptions import *
from bip85.wallet import Application, Bip32Provider, Bip39Wordlist, Bip85, DerivationPath, EntropyLayout, \
    ExtendedKey, HDKeyProvider, Language, WordlistProvider, count_words

__version__ = "0.1.0"
