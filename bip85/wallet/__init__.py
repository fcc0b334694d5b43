"""
Key providers, derivation paths, entropy extraction and the Bip85 context
"""
# wallet/__init__.py
from bip85.wallet.xkeys import *
from bip85.wallet.providers import *
from bip85.wallet.wordlist import *
from bip85.wallet.derivation import *
from bip85.wallet.entropy import *
from bip85.wallet.codecs import *
from bip85.wallet.words import *
from bip85.wallet.bip85 import *
