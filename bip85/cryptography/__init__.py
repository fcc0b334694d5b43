"""
Elliptic curve cryptography and hash functions
"""
# cryptography/__init__.py
from bip85.cryptography.ecc import *
from bip85.cryptography.ecc_keys import *
from bip85.cryptography.hash_functions import *
