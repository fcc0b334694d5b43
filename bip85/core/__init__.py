"""
Contains the core elements that are used within bip85

Core:
    -Provides the reference formats and constants for BIP32/BIP39/BIP85
    -Provides custom exceptions for the providers and the Bip85 context
    -Provides stream readers and the logger factory
"""
# core/__init__.py
from bip85.core.byte_stream import *
from bip85.core.exceptions import *
from bip85.core.formats import *
from bip85.core.logging import *
