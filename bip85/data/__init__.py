"""
All methods for encoding and representing data in bip85
"""
# data/__init__.py
from bip85.data.base58 import *
