"""
The custom exceptions used throughout bip85
"""
__all__ = ["ReadError", "StreamError", "ECCError", "PubKeyError", "ExtendedKeyError", "Base58Error", "Bip85Error",
           "InvalidMnemonicError", "KeyDerivationError", "DeserializationError", "NilKeyError", "NotPrivateKeyError",
           "UnsupportedWordCountError", "UnsupportedLanguageError", "UnsupportedLengthError",
           "MnemonicEncodingError"]


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class ECCError(Exception):
    """
    For scalars or points outside the secp256k1 group
    """
    pass


class PubKeyError(Exception):
    """
    Used for Pubkey errors
    """
    pass


class ExtendedKeyError(Exception):
    """Custom exception for extended key operations"""
    pass


class Base58Error(Exception):
    """
    Raised for characters outside the alphabet and failed checksums
    """
    pass


# --- BIP85 --- #

class Bip85Error(Exception):
    """
    Parent class for every error raised by a Bip85 context
    """
    pass


class InvalidMnemonicError(Bip85Error):
    """
    The phrase fails wordlist or checksum validation, or is not in the configured language
    """
    pass


class KeyDerivationError(Bip85Error):
    """
    The HD key provider could not build a root key or a child key
    """
    pass


class DeserializationError(Bip85Error):
    """
    Malformed serialized extended key
    """
    pass


class NilKeyError(Bip85Error):
    """
    No key object was supplied
    """
    pass


class NotPrivateKeyError(Bip85Error):
    """
    A walked key came back without private material
    """
    pass


class UnsupportedWordCountError(Bip85Error):
    pass


class UnsupportedLanguageError(Bip85Error):
    pass


class UnsupportedLengthError(Bip85Error):
    """
    HEX application byte length outside 16..64
    """
    pass


class MnemonicEncodingError(Bip85Error):
    """
    The wordlist provider failed to encode entropy
    """
    pass
