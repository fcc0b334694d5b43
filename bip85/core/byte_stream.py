"""
Fixed-width field reads over serialized data. Each read names its field so a short buffer is reported precisely.
"""
from io import BytesIO

from .exceptions import ReadError

__all__ = ["get_stream", "read_stream", "read_big_int", "remaining"]


def get_stream(data: bytes | bytearray | BytesIO) -> BytesIO:
    if isinstance(data, BytesIO):
        return data
    if isinstance(data, (bytes, bytearray)):
        return BytesIO(bytes(data))
    raise TypeError(f"Expected bytes or BytesIO, received {type(data).__name__}")


def read_stream(stream: BytesIO, length: int, field: str) -> bytes:
    """
    Exactly `length` bytes for `field`, else ReadError
    """
    data = stream.read(length)
    if len(data) < length:
        raise ReadError(f"Truncated data reading {field}: needed {length} bytes, got {len(data)}")
    return data


def read_big_int(stream: BytesIO, length: int, field: str) -> int:
    return int.from_bytes(read_stream(stream, length, field), "big")


def remaining(stream: BytesIO) -> int:
    """Bytes left after the current position"""
    position = stream.tell()
    end = stream.seek(0, 2)
    stream.seek(position)
    return end - position
