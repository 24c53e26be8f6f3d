import zlib
from typing import Union, get_args

Data = Union[bytes, bytearray, memoryview]


def as_data(data: Data) -> bytes:
    if not isinstance(data, get_args(Data)):
        types = " or ".join(t.__name__ for t in get_args(Data))
        raise TypeError("Expected {}, not {}".format(types, type(data)))
    if not isinstance(data, bytes):
        data = bytes(data)
    return data


def compute_crc(*parts: bytes) -> int:
    """CRC-32 (ISO-HDLC, the one zlib and PNG use) over the concatenation of parts."""
    crc = 0
    for part in parts:
        crc = zlib.crc32(part, crc)
    return crc
