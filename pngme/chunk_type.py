from .pngexceptions import InvalidTypeCodeException, InvalidTypeLengthException
from .utils import Data, as_data


_ChunkType = "ChunkType"


def _is_letter(byte: int) -> bool:
    return 0x41 <= byte <= 0x5a or 0x61 <= byte <= 0x7a


def _is_upper(byte: int) -> bool:
    return 0x41 <= byte <= 0x5a


class ChunkType:

    """
    The 4 bytes type code of a PNG chunk (E.g. IHDR).
    Each byte must be an ASCII letter, and the case of each letter is a flag:
        byte 0: uppercase if the chunk is critical, lowercase if ancillary
        byte 1: uppercase if the chunk is public, lowercase if private
        byte 2: reserved, must be uppercase
        byte 3: lowercase if the chunk is safe to copy
    See https://www.w3.org/TR/PNG/#5Chunk-naming-conventions
    """

    __slots__ = ('__bytes',)

    def __init__(self, type_bytes: Data) -> None:
        """
        :param type_bytes: the 4 bytes of the type code.
        :raises InvalidTypeLengthException: if type_bytes is not 4 bytes long.
        :raises InvalidTypeCodeException: if one of the bytes is not an ASCII letter.
        """
        type_bytes = as_data(type_bytes)
        if len(type_bytes) != 4:
            raise InvalidTypeLengthException(len(type_bytes))
        if not all(_is_letter(b) for b in type_bytes):
            raise InvalidTypeCodeException(type_bytes)
        self.__bytes = type_bytes

    @classmethod
    def parse(cls, type_bytes: Data) -> _ChunkType:
        return cls(type_bytes)

    @classmethod
    def parse_str(cls, value: str) -> _ChunkType:
        """
        :param value: a chunk type such as "tEXt".
            Its length is measured in UTF-8 bytes, not in characters.
        :raises TypeError: if value is not an str instance.
        :raises InvalidTypeLengthException: if value is not 4 bytes long.
        :raises InvalidTypeCodeException: if value contains anything but ASCII letters.
        """
        if not isinstance(value, str):
            raise TypeError("A chunk's type should be a string.")
        encoded = value.encode('utf-8')
        if len(encoded) != 4:
            raise InvalidTypeLengthException(len(encoded))
        return cls(encoded)

    @property
    def bytes(self) -> bytes:
        return self.__bytes

    def to_bytes(self) -> bytes:
        return self.__bytes

    def is_critical(self) -> bool:
        return _is_upper(self.__bytes[0])

    def is_ancillary(self) -> bool:
        return not self.is_critical()

    def is_public(self) -> bool:
        return _is_upper(self.__bytes[1])

    def is_private(self) -> bool:
        return not self.is_public()

    def is_reserved_bit_valid(self) -> bool:
        return _is_upper(self.__bytes[2])

    def is_safe_to_copy(self) -> bool:
        return not _is_upper(self.__bytes[3])

    def is_valid(self) -> bool:
        """
        :returns: whether this type follows the PNG naming conventions.
            A type can be parsed without being valid, when its reserved bit is set.
        """
        return all(_is_letter(b) for b in self.__bytes) and self.is_reserved_bit_valid()

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self.__bytes == other.__bytes

    def __hash__(self) -> int:
        return hash(self.__bytes)

    def __str__(self) -> str:
        return self.__bytes.decode('utf-8', errors='replace')

    def __repr__(self) -> str:
        return 'ChunkType({!r})'.format(self.__bytes)
