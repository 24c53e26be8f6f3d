from struct import pack, unpack

from .chunk_type import ChunkType
from .pngexceptions import (
    ChunkTooShortException,
    ChunkTooLongException,
    ChunkLengthMismatchException,
    CrcMismatchException,
    InvalidUtf8Exception,
)
from .utils import Data, as_data, compute_crc


_Chunk = "Chunk"

# length + type + crc
CHUNK_OVERHEAD = 12

MAX_CHUNK_LENGTH = 0xffffffff


class Chunk:

    """
    Represents a PNG chunk.
    The structure of a png chunk should be as follow:
            [   length (4 bytes, big-endian) |
                type (4 bytes, ascii)        |
                data (length bytes)          |
                crc (4 bytes)                ]

    The crc checksum is calculated with the chunk type and data, but does
    not include the length header.
    A chunk cannot be modified once created: its length and crc are always
    derived from its type and data.
    """

    def __init__(self, chunk_type: ChunkType, data: Data) -> None:
        """
        Creates a new chunk and computes its CRC.
        To read a chunk from raw bytes, use :meth:`Chunk.parse`.

        :param chunk_type: the type of the chunk.
        :param data: the chunk's payload.
        :raises TypeError: if one of the arguments is not of the right type.
        :raises ChunkTooLongException: if data does not fit in the length header.
        """
        if not isinstance(chunk_type, ChunkType):
            raise TypeError("chunk_type should be a ChunkType, not {}".format(type(chunk_type)))
        self.__type = chunk_type
        data = as_data(data)
        if len(data) > MAX_CHUNK_LENGTH:
            raise ChunkTooLongException(len(data), MAX_CHUNK_LENGTH)
        self.__data = data
        self.__crc = compute_crc(chunk_type.bytes, self.__data)

    @classmethod
    def parse(cls, chunkbytes: Data) -> _Chunk:
        """
        Reads a chunk from its raw bytes.
        The buffer must hold exactly one chunk, nothing more.

        :param chunkbytes: the raw bytes of the chunk.
        :raises ChunkTooShortException: if there are fewer than 12 bytes.
        :raises ChunkLengthMismatchException: if the length header does not match the buffer size.
        :raises InvalidTypeCodeException: if the chunk type is not made of ASCII letters.
        :raises CrcMismatchException: if the stored CRC does not match the chunk's content.
        """
        chunkbytes = as_data(chunkbytes)
        if len(chunkbytes) < CHUNK_OVERHEAD:
            raise ChunkTooShortException(len(chunkbytes))
        length = unpack('>I', chunkbytes[0:4])[0]
        expected_total = CHUNK_OVERHEAD + length
        if len(chunkbytes) != expected_total:
            raise ChunkLengthMismatchException(expected_total, len(chunkbytes))
        chunk_type = ChunkType.parse(chunkbytes[4:8])
        data = chunkbytes[8:8 + length]
        crc = unpack('>I', chunkbytes[-4:])[0]
        chunk = cls(chunk_type, data)
        if chunk.crc != crc:
            raise CrcMismatchException(chunk.crc, crc)
        return chunk

    @property
    def length(self) -> int:
        """
        :returns: the length of this chunk's payload.
        """
        return len(self.__data)

    def __len__(self) -> int:
        return self.length

    def total_size(self) -> int:
        """
        :returns: the number of bytes this chunk takes in a file.
        """
        return CHUNK_OVERHEAD + self.length

    @property
    def chunk_type(self) -> ChunkType:
        return self.__type

    @property
    def type(self) -> str:
        """
        :returns: the type of this chunk as a string (E.g. IHDR)
        """
        return str(self.__type)

    @property
    def data(self) -> bytes:
        """
        :returns: this chunk's payload.
        """
        return self.__data

    @property
    def crc(self) -> int:
        return self.__crc

    def compute_crc(self) -> int:
        """
        :returns: the correct CRC checksum for this chunk's type and data.
        """
        return compute_crc(self.__type.bytes, self.__data)

    def check_crc(self) -> bool:
        """
        :returns: True if the CRC checksum of this chunk is correct.
        """
        return self.compute_crc() == self.__crc

    def data_as_string(self) -> str:
        """
        :returns: the payload decoded as UTF-8 text.
        :raises InvalidUtf8Exception: if the payload is not valid UTF-8.
        """
        try:
            return self.__data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidUtf8Exception(str(e)) from e

    def to_bytes(self) -> bytes:
        """
        :returns: this chunk's raw content, as it would appear in a file.
        """
        return pack('>I', self.length) + self.__type.bytes + self.__data + pack('>I', self.__crc)

    @property
    def bytes(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return (self.__type == other.__type
                and self.__data == other.__data
                and self.__crc == other.__crc)

    def __hash__(self) -> int:
        return hash((self.__type, self.__data, self.__crc))

    def __str__(self) -> str:
        return 'Length: {}\nChunk Type: {}\nData: {}\nCRC: {}'.format(
            self.length,
            self.__type,
            list(self.__data),
            self.__crc,
        )

    def __repr__(self) -> str:
        norm = super(Chunk, self).__repr__()
        norm = norm.rsplit(' ')
        norm.insert(1, '[' + self.type + ']')
        return ' '.join(norm)
