from struct import unpack_from
from typing import Iterable, Iterator, Optional

from .chunk import Chunk, CHUNK_OVERHEAD
from .pngexceptions import (
    InvalidSignatureException,
    ChunkIndexOutOfBoundsException,
    ChunkNotFoundException,
    PngIOException,
)
from .utils import Data, as_data


"""
This module contains the PNG container: the signature followed by a stream of chunks.
"""

_Png = "Png"

PNG_SIGNATURE = bytes((137, 80, 78, 71, 13, 10, 26, 10))


class Png:

    """
    Represents a PNG file according to the PNG specification: https://www.w3.org/TR/PNG/.
    A PNG file starts with the PNG signature.
    It then contains a stream of PNG chunks, each starting with a four bytes length,
    followed by a four bytes ascii type and then by a payload of the specified length, followed by a CRC checksum.

    A PNG file should start with an IHDR chunk and end with an IEND chunk,
    but this class does not enforce any ordering: chunks stay in whatever order they are added.
    """

    def __init__(self, chunks: Iterable[Chunk] = ()) -> None:
        """
        Constructs a :class:`Png` object from a list of chunks.
        To read a PNG file from disc or http, prefer the :func:`pngme.open` function.

        :param chunks: the chunks that make up the PNG, in order.
        :raises TypeError: if one of the chunks is not a :class:`Chunk`.
        """
        chunks = list(chunks)
        for chunk in chunks:
            _check_chunk(chunk)
        self.__chunks = chunks

    @classmethod
    def from_bytes(cls, filebytes: Data) -> _Png:
        """
        Parses a whole PNG file.

        :param filebytes: the bytes that make up the PNG.
        :raises InvalidSignatureException: if the PNG signature is missing.
        :raises InvalidChunkStructureException: if one of the chunks is malformed.
            Nothing is returned in that case, even if other chunks were fine.
        :raises InvalidTypeCodeException: if one of the chunk types is not made of ASCII letters.
        """
        filebytes = as_data(filebytes)
        if not read_png_signature(filebytes):
            raise InvalidSignatureException(filebytes[:len(PNG_SIGNATURE)])
        chunks = []
        start = len(PNG_SIGNATURE)
        while start < len(filebytes):
            if len(filebytes) - start >= 4:
                end = start + CHUNK_OVERHEAD + unpack_from('>I', filebytes, start)[0]
            else:
                end = len(filebytes)
            chunk = Chunk.parse(filebytes[start:end])
            chunks.append(chunk)
            start += chunk.total_size()
        return cls(chunks)

    @classmethod
    def from_file(cls, file_name) -> _Png:
        """
        Reads a PNG file from disc.

        :param file_name: path of the file to read.
        :raises PngIOException: if the file cannot be read.
        """
        try:
            with open(file_name, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise PngIOException(file_name, e.strerror or str(e)) from e
        return cls.from_bytes(data)

    def to_bytes(self) -> bytes:
        """
        :returns: the raw bytes that make up the PNG file.
        """
        b = bytearray(PNG_SIGNATURE)
        for chunk in self.__chunks:
            b += chunk.to_bytes()
        return bytes(b)

    @property
    def bytes(self) -> bytes:
        return self.to_bytes()

    def save(self, file_name) -> None:
        """
        Save this PNG to a file on disc.

        :param file_name: name to save the file as. Will be overwritten if is already exists.
        :raises PngIOException: if the file cannot be written.
        """
        data = self.to_bytes()
        try:
            with open(file_name, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise PngIOException(file_name, e.strerror or str(e)) from e

    @property
    def chunks(self) -> tuple:
        """
        :returns: the PNG chunks that make up this image, in order.
        """
        return tuple(self.__chunks)

    def __len__(self) -> int:
        return len(self.__chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        """
        Adds the chunk at the end of the file, after any IEND chunk.

        :param chunk: the chunk to add to the image.
        """
        _check_chunk(chunk)
        self.__chunks.append(chunk)

    def insert_chunk(self, index: int, chunk: Chunk) -> None:
        """
        Adds the chunk to the file, at the given index.
        Chunks at that index and after are shifted by one.

        :param index: the index to add the chunk at, between 0 and the number of chunks (included).
        :param chunk: the chunk to add to the image.
        :raises ChunkIndexOutOfBoundsException: if the index is out of that range.
        """
        _check_chunk(chunk)
        if not isinstance(index, int):
            raise TypeError("index should be an integer, not {}".format(type(index)))
        if not 0 <= index <= len(self.__chunks):
            raise ChunkIndexOutOfBoundsException(index, len(self.__chunks))
        self.__chunks.insert(index, chunk)

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        """
        :param chunk_type: the chunk type to look for (e.g. IHDR). Case matters.
        :returns: the first chunk of the given type, or None.
        """
        for chunk in self.__chunks:
            if chunk.type == chunk_type:
                return chunk
        return None

    def chunks_by_type(self, chunk_type: str) -> tuple:
        """
        :param chunk_type: the chunk type to look for (e.g. IDAT).
        :returns: all the chunks of the given type in this image.
        """
        return tuple(filter(lambda c: c.type == chunk_type, self.__chunks))

    def remove_first_chunk(self, chunk_type: str) -> Chunk:
        """
        Removes the first chunk of the given type from the image.
        Other chunks of the same type are left in place.

        :param chunk_type: the chunk type to remove (e.g. tEXt).
        :returns: the removed chunk.
        :raises ChunkNotFoundException: if this image does not contain a chunk of that type.
        """
        for i, chunk in enumerate(self.__chunks):
            if chunk.type == chunk_type:
                return self.__chunks.pop(i)
        raise ChunkNotFoundException(chunk_type)

    def index_of_chunk(self, chunk: Chunk) -> int:
        """
        :param chunk: a chunk to get the index of.
        :returns: the index of the given chunk in the image.
        :raises ValueError: if this image does not contain the given chunk.
        """
        return self.__chunks.index(chunk)

    def __str__(self) -> str:
        return '\n'.join(str(chunk) for chunk in self.__chunks)


def read_png_signature(data: bytes) -> bool:
    return data[0:len(PNG_SIGNATURE)] == PNG_SIGNATURE


def _check_chunk(chunk):
    if not isinstance(chunk, Chunk):
        raise TypeError("Expected a Chunk, not {}".format(type(chunk)))
