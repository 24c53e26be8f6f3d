import zlib
from struct import pack

import pytest

from pngme import Chunk, ChunkType, Png, PNG_SIGNATURE


def make_chunk(chunk_type, data=b''):
    return Chunk(ChunkType.parse_str(chunk_type), data)


def _minimal_chunks():
    # 1x1 8-bit greyscale
    ihdr = make_chunk('IHDR', pack('>IIBBBBB', 1, 1, 8, 0, 0, 0, 0))
    idat = make_chunk('IDAT', zlib.compress(b'\x00\x00'))
    iend = make_chunk('IEND')
    return [ihdr, idat, iend]


@pytest.fixture
def minimal_png_bytes():
    return PNG_SIGNATURE + b''.join(c.to_bytes() for c in _minimal_chunks())


@pytest.fixture
def minimal_png():
    return Png(_minimal_chunks())


@pytest.fixture
def png_file(tmp_path, minimal_png_bytes):
    path = tmp_path / "image.png"
    path.write_bytes(minimal_png_bytes)
    return path
