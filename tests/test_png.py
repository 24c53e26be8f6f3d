import time

import pytest

from pngme import Chunk, ChunkType, Png, PNG_SIGNATURE
from pngme.pngexceptions import (
    ChunkIndexOutOfBoundsException,
    ChunkNotFoundException,
    ChunkLengthMismatchException,
    ChunkTooShortException,
    CrcMismatchException,
    InvalidSignatureException,
    PngIOException,
)

from pngme import create_chunk


def test_from_bytes(minimal_png_bytes):
    png = Png.from_bytes(minimal_png_bytes)
    assert [c.type for c in png.chunks] == ['IHDR', 'IDAT', 'IEND']
    assert len(png) == 3


def test_round_trip(minimal_png_bytes):
    assert Png.from_bytes(minimal_png_bytes).to_bytes() == minimal_png_bytes
    assert Png.from_bytes(minimal_png_bytes).bytes == minimal_png_bytes


def test_signature_only():
    png = Png.from_bytes(PNG_SIGNATURE)
    assert png.chunks == ()
    assert png.to_bytes() == PNG_SIGNATURE


@pytest.mark.parametrize("prefix", [
    b'',
    b'\x89PNG',
    b'\x89PNG\r\n\x1a\x0b',
    b'GIF89a\x00\x00',
])
def test_invalid_signature(minimal_png_bytes, prefix):
    with pytest.raises(InvalidSignatureException):
        Png.from_bytes(prefix + minimal_png_bytes[8:])


def test_bad_chunk_aborts_parse(minimal_png_bytes):
    corrupted = bytearray(minimal_png_bytes)
    corrupted[-5] ^= 0x01  # last byte of IEND type, 'D' -> 'E'
    with pytest.raises(CrcMismatchException):
        Png.from_bytes(bytes(corrupted))


def test_truncated_file(minimal_png_bytes):
    with pytest.raises(ChunkLengthMismatchException):
        Png.from_bytes(minimal_png_bytes + b'\x00\x00\x00\x10ruStabcdefgh')
    with pytest.raises(ChunkTooShortException):
        Png.from_bytes(minimal_png_bytes + b'\x00\x00')


def test_append_and_reparse(minimal_png):
    minimal_png.append_chunk(create_chunk('ruSt', b'hello'))
    png = Png.from_bytes(minimal_png.to_bytes())
    assert png.chunks[-1].type == 'ruSt'
    chunk = png.chunk_by_type('ruSt')
    assert chunk.length == 5
    assert chunk.data_as_string() == 'hello'


def test_insert_and_reparse(minimal_png):
    chunk = create_chunk('ruSt', b'hello')
    minimal_png.insert_chunk(1, chunk)
    png = Png.from_bytes(minimal_png.to_bytes())
    assert [c.type for c in png.chunks] == ['IHDR', 'ruSt', 'IDAT', 'IEND']
    assert png.chunk_by_type('ruSt') == chunk
    assert png.chunk_by_type('ruSt').data_as_string() == 'hello'


def test_insert_bounds(minimal_png):
    chunk = create_chunk('ruSt', b'hello')
    before = minimal_png.chunks
    with pytest.raises(ChunkIndexOutOfBoundsException) as info:
        minimal_png.insert_chunk(len(minimal_png) + 1, chunk)
    assert info.value.index == 4
    assert info.value.length == 3
    with pytest.raises(ChunkIndexOutOfBoundsException):
        minimal_png.insert_chunk(-1, chunk)
    assert minimal_png.chunks == before

    minimal_png.insert_chunk(len(minimal_png), chunk)
    assert minimal_png.chunks[-1] is chunk


def test_chunk_by_type(minimal_png):
    assert minimal_png.chunk_by_type('IHDR') is minimal_png.chunks[0]
    assert minimal_png.chunk_by_type('ihdr') is None
    assert minimal_png.chunk_by_type('ruSt') is None


def test_chunk_by_type_returns_first(minimal_png):
    first = create_chunk('ruSt', b'first')
    second = create_chunk('ruSt', b'second')
    minimal_png.append_chunk(first)
    minimal_png.insert_chunk(0, second)
    assert minimal_png.chunk_by_type('ruSt') is second
    assert minimal_png.chunks_by_type('ruSt') == (second, first)


def test_remove_first_chunk():
    chunks = [
        create_chunk('IHDR', b'\x00' * 13),
        create_chunk('teXt', b'one'),
        create_chunk('IDAT', b'data'),
        create_chunk('teXt', b'two'),
        create_chunk('IEND'),
    ]
    png = Png(chunks)
    removed = png.remove_first_chunk('teXt')
    assert removed is chunks[1]
    assert png.chunks == (chunks[0], chunks[2], chunks[3], chunks[4])

    png.remove_first_chunk('teXt')
    assert [c.type for c in png.chunks] == ['IHDR', 'IDAT', 'IEND']


def test_remove_missing_chunk(minimal_png):
    before = minimal_png.chunks
    with pytest.raises(ChunkNotFoundException) as info:
        minimal_png.remove_first_chunk('teXt')
    assert info.value.chunk_type == 'teXt'
    assert minimal_png.chunks == before


def test_chunks_view_is_read_only(minimal_png):
    chunks = minimal_png.chunks
    assert isinstance(chunks, tuple)
    assert list(minimal_png) == list(chunks)
    assert minimal_png.index_of_chunk(chunks[1]) == 1


def test_constructor_rejects_non_chunks():
    with pytest.raises(TypeError):
        Png([b'not a chunk'])
    with pytest.raises(TypeError):
        Png().append_chunk(b'not a chunk')


def test_from_file_and_save(png_file, tmp_path, minimal_png_bytes):
    png = Png.from_file(png_file)
    png.append_chunk(Chunk(ChunkType.parse_str('ruSt'), b'hello'))
    output = tmp_path / "out.png"
    png.save(output)
    saved = Png.from_file(str(output))
    assert saved.chunk_by_type('ruSt').data_as_string() == 'hello'
    assert output.read_bytes().startswith(minimal_png_bytes)


def test_io_errors(tmp_path, minimal_png):
    with pytest.raises(PngIOException) as info:
        Png.from_file(tmp_path / "missing.png")
    assert isinstance(info.value.__cause__, OSError)
    with pytest.raises(PngIOException):
        minimal_png.save(tmp_path / "missing" / "out.png")


def test_display(minimal_png):
    text = str(minimal_png)
    assert "Chunk Type: IHDR" in text
    assert "Chunk Type: IEND" in text


def test_parse_many_chunks_is_linear():
    idat = create_chunk('IDAT', bytes(8192)).to_bytes()
    data = PNG_SIGNATURE + idat * 4000
    started = time.perf_counter()
    png = Png.from_bytes(data)
    elapsed = time.perf_counter() - started
    assert len(png) == 4000
    assert elapsed < 3
