import logging

import requests

from .chunk import Chunk
from .chunk_type import ChunkType
from .png import Png, PNG_SIGNATURE, read_png_signature
from .pngexceptions import *

__version__ = "1.0.0"

log = logging.getLogger(__name__)


def open(filename, timeout=10):
    """
    :returns: a Png object, reading from the given file name. Http and Https links are supported as well.
    :raises PngIOException: if the file cannot be read or the download fails.
    """
    filename = str(filename)
    if is_url(filename):
        log.debug("Downloading %s", filename)
        try:
            response = requests.get(filename, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise PngIOException(filename, str(e)) from e
        return Png.from_bytes(response.content)
    log.debug("Reading %s", filename)
    return Png.from_file(filename)


def is_url(filename):
    """
    :returns: whether filename is an http or https link rather than a path on disc.
    """
    filename = str(filename)
    return filename.startswith('http://') or filename.startswith('https://')


def create_chunk(chunk_type, data=b''):
    """
    :returns: a new chunk of the given type (E.g. "tEXt") holding data.
        Text is encoded as UTF-8.
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    return Chunk(ChunkType.parse_str(chunk_type), data)
