class PngMeException(Exception):
    """Base class for every error raised by pngme."""
    def __init__(self, txt):
        super(PngMeException, self).__init__(txt)


class InvalidChunkTypeException(PngMeException):
    """Raised when a chunk type code cannot be parsed."""


class InvalidTypeCodeException(InvalidChunkTypeException):
    """Raised when a chunk type contains a byte that is not an ASCII letter."""
    def __init__(self, type_bytes):
        self.type_bytes = bytes(type_bytes)
        super(InvalidTypeCodeException, self).__init__(
            "Chunk type must consist of ASCII letters only, got {!r}".format(self.type_bytes)
        )


class InvalidTypeLengthException(InvalidChunkTypeException):
    """Raised when a chunk type is not exactly 4 bytes long."""
    def __init__(self, length):
        self.length = length
        super(InvalidTypeLengthException, self).__init__(
            "Chunk type must be exactly 4 bytes long, got {}".format(length)
        )


class InvalidChunkStructureException(PngMeException):
    """Raised when a chunk's internal structure is invalid."""


class ChunkTooShortException(InvalidChunkStructureException):
    def __init__(self, actual):
        self.actual = actual
        super(ChunkTooShortException, self).__init__(
            "Chunk data must be at least 12 bytes long, got {}".format(actual)
        )


class ChunkLengthMismatchException(InvalidChunkStructureException):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super(ChunkLengthMismatchException, self).__init__(
            "Chunk data length mismatch: expected {}, got {}".format(expected, actual)
        )


class ChunkTooLongException(InvalidChunkStructureException):
    """Raised when a payload does not fit in the 4 bytes length header."""
    def __init__(self, length, maximum):
        self.length = length
        self.maximum = maximum
        super(ChunkTooLongException, self).__init__(
            "Chunk data is {} bytes long, at most {} bytes fit in a chunk".format(length, maximum)
        )


class CrcMismatchException(InvalidChunkStructureException):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super(CrcMismatchException, self).__init__(
            "CRC mismatch: expected {}, got {}".format(expected, actual)
        )


class InvalidUtf8Exception(InvalidChunkStructureException):
    """Raised when a chunk's payload is read as text but is not valid UTF-8."""
    def __init__(self, reason):
        self.reason = reason
        super(InvalidUtf8Exception, self).__init__(
            "Failed to convert chunk data to string: {}".format(reason)
        )


class InvalidPngStructureException(PngMeException):
    """Raised when a png structure is invalid."""


class InvalidSignatureException(InvalidPngStructureException):
    def __init__(self, signature):
        self.signature = bytes(signature)
        super(InvalidSignatureException, self).__init__(
            "missing PNG signature, file starts with {!r}".format(self.signature)
        )


class ChunkIndexOutOfBoundsException(InvalidPngStructureException):
    def __init__(self, index, length):
        self.index = index
        self.length = length
        super(ChunkIndexOutOfBoundsException, self).__init__(
            "Cannot insert a chunk at index {}, the image has {} chunks".format(index, length)
        )


class ChunkNotFoundException(InvalidPngStructureException):
    def __init__(self, chunk_type):
        self.chunk_type = chunk_type
        super(ChunkNotFoundException, self).__init__(
            "No chunk of type '{}' in the image".format(chunk_type)
        )


class PngIOException(PngMeException):
    """Raised when reading or writing an image fails. The original error is chained."""
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super(PngIOException, self).__init__(
            "Failed to access {}: {}".format(path, reason)
        )
