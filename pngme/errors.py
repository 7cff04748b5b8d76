"""Exceptions raised by the chunk codec, the container and the CLI arguments."""


class PngError(ValueError):
    """Base class for everything pngme reports to its caller."""


class MalformedTag(PngError):
    """Chunk type is not made of 4 ASCII letters."""


class InvalidTagBits(PngError):
    """Chunk type letters are fine but the reserved bit is not set."""


class TooShort(PngError):
    """Buffer cannot hold even an empty chunk."""


class TruncatedPayload(PngError):
    """Declared length runs past the end of the buffer."""


class ChecksumMismatch(PngError):
    """Stored CRC differs from the one computed over type + data."""


class InvalidChunkData(PngError):
    """Payload was requested as text but cannot be read as text."""


class PayloadTooLarge(PngError):
    """Payload does not fit in the 32-bit length field."""


class InvalidSignature(PngError):
    """Buffer does not start with the PNG signature."""


class ChunkNotFound(PngError):
    """No chunk with the requested type."""

    def __init__(self, chunk_type: str):
        super().__init__(f"chunk type {chunk_type!r} not found")
        self.chunk_type = chunk_type


class InvalidCommand(PngError):
    def __init__(self, command: str):
        super().__init__(f"invalid command: {command!r}")
        self.command = command


class MissingArgs(PngError):
    def __init__(self, what: str):
        super().__init__(f"missing argument: {what}")
        self.what = what
