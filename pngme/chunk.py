import struct
import zlib
from dataclasses import dataclass

from pngme.chunk_type import ChunkType
from pngme.constants import CHUNK_OVERHEAD, CRC_SIZE, LENGTH_SIZE, MAX_CHUNK_LENGTH, TYPE_SIZE
from pngme.errors import (
    ChecksumMismatch,
    InvalidChunkData,
    InvalidTagBits,
    MalformedTag,
    PayloadTooLarge,
    TooShort,
    TruncatedPayload,
)
from pngme.logging_config import get_logger

logger = get_logger(__name__)


def chunk_crc(chunk_type: bytes, data: bytes) -> int:
    """CRC32 over type + data (the length field is not covered), as stored in PNG files."""
    return zlib.crc32(data, zlib.crc32(chunk_type)) & 0xFFFFFFFF


@dataclass(frozen=True)
class Chunk:
    """
    One PNG chunk: [4B length][4B type][data][4B CRC].

    Length and CRC are not stored, they are derived from the type and data
    every time the chunk is serialized.
    """
    chunk_type: ChunkType
    data: bytes = b''

    def __post_init__(self):
        object.__setattr__(self, 'data', bytes(self.data))

    def length(self) -> int:
        """
        Number of payload bytes.

        Raises:
            PayloadTooLarge: payload does not fit in the 32-bit length field
        """
        length = len(self.data)
        if length > MAX_CHUNK_LENGTH:
            raise PayloadTooLarge(f"chunk {self.chunk_type} payload of {length} bytes exceeds {MAX_CHUNK_LENGTH}")
        return length

    def crc(self) -> int:
        return chunk_crc(self.chunk_type.bytes(), self.data)

    def data_as_text(self) -> str:
        """
        Decode the payload as UTF-8 text.

        Raises:
            InvalidChunkData: chunk type is not valid or payload is not UTF-8
        """
        if not self.chunk_type.is_valid():
            raise InvalidChunkData(f"invalid chunk type {self.chunk_type}: cannot read data as text")
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidChunkData(f"chunk {self.chunk_type} data is not valid UTF-8: {e.reason}") from e

    def as_bytes(self) -> bytes:
        """Serialize as length || type || data || crc, integers big-endian."""
        return (struct.pack('>I', self.length())
                + self.chunk_type.bytes()
                + self.data
                + struct.pack('>I', self.crc()))

    def serialized_size(self) -> int:
        return CHUNK_OVERHEAD + self.length()

    @classmethod
    def parse(cls, buffer: bytes) -> 'Chunk':
        """
        Parse one chunk from the start of an untrusted buffer.

        Bytes after the chunk's CRC are ignored, so a container can walk a
        whole file with repeated calls.

        Args:
            buffer: bytes beginning with a chunk's length field

        Returns:
            Validated Chunk

        Raises:
            TooShort: fewer than 12 bytes
            MalformedTag: type is not 4 ASCII letters
            InvalidTagBits: reserved bit of the type is not set
            TruncatedPayload: declared length runs past the end of buffer
            ChecksumMismatch: stored CRC does not match type + data
        """
        #1 minimum: 4B length + 4B type + 4B CRC, pusty payload
        if len(buffer) < CHUNK_OVERHEAD:
            raise TooShort(f"chunk needs at least {CHUNK_OVERHEAD} bytes, got {len(buffer)}")

        #2 typ chunka
        type_bytes = bytes(buffer[LENGTH_SIZE:LENGTH_SIZE + TYPE_SIZE])
        chunk_type = ChunkType.from_bytes(type_bytes)
        if not chunk_type.is_alphabetic():
            logger.warning("malformed chunk type %r", type_bytes)
            raise MalformedTag(f"invalid chunk type {type_bytes!r}: not 4 ASCII letters")
        if not chunk_type.is_reserved_bit_valid():
            logger.warning("chunk type %s has reserved bit unset", chunk_type)
            raise InvalidTagBits(f"invalid chunk type {chunk_type}: reserved bit not set")

        #3 zadeklarowana dlugosc kontra dostepne bajty
        declared_length, = struct.unpack('>I', buffer[:LENGTH_SIZE])
        data_start = LENGTH_SIZE + TYPE_SIZE
        data_end = data_start + declared_length
        if data_end + CRC_SIZE > len(buffer):
            raise TruncatedPayload(
                f"chunk {chunk_type} declares {declared_length} bytes of data, "
                f"only {max(len(buffer) - data_start - CRC_SIZE, 0)} available"
            )

        #4 kandydat
        chunk = cls(chunk_type, buffer[data_start:data_end])

        #5 CRC zabezpieczenie integralnosci, liczymy crc32(type + data) i porownujemy
        stored_crc, = struct.unpack('>I', buffer[data_end:data_end + CRC_SIZE])
        calc_crc = chunk.crc()
        if stored_crc != calc_crc:
            logger.warning("chunk %s checksum mismatch: stored %08x, computed %08x",
                           chunk_type, stored_crc, calc_crc)
            raise ChecksumMismatch(
                f"chunk {chunk_type} checksum mismatch: stored {stored_crc}, computed {calc_crc}"
            )

        return chunk

    def __str__(self) -> str:
        return f"{self.chunk_type} length: {self.length()}, crc: {self.crc()}"
