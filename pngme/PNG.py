from typing import List, Optional

from pngme.chunk import Chunk
from pngme.constants import CRITICAL_CHUNKS, PngSignature
from pngme.errors import ChunkNotFound, InvalidSignature
from pngme.logging_config import get_logger

logger = get_logger(__name__)


class Png:
    """
    Ordered list of chunks behind the PNG signature.

    Bytes found after IEND are kept in ``tail`` and written back unchanged.
    """

    def __init__(self, chunks: Optional[List[Chunk]] = None, tail: bytes = b''):
        self._chunks = list(chunks or [])
        self.tail = bytes(tail)

    #parser pliku PNG, rozbija bufor na chunki + bajty po IEND
    @classmethod
    def from_bytes(cls, buffer: bytes) -> 'Png':
        #walidacja
        if buffer[:len(PngSignature)] != PngSignature:
            raise InvalidSignature("not a PNG file: invalid signature")

        chunks = []
        offset = len(PngSignature)
        view = memoryview(buffer)
        while offset < len(buffer):
            chunk = Chunk.parse(view[offset:])
            chunks.append(chunk)
            logger.debug("read chunk %s at offset %d", chunk.chunk_type, offset)

            offset += chunk.serialized_size()
            if chunk.chunk_type.bytes() == b'IEND':
                break  #koniec PNG, dalej tylko ukryte bajty

        tail = bytes(buffer[offset:])
        if tail:
            logger.info("%d bytes behind IEND", len(tail))
        return cls(chunks, tail)

    def header(self) -> bytes:
        return PngSignature

    def chunks(self) -> List[Chunk]:
        return list(self._chunks)

    def critical_chunks(self) -> List[Chunk]:
        return [c for c in self._chunks if c.chunk_type.bytes() in CRITICAL_CHUNKS]

    def ancillary_chunks(self) -> List[Chunk]:
        return [c for c in self._chunks if c.chunk_type.bytes() not in CRITICAL_CHUNKS]

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        """First chunk whose type renders as ``chunk_type``, or None."""
        for chunk in self._chunks:
            if str(chunk.chunk_type) == chunk_type:
                return chunk
        return None

    def append_chunk(self, chunk: Chunk) -> None:
        #IEND musi zostac ostatni, nowy chunk wstawiamy tuz przed nim
        for i, existing in enumerate(self._chunks):
            if existing.chunk_type.bytes() == b'IEND':
                self._chunks.insert(i, chunk)
                return
        self._chunks.append(chunk)

    def remove_first_chunk(self, chunk_type: str) -> Chunk:
        """
        Remove the first chunk of the given type.

        Returns:
            The removed chunk

        Raises:
            ChunkNotFound: no chunk of that type
        """
        for i, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return self._chunks.pop(i)
        raise ChunkNotFound(chunk_type)

    def as_bytes(self) -> bytes:
        return PngSignature + b''.join(c.as_bytes() for c in self._chunks) + self.tail

    def __str__(self) -> str:
        return '\n'.join(str(c) for c in self._chunks)
