"""Hide and recover messages in PNG chunks."""

from pngme.chunk import Chunk, chunk_crc
from pngme.chunk_type import ChunkType
from pngme.PNG import Png

__all__ = ["Chunk", "ChunkType", "Png", "chunk_crc"]
