"""Constants of the PNG format used across the package."""

PngSignature: bytes = b'\x89PNG\r\n\x1a\n'   # 8 byte PNG header
CRITICAL_CHUNKS = {b'IHDR', b'PLTE', b'IDAT', b'IEND'}

# chunk = [4B length][4B type][payload][4B CRC]
LENGTH_SIZE = 4
TYPE_SIZE = 4
CRC_SIZE = 4
CHUNK_OVERHEAD = LENGTH_SIZE + TYPE_SIZE + CRC_SIZE

MAX_CHUNK_LENGTH = 0xFFFFFFFF
