from dataclasses import dataclass

from pngme.constants import TYPE_SIZE
from pngme.errors import MalformedTag
from pngme.logging_config import get_logger

logger = get_logger(__name__)


def _is_letter(byte: int) -> bool:
    return 65 <= byte <= 90 or 97 <= byte <= 122


def _is_upper(byte: int) -> bool:
    return 65 <= byte <= 90


def _is_lower(byte: int) -> bool:
    return 97 <= byte <= 122


# 4 znakowy identyfikator chunka (IHDR, IDAT, tEXt, ...)
# wielkosc litery kazdego bajtu to osobna flaga (bit 5 bajtu):
#   [0] critical / ancillary
#   [1] public / private
#   [2] reserved, musi byc wielka litera
#   [3] unsafe / safe to copy
@dataclass(frozen=True)
class ChunkType:
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != TYPE_SIZE:
            raise MalformedTag(f"chunk type must be {TYPE_SIZE} bytes, got {len(self.raw)}")
        object.__setattr__(self, 'raw', bytes(self.raw))

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'ChunkType':
        """Wrap 4 raw bytes as they are. The result may still fail is_valid()."""
        return cls(raw)

    @classmethod
    def from_str(cls, text: str) -> 'ChunkType':
        """Build a chunk type from 4 ASCII letters, e.g. ``"RuSt"``."""
        if len(text) != TYPE_SIZE:
            raise MalformedTag(f"chunk type {text!r} must be exactly {TYPE_SIZE} characters")
        if not (text.isascii() and text.isalpha()):
            raise MalformedTag(f"chunk type {text!r} must contain only ASCII letters")
        return cls(text.encode('ascii'))

    def bytes(self) -> bytes:
        return self.raw

    def is_critical(self) -> bool:
        return _is_upper(self.raw[0])

    def is_public(self) -> bool:
        return _is_upper(self.raw[1])

    def is_reserved_bit_valid(self) -> bool:
        return _is_upper(self.raw[2])

    def is_safe_to_copy(self) -> bool:
        return _is_lower(self.raw[3])

    def is_alphabetic(self) -> bool:
        return all(_is_letter(b) for b in self.raw)

    def is_valid(self) -> bool:
        """True when all 4 bytes are ASCII letters and the reserved bit is set."""
        if not self.is_alphabetic():
            logger.debug("chunk type %r is not made of ASCII letters", self.raw)
            return False
        return self.is_reserved_bit_valid()

    def __str__(self) -> str:
        # bez walidacji, dla bajtow spoza ASCII wynik jest tylko orientacyjny
        return self.raw.decode('latin-1')
