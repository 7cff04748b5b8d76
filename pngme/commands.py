"""File level operations: read a PNG, change one chunk, write it back."""

from pathlib import Path
from typing import List, Union

from pngme.args import DecodeArgs, EncodeArgs, PngMeArgs, PrintArgs, RemoveArgs
from pngme.chunk import Chunk
from pngme.chunk_type import ChunkType
from pngme.errors import ChunkNotFound, InvalidTagBits
from pngme.logging_config import get_logger
from pngme.PNG import Png
from pngme.print_chunks import describe_png

logger = get_logger(__name__)


def read_png(path: Path) -> Png:
    with open(path, 'rb') as f:
        content = f.read()
    return Png.from_bytes(content)


def write_png(png: Png, path: Path) -> None:
    #plik otwieramy dopiero po serializacji
    content = png.as_bytes()
    with open(path, 'wb') as f:
        f.write(content)


def encode(args: EncodeArgs) -> Chunk:
    """Hide ``args.payload`` in a new chunk and save the file."""
    chunk_type = ChunkType.from_str(args.chunk_type)
    if not chunk_type.is_valid():
        raise InvalidTagBits(f"invalid chunk type {chunk_type}: reserved bit not set")

    png = read_png(args.file)
    chunk = Chunk(chunk_type, args.payload.encode('utf-8'))
    png.append_chunk(chunk)

    out_path = args.output or args.file
    write_png(png, out_path)
    logger.info("added %s chunk (%d bytes) to %s", chunk_type, chunk.length(), out_path)
    return chunk


def decode(args: DecodeArgs) -> str:
    """Return the text stored in the first chunk of ``args.chunk_type``."""
    ChunkType.from_str(args.chunk_type)
    png = read_png(args.file)
    chunk = png.chunk_by_type(args.chunk_type)
    if chunk is None:
        raise ChunkNotFound(args.chunk_type)
    return chunk.data_as_text()


def remove(args: RemoveArgs) -> Chunk:
    ChunkType.from_str(args.chunk_type)
    png = read_png(args.file)
    chunk = png.remove_first_chunk(args.chunk_type)

    out_path = args.output or args.file
    write_png(png, out_path)
    logger.info("removed %s chunk from %s", args.chunk_type, out_path)
    return chunk


def print_png(args: PrintArgs) -> List[str]:
    return describe_png(read_png(args.file))


def run(args: PngMeArgs) -> Union[Chunk, str, List[str]]:
    if isinstance(args, EncodeArgs):
        return encode(args)
    if isinstance(args, DecodeArgs):
        return decode(args)
    if isinstance(args, RemoveArgs):
        return remove(args)
    return print_png(args)
