"""Maps a verb and its positional arguments onto one of the pngme operations."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pngme.errors import InvalidCommand, MissingArgs


@dataclass(frozen=True)
class EncodeArgs:
    file: Path
    chunk_type: str
    payload: str
    output: Optional[Path] = None


@dataclass(frozen=True)
class DecodeArgs:
    file: Path
    chunk_type: str


@dataclass(frozen=True)
class RemoveArgs:
    file: Path
    chunk_type: str
    output: Optional[Path] = None


@dataclass(frozen=True)
class PrintArgs:
    file: Path


PngMeArgs = Union[EncodeArgs, DecodeArgs, RemoveArgs, PrintArgs]


def generate_args(command: str, filepath: str, chunk_type: Optional[str] = None,
                  payload: Optional[str] = None, output: Optional[str] = None) -> PngMeArgs:
    """
    Build the arguments of one operation.

    Only presence is checked here, the chunk type itself is validated by the codec.

    Raises:
        MissingArgs: chunk type (or payload for encode) not given
        InvalidCommand: unknown verb
    """
    file = Path(filepath)
    out = Path(output) if output else None

    if command == 'print':
        return PrintArgs(file)
    if command not in ('encode', 'decode', 'remove'):
        raise InvalidCommand(command)

    if chunk_type is None:
        raise MissingArgs('chunk type')

    if command == 'encode':
        if payload is None:
            raise MissingArgs('payload')
        return EncodeArgs(file, chunk_type, payload, out)
    if command == 'decode':
        return DecodeArgs(file, chunk_type)
    return RemoveArgs(file, chunk_type, out)
