"""Tests for reading and rewriting whole PNG files."""

import numpy as np
import pytest
from PIL import Image

from pngme.chunk import Chunk
from pngme.chunk_type import ChunkType
from pngme.constants import PngSignature
from pngme.errors import ChecksumMismatch, ChunkNotFound, InvalidSignature, TruncatedPayload
from pngme.PNG import Png

from conftest import build_chunk_bytes


def make_chunk(chunk_type, data):
    return Chunk(ChunkType.from_str(chunk_type), data)


def minimal_png():
    return Png([
        make_chunk("IHDR", b"\x00" * 13),
        make_chunk("IDAT", b"\x00"),
        make_chunk("IEND", b""),
    ])


class TestPngParsing:

    def test_reads_pillow_png(self, sample_png):
        png = Png.from_bytes(sample_png.read_bytes())
        types = [str(c.chunk_type) for c in png.chunks()]

        assert types[0] == "IHDR"
        assert types[-1] == "IEND"
        assert "IDAT" in types
        assert png.tail == b""

    def test_unchanged_file_round_trips(self, sample_png):
        content = sample_png.read_bytes()
        assert Png.from_bytes(content).as_bytes() == content

    def test_invalid_signature(self):
        with pytest.raises(InvalidSignature):
            Png.from_bytes(b"IAMADUCK" + build_chunk_bytes())

    def test_bytes_after_iend_are_kept(self, sample_png):
        content = sample_png.read_bytes() + b"Jestem za IEND"
        png = Png.from_bytes(content)

        assert png.tail == b"Jestem za IEND"
        assert png.as_bytes() == content

    def test_corrupted_chunk_fails_whole_file(self):
        content = PngSignature + build_chunk_bytes(crc=1) + make_chunk("IEND", b"").as_bytes()
        with pytest.raises(ChecksumMismatch):
            Png.from_bytes(content)

    def test_truncated_file(self, sample_png):
        content = sample_png.read_bytes()
        with pytest.raises(TruncatedPayload):
            Png.from_bytes(content[:-13])

    def test_critical_and_ancillary_split(self):
        png = minimal_png()
        png.append_chunk(make_chunk("ruSt", b"hidden"))

        assert [str(c.chunk_type) for c in png.critical_chunks()] == ["IHDR", "IDAT", "IEND"]
        assert [str(c.chunk_type) for c in png.ancillary_chunks()] == ["ruSt"]


class TestPngEditing:

    def test_append_goes_before_iend(self):
        png = minimal_png()
        png.append_chunk(make_chunk("ruSt", b"hidden"))

        assert [str(c.chunk_type) for c in png.chunks()] == ["IHDR", "IDAT", "ruSt", "IEND"]

    def test_append_without_iend(self):
        png = Png()
        png.append_chunk(make_chunk("ruSt", b"hidden"))
        assert len(png.chunks()) == 1

    def test_chunk_by_type(self):
        png = minimal_png()
        png.append_chunk(make_chunk("ruSt", b"first"))
        png.append_chunk(make_chunk("ruSt", b"second"))

        assert png.chunk_by_type("ruSt").data == b"first"
        assert png.chunk_by_type("teSt") is None

    def test_remove_first_chunk(self):
        png = minimal_png()
        png.append_chunk(make_chunk("ruSt", b"first"))
        png.append_chunk(make_chunk("ruSt", b"second"))

        removed = png.remove_first_chunk("ruSt")

        assert removed.data == b"first"
        assert png.chunk_by_type("ruSt").data == b"second"

    def test_remove_missing_chunk(self):
        with pytest.raises(ChunkNotFound):
            minimal_png().remove_first_chunk("ruSt")

    def test_chunks_returns_copy(self):
        png = minimal_png()
        png.chunks().clear()
        assert len(png.chunks()) == 3

    def test_as_bytes_starts_with_signature(self):
        png = minimal_png()
        assert png.header() == PngSignature
        assert png.as_bytes().startswith(PngSignature)
        assert Png.from_bytes(png.as_bytes()).chunks() == png.chunks()

    def test_image_survives_hidden_chunk(self, sample_png, pixels, tmp_path):
        png = Png.from_bytes(sample_png.read_bytes())
        png.append_chunk(make_chunk("ruSt", b"This is where your secret message will be!"))
        out = tmp_path / 'out.png'
        out.write_bytes(png.as_bytes())

        with Image.open(out) as img:
            assert np.array_equal(np.asarray(img), pixels)

        reread = Png.from_bytes(out.read_bytes())
        assert reread.chunk_by_type("ruSt").data_as_text() == "This is where your secret message will be!"
