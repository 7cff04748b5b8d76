"""Shared pytest fixtures for all tests."""

import logging
import struct

import numpy as np
import pytest
from PIL import Image

MESSAGE = b"This is where your secret message will be!"
MESSAGE_CRC = 2882656334


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Drop handlers installed by the CLI so each test starts with a clean logger."""
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    yield
    logger = logging.getLogger('pngme')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True


def build_chunk_bytes(chunk_type=b"RuSt", data=MESSAGE, crc=MESSAGE_CRC, length=None):
    """Lay out a chunk by hand: length || type || data || crc."""
    if length is None:
        length = len(data)
    return struct.pack('>I', length) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def chunk_bytes():
    return build_chunk_bytes()


@pytest.fixture
def pixels():
    """Small RGB gradient, 8x6 pixels."""
    rows = np.arange(6, dtype=np.uint8).reshape(6, 1, 1) * 40
    cols = np.arange(8, dtype=np.uint8).reshape(1, 8, 1) * 30
    return np.concatenate([
        np.broadcast_to(rows, (6, 8, 1)),
        np.broadcast_to(cols, (6, 8, 1)),
        np.full((6, 8, 1), 200, dtype=np.uint8),
    ], axis=2)


@pytest.fixture
def sample_png(tmp_path, pixels):
    """
    Write a real PNG file with Pillow.

    Returns:
        Path to the PNG file
    """
    path = tmp_path / 'image.png'
    Image.fromarray(pixels).save(path, format='PNG')
    return path
