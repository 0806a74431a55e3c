import struct

import pytest
import snappy

from xlstyles.archive import ArchiveChunk, ArchiveFile, decode_archives, encode_archives
from xlstyles.constants import MAX_CHUNK_SIZE


def chunk_lengths(data):
    lengths = []
    while data:
        assert data[0] == 0x00
        length = struct.unpack("<I", data[1:4] + b"\x00")[0]
        lengths.append(length)
        data = data[4 + length :]
    return lengths


def test_archive_values():
    archives = [
        {"name": "Sheet1", "flag": True, "missing": None, "size": 11.5},
        {"nested": {"list": [1.0, "two", None, False]}},
        {},
    ]
    assert decode_archives(encode_archives(archives)) == archives


def test_empty_archive_file():
    assert encode_archives([]) == b""
    assert decode_archives(b"") == []


def test_large_archives_are_chunked():
    archives = [{"text": "x" * 1000, "index": float(i)} for i in range(200)]
    data = encode_archives(archives)
    lengths = chunk_lengths(data)
    assert len(lengths) > 1

    uncompressed = b"".join(ArchiveChunk.decompress_all(data))
    assert len(uncompressed) > MAX_CHUNK_SIZE
    assert decode_archives(data) == archives


def test_uncompressed_chunk_size():
    data = encode_archives([{"text": "y" * (3 * MAX_CHUNK_SIZE)}])
    sizes = []
    while data:
        length = struct.unpack("<I", data[1:4] + b"\x00")[0]
        sizes.append(len(snappy.uncompress(data[4 : 4 + length])))
        data = data[4 + length :]
    assert all(size <= MAX_CHUNK_SIZE for size in sizes)
    assert sizes[0] == MAX_CHUNK_SIZE


def test_invalid_archives():
    with pytest.raises(ValueError) as e:
        decode_archives(b"\x01\x00\x00\x00", "Index/Bad.iwa")
    assert "Failed to deserialize Index/Bad.iwa" in str(e)
    with pytest.raises(ValueError):
        decode_archives(b"\x00\x10\x00")
    with pytest.raises(ValueError):
        decode_archives(b"\x00\x10\x00\x00abc")

    with pytest.raises(ValueError) as e:
        ArchiveFile([{"bad": object()}], "Index/Bad.iwa").to_buffer()
    assert "Failed to serialize Index/Bad.iwa" in str(e)
