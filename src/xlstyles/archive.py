# Chunk framing follows https://github.com/psobot/keynote-parser/blob/master/keynote_parser/codec.py

import struct
from typing import List

import snappy
from google.protobuf.internal.decoder import _DecodeVarint32
from google.protobuf.internal.encoder import _VarintBytes
from google.protobuf.json_format import MessageToDict, ParseDict
from google.protobuf.struct_pb2 import Struct

from xlstyles.constants import MAX_CHUNK_SIZE

__all__ = ["ArchiveFile", "decode_archives", "encode_archives"]


class ArchiveFile:
    """
    A list of archives stored as one ``.iwa`` part of a document.

    Each archive is a ``dict`` of JSON compatible values, stored as a
    protobuf ``Struct`` message. Messages are written one after the other,
    each prefixed with its varint encoded length, and the whole buffer is
    then split into snappy compressed chunks of at most 64 KiB.
    """

    def __init__(self, archives: List[dict], filename: str = None):
        self.archives = archives
        self.filename = filename

    @classmethod
    def from_buffer(cls, data: bytes, filename: str = None) -> "ArchiveFile":
        try:
            data = b"".join(ArchiveChunk.decompress_all(data))
            archives = []
            while data:
                archive, data = ArchiveSegment.from_buffer(data)
                archives.append(archive)
            return cls(archives, filename)
        except Exception as e:
            if filename:
                raise ValueError("Failed to deserialize " + filename) from e
            else:
                raise

    def to_buffer(self) -> bytes:
        try:
            uncompressed = b"".join(ArchiveSegment.to_buffer(archive) for archive in self.archives)
        except Exception as e:
            if self.filename:
                raise ValueError("Failed to serialize " + self.filename) from e
            else:
                raise
        return ArchiveChunk.compress_all(uncompressed)


class ArchiveChunk:
    @classmethod
    def decompress_all(cls, data: bytes):
        while data:
            header = data[:4]
            if len(header) < 4:
                raise ValueError("truncated chunk header")

            first_byte = header[0]
            if first_byte != 0x00:
                raise ValueError("chunk does not start with 0x00! (found %x)" % first_byte)

            length = struct.unpack_from("<I", bytes(header[1:]) + b"\x00")[0]
            chunk = data[4 : 4 + length]
            if len(chunk) != length:
                raise ValueError("truncated chunk")
            data = data[4 + length :]
            yield snappy.uncompress(chunk)

    @classmethod
    def compress_all(cls, uncompressed: bytes) -> bytes:
        payloads = []
        while uncompressed:
            payloads.append(snappy.compress(uncompressed[:MAX_CHUNK_SIZE]))
            uncompressed = uncompressed[MAX_CHUNK_SIZE:]
        return b"".join(
            [b"\x00" + struct.pack("<I", len(payload))[:3] + payload for payload in payloads]
        )


class ArchiveSegment:
    @classmethod
    def from_buffer(cls, buf: bytes):
        msg_len, new_pos = _DecodeVarint32(buf, 0)
        msg_buf = buf[new_pos : new_pos + msg_len]
        if len(msg_buf) != msg_len:
            raise ValueError("truncated archive segment")
        message = Struct.FromString(msg_buf)
        return MessageToDict(message), buf[new_pos + msg_len :]

    @classmethod
    def to_buffer(cls, archive: dict) -> bytes:
        message = ParseDict(archive, Struct())
        payload = message.SerializeToString()
        return _VarintBytes(len(payload)) + payload


def encode_archives(archives: List[dict], filename: str = None) -> bytes:
    """Serialize a list of archive dicts to the bytes of an ``.iwa`` part."""
    return ArchiveFile(archives, filename).to_buffer()


def decode_archives(data: bytes, filename: str = None) -> List[dict]:
    """Return the list of archive dicts stored in the bytes of an ``.iwa`` part.

    Raises
    ------
    ValueError:
        If the data is not a valid archive file.
    """
    return ArchiveFile.from_buffer(data, filename).archives
