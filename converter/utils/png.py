import struct
import zlib
from dataclasses import dataclass, field
from typing import List

from converter.constants import (PNG_MAGIC_NUMBER, PNG_MAGIC_NUMBER_SIZE, CHUNK_LENGTH_SIZE,
                                 CHUNK_TYPE_SIZE, CHUNK_CRC_SIZE, CHUNK_HEADER_SIZE,
                                 TYPE_iTXt, TYPE_tEXt, TYPE_zTXt)


@dataclass(frozen=True)
class Chunk:
    """
    A single PNG chunk. `crc` holds the four checksum bytes exactly as stored.
    """
    type: bytes
    data: bytes
    crc: bytes

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def type_name(self) -> str:
        return self.type.decode('latin1')

    def is_text(self) -> bool:
        return is_text_chunk(self.type)

    def crc_is_valid(self) -> bool:
        return self.crc == pack_crc(compute_crc(self.type, self.data))

    def to_bytes(self) -> bytes:
        return struct.pack("!I", self.length) + self.type + self.data + self.crc


@dataclass
class ChunkScan:
    """
    Result of scanning a PNG chunk stream.

    `truncated` is set when a chunk declared more bytes than the buffer holds;
    `trailing_bytes` counts everything after the last parsed chunk.
    """
    chunks: List[Chunk] = field(default_factory=list)
    truncated: bool = False
    trailing_bytes: int = 0


def is_png(data: bytes) -> bool:
    """
    Checks the 8-byte PNG signature.
    """
    return data[:PNG_MAGIC_NUMBER_SIZE] == PNG_MAGIC_NUMBER


def is_text_chunk(chunk_type: bytes) -> bool:
    """
    Checks if a chunk type is a text chunk.
    """
    return chunk_type in (TYPE_iTXt, TYPE_tEXt, TYPE_zTXt)


def compute_crc(chunk_type: bytes, data: bytes) -> int:
    return zlib.crc32(chunk_type + data) & 0xffffffff


def pack_crc(crc: int) -> bytes:
    return struct.pack("!I", crc)


def create_chunk(chunk_type: bytes, data: bytes) -> Chunk:
    """
    Creates a chunk with a freshly computed CRC.
    """
    if len(chunk_type) != CHUNK_TYPE_SIZE:
        raise ValueError(f"Chunk type must be {CHUNK_TYPE_SIZE} bytes, got {len(chunk_type)}")
    return Chunk(type=chunk_type, data=bytes(data), crc=pack_crc(compute_crc(chunk_type, data)))


def read_chunks(png_data: bytes) -> ChunkScan:
    """
    Reads the chunks of a PNG buffer.

    Scanning stops at the first chunk whose declared data runs past the end
    of the buffer; the chunks read before it are kept. A last chunk whose
    data fits but whose CRC field is cut short is kept with a recomputed CRC.
    """
    if not is_png(png_data):
        raise ValueError('Buffer is not a PNG !')

    scan = ChunkScan()
    total = len(png_data)
    position = PNG_MAGIC_NUMBER_SIZE
    while position + CHUNK_HEADER_SIZE <= total:
        chunk_length = struct.unpack("!I", png_data[position:position + CHUNK_LENGTH_SIZE])[0]
        chunk_type = png_data[position + CHUNK_LENGTH_SIZE:position + CHUNK_HEADER_SIZE]

        data_start = position + CHUNK_HEADER_SIZE
        data_end = data_start + chunk_length
        crc_end = data_end + CHUNK_CRC_SIZE
        if data_end > total:
            scan.truncated = True
            break
        if crc_end > total:
            scan.chunks.append(create_chunk(bytes(chunk_type), png_data[data_start:data_end]))
            scan.truncated = True
            position = data_end
            break

        scan.chunks.append(Chunk(
            type=bytes(chunk_type),
            data=bytes(png_data[data_start:data_end]),
            crc=bytes(png_data[data_end:crc_end])
        ))
        position = crc_end

    scan.trailing_bytes = total - position
    return scan


def assemble_png(chunks: List[Chunk]) -> bytes:
    """
    Concatenates the PNG signature and the given chunks.
    """
    output = bytearray(PNG_MAGIC_NUMBER)
    for chunk in chunks:
        output += chunk.to_bytes()
    return bytes(output)
