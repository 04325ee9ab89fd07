import struct
import zlib

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


def make_chunk(chunk_type: bytes, data: bytes, crc: bytes = None) -> bytes:
    if crc is None:
        crc = struct.pack('>I', zlib.crc32(chunk_type + data) & 0xffffffff)
    return struct.pack('>I', len(data)) + chunk_type + data + crc


def make_png(*chunks: bytes) -> bytes:
    """IHDR, the given chunks, one IDAT and IEND."""
    ihdr = make_chunk(b'IHDR', struct.pack('>IIBBBBB', 1, 1, 8, 6, 0, 0, 0))
    idat = make_chunk(b'IDAT', zlib.compress(b'\x00\x00\x00\x00\x00'))
    iend = make_chunk(b'IEND', b'')
    return PNG_SIGNATURE + ihdr + b''.join(chunks) + idat + iend


def split_chunks(png_data: bytes):
    """Returns (length, type, data, crc) tuples without any validation."""
    chunks = []
    position = len(PNG_SIGNATURE)
    while position + 8 <= len(png_data):
        length = struct.unpack('>I', png_data[position:position + 4])[0]
        chunk_type = png_data[position + 4:position + 8]
        data = png_data[position + 8:position + 8 + length]
        crc = png_data[position + 8 + length:position + 12 + length]
        chunks.append((length, chunk_type, data, crc))
        position += 12 + length
    return chunks
