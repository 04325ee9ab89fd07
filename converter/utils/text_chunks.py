"""
Decoding and encoding of the three PNG text chunk layouts.

    tEXt: keyword \\0 text
    zTXt: keyword \\0 method compressed-text
    iTXt: keyword \\0 flag method language \\0 translated-keyword \\0 text

Decoding is lenient about text encoding (invalid UTF-8 is replaced) but strict
about framing: a missing terminator or an unreadable compressed stream raises
TextChunkDecodeError.
"""
import base64
import zlib
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

from converter.constants import (TYPE_tEXt, TYPE_zTXt, TYPE_iTXt,
                                 COMPRESSION_METHOD_DEFLATE, ITXT_COMPRESSED_FLAG)

NULL_BYTE = b'\x00'


class TextChunkDecodeError(ValueError):
    """Raised when a text chunk payload does not follow its layout."""
    pass


class TextChunkKind(Enum):
    PLAIN = TYPE_tEXt
    COMPRESSED = TYPE_zTXt
    INTERNATIONAL = TYPE_iTXt

    @classmethod
    def from_chunk_type(cls, chunk_type: bytes) -> 'TextChunkKind':
        try:
            return cls(chunk_type)
        except ValueError:
            raise TextChunkDecodeError(f"Not a text chunk type: {chunk_type!r}")


@dataclass(frozen=True)
class DecodedTextChunk:
    kind: TextChunkKind
    keyword: bytes
    text: str

    @property
    def keyword_name(self) -> str:
        return self.keyword.decode('utf-8', errors='replace')


def _lenient_text(data: bytes) -> str:
    return data.decode('utf-8', errors='replace')


def _inflate(data: bytes) -> bytes:
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise TextChunkDecodeError(f"Compressed text could not be inflated: {e}")


def _split_keyword(data: bytes):
    keyword_end = data.find(NULL_BYTE)
    if keyword_end == -1:
        raise TextChunkDecodeError("Keyword terminator not found")
    return data[:keyword_end], keyword_end + 1


def _decode_plain(data: bytes) -> DecodedTextChunk:
    keyword, position = _split_keyword(data)
    return DecodedTextChunk(TextChunkKind.PLAIN, keyword, _lenient_text(data[position:]))


def _decode_compressed(data: bytes) -> DecodedTextChunk:
    keyword, position = _split_keyword(data)
    if position >= len(data):
        raise TextChunkDecodeError("Compression method byte is missing")
    method = data[position]
    if method != COMPRESSION_METHOD_DEFLATE:
        raise TextChunkDecodeError(f"Unknown compression method {method}")
    text = _lenient_text(_inflate(data[position + 1:]))
    return DecodedTextChunk(TextChunkKind.COMPRESSED, keyword, text)


def _decode_international(data: bytes) -> DecodedTextChunk:
    keyword, position = _split_keyword(data)
    if position + 2 > len(data):
        raise TextChunkDecodeError("Compression flag or method byte is missing")
    compression_flag = data[position]
    position += 2

    language_end = data.find(NULL_BYTE, position)
    if language_end == -1:
        raise TextChunkDecodeError("Language tag terminator not found")
    position = language_end + 1

    translated_end = data.find(NULL_BYTE, position)
    if translated_end == -1:
        raise TextChunkDecodeError("Translated keyword terminator not found")
    position = translated_end + 1

    remaining = data[position:]
    if compression_flag == ITXT_COMPRESSED_FLAG:
        text = _lenient_text(_inflate(remaining))
    else:
        text = _lenient_text(remaining)
    return DecodedTextChunk(TextChunkKind.INTERNATIONAL, keyword, text)


def _encode_plain(keyword: bytes, text: str) -> bytes:
    # tEXt is always written back as Base64, whatever the source held
    return keyword + NULL_BYTE + base64.b64encode(text.encode('utf-8'))


def _encode_compressed(keyword: bytes, text: str) -> bytes:
    method = bytes([COMPRESSION_METHOD_DEFLATE])
    return keyword + NULL_BYTE + method + zlib.compress(text.encode('utf-8'))


def _encode_international(keyword: bytes, text: str) -> bytes:
    # uncompressed, empty language tag and translated keyword
    return keyword + NULL_BYTE + b'\x00\x00' + NULL_BYTE + NULL_BYTE + text.encode('utf-8')


_DECODERS: Dict[TextChunkKind, Callable[[bytes], DecodedTextChunk]] = {
    TextChunkKind.PLAIN: _decode_plain,
    TextChunkKind.COMPRESSED: _decode_compressed,
    TextChunkKind.INTERNATIONAL: _decode_international,
}

_ENCODERS: Dict[TextChunkKind, Callable[[bytes, str], bytes]] = {
    TextChunkKind.PLAIN: _encode_plain,
    TextChunkKind.COMPRESSED: _encode_compressed,
    TextChunkKind.INTERNATIONAL: _encode_international,
}


def decode_text_chunk(chunk_type: bytes, data: bytes) -> DecodedTextChunk:
    """
    Decodes the payload of a tEXt, zTXt or iTXt chunk into keyword and text.
    """
    kind = TextChunkKind.from_chunk_type(chunk_type)
    return _DECODERS[kind](data)


def encode_text_chunk(chunk_type: bytes, keyword: bytes, text: str) -> bytes:
    """
    Builds the chunk data for `text` stored under `keyword`.
    """
    if NULL_BYTE in keyword:
        raise ValueError("Keyword must not contain a null byte")
    kind = TextChunkKind.from_chunk_type(chunk_type)
    return _ENCODERS[kind](keyword, text)
