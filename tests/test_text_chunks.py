import base64
import zlib

import pytest

from converter.utils.text_chunks import (TextChunkKind, TextChunkDecodeError,
                                         decode_text_chunk, encode_text_chunk)


def test_kind_from_chunk_type():
    assert TextChunkKind.from_chunk_type(b'tEXt') is TextChunkKind.PLAIN
    assert TextChunkKind.from_chunk_type(b'zTXt') is TextChunkKind.COMPRESSED
    assert TextChunkKind.from_chunk_type(b'iTXt') is TextChunkKind.INTERNATIONAL
    with pytest.raises(TextChunkDecodeError):
        TextChunkKind.from_chunk_type(b'IDAT')

# --- decode ---

def test_decode_plain():
    decoded = decode_text_chunk(b'tEXt', b'chara\x00eyJhIjoxfQ==')
    assert decoded.kind is TextChunkKind.PLAIN
    assert decoded.keyword == b'chara'
    assert decoded.text == 'eyJhIjoxfQ=='


def test_decode_plain_is_lenient_about_utf8():
    decoded = decode_text_chunk(b'tEXt', b'Comment\x00caf\xe9')
    assert decoded.text == 'caf\ufffd'


def test_decode_plain_empty_text():
    decoded = decode_text_chunk(b'tEXt', b'Title\x00')
    assert decoded.text == ''


def test_decode_missing_keyword_terminator():
    for chunk_type in (b'tEXt', b'zTXt', b'iTXt'):
        with pytest.raises(TextChunkDecodeError):
            decode_text_chunk(chunk_type, b'no terminator here')


def test_decode_compressed():
    data = b'chara\x00\x00' + zlib.compress('伺服器'.encode('utf-8'))
    decoded = decode_text_chunk(b'zTXt', data)
    assert decoded.kind is TextChunkKind.COMPRESSED
    assert decoded.keyword == b'chara'
    assert decoded.text == '伺服器'


def test_decode_compressed_requires_method_byte():
    with pytest.raises(TextChunkDecodeError):
        decode_text_chunk(b'zTXt', b'chara\x00')


def test_decode_compressed_rejects_unknown_method():
    with pytest.raises(TextChunkDecodeError):
        decode_text_chunk(b'zTXt', b'chara\x00\x01' + zlib.compress(b'x'))


def test_decode_compressed_rejects_corrupt_stream():
    with pytest.raises(TextChunkDecodeError):
        decode_text_chunk(b'zTXt', b'chara\x00\x00not deflate data')


def test_decode_international_uncompressed():
    data = b'chara\x00\x00\x00zh-TW\x00\xe8\xa7\x92\xe8\x89\xb2\x00' + '{"a":"伺"}'.encode('utf-8')
    decoded = decode_text_chunk(b'iTXt', data)
    assert decoded.kind is TextChunkKind.INTERNATIONAL
    assert decoded.keyword == b'chara'
    assert decoded.text == '{"a":"伺"}'


def test_decode_international_compressed():
    data = b'chara\x00\x01\x00\x00\x00' + zlib.compress('伺'.encode('utf-8'))
    assert decode_text_chunk(b'iTXt', data).text == '伺'


def test_decode_international_compressed_corrupt():
    with pytest.raises(TextChunkDecodeError):
        decode_text_chunk(b'iTXt', b'chara\x00\x01\x00\x00\x00garbage')


def test_decode_international_missing_fields():
    # flag and method missing
    with pytest.raises(TextChunkDecodeError):
        decode_text_chunk(b'iTXt', b'chara\x00\x00')
    # language tag terminator missing
    with pytest.raises(TextChunkDecodeError):
        decode_text_chunk(b'iTXt', b'chara\x00\x00\x00en')
    # translated keyword terminator missing
    with pytest.raises(TextChunkDecodeError):
        decode_text_chunk(b'iTXt', b'chara\x00\x00\x00en\x00chara')

# --- encode ---

def test_encode_plain_always_base64():
    data = encode_text_chunk(b'tEXt', b'chara', '{"name":"服"}')
    keyword, _, text = data.partition(b'\x00')
    assert keyword == b'chara'
    assert base64.b64decode(text).decode('utf-8') == '{"name":"服"}'


def test_encode_compressed():
    data = encode_text_chunk(b'zTXt', b'chara', '{"name":"服"}')
    assert data.startswith(b'chara\x00\x00')
    assert zlib.decompress(data[len(b'chara\x00\x00'):]).decode('utf-8') == '{"name":"服"}'


def test_encode_international_drops_language_fields():
    data = encode_text_chunk(b'iTXt', b'chara', '{"name":"服"}')
    assert data == b'chara\x00\x00\x00\x00\x00' + '{"name":"服"}'.encode('utf-8')


def test_encode_rejects_keyword_with_null():
    with pytest.raises(ValueError):
        encode_text_chunk(b'tEXt', b'bad\x00key', '{}')


def test_encoded_chunks_decode_back():
    for chunk_type in (b'tEXt', b'zTXt', b'iTXt'):
        decoded = decode_text_chunk(chunk_type, encode_text_chunk(chunk_type, b'ccv3', '[1,"二"]'))
        assert decoded.keyword == b'ccv3'
        if chunk_type == b'tEXt':
            assert base64.b64decode(decoded.text).decode('utf-8') == '[1,"二"]'
        else:
            assert decoded.text == '[1,"二"]'
