# png framing
PNG_MAGIC_NUMBER = b'\x89PNG\r\n\x1a\n'
PNG_MAGIC_NUMBER_SIZE = len(PNG_MAGIC_NUMBER)
CHUNK_LENGTH_SIZE = 4
CHUNK_TYPE_SIZE = 4
CHUNK_CRC_SIZE = 4
CHUNK_HEADER_SIZE = CHUNK_LENGTH_SIZE + CHUNK_TYPE_SIZE

TYPE_tEXt = b'tEXt'
TYPE_zTXt = b'zTXt'
TYPE_iTXt = b'iTXt'

COMPRESSION_METHOD_DEFLATE = 0
ITXT_COMPRESSED_FLAG = 1

# OpenCC conversion profiles
CONVERSION_MODES = (
    's2t',
    't2s',
    's2tw',
    'tw2s',
    's2twp',
    'tw2sp',
    's2hk',
    'hk2s',
    't2tw',
    't2hk',
)

# file conversion
CONVERTED_FILE_PREFIX = 'converted-'
PNG_EXTENSION = '.png'
JSON_EXTENSION = '.json'
PNG_MIME_TYPE = 'image/png'
JSON_MIME_TYPE = 'application/json'
