import json
import os
from typing import Iterable, List, Optional, Tuple

from converter.context import context
from converter.constants import (CONVERTED_FILE_PREFIX, PNG_EXTENSION, JSON_EXTENSION,
                                 PNG_MIME_TYPE, JSON_MIME_TYPE)
from converter.dto.conversion_dto import (ConversionReportDTO, ConvertedFileDTO, FileUploadDTO,
                                          FileConversionErrorDTO, BatchConversionResultDTO)
from converter.services.text_transform_service import TextTransform, TextTransformError, get_text_transform
from converter.utils.json_transform import transform_value
from converter.utils.payload import detect_payload, dump_json, parse_json
from converter.utils.png import Chunk, create_chunk, is_png, read_chunks, assemble_png
from converter.utils.text_chunks import decode_text_chunk, encode_text_chunk
from converter.utils.utils import create_logger

conversion_service_log = create_logger(__name__, entity_name='CONVERSION_SERVICE', level=context.log_level)

class ConversionServiceError(Exception):
    """Custom exception for conversion service errors."""
    pass

class InvalidPngSignatureError(ConversionServiceError):
    """Exception raised when a buffer does not start with the PNG signature."""
    pass

class UnsupportedFileTypeError(ConversionServiceError):
    """Exception raised for files that are neither PNG nor JSON."""
    pass

class InvalidJsonDocumentError(ConversionServiceError):
    """Exception raised when a JSON document cannot be parsed."""
    pass

# --- Chunk Rewriting ---

def _rewrite_text_chunk(chunk: Chunk, transform: TextTransform) -> Optional[Chunk]:
    """
    Returns the rewritten chunk, or None when the text is not a JSON payload.
    Decode, transform and encode errors propagate to the caller.
    """
    decoded = decode_text_chunk(chunk.type, chunk.data)
    payload = detect_payload(decoded.text)
    if payload is None:
        return None

    conversion_service_log.debug(
        f"Detected {payload.format.value} in {chunk.type_name} chunk (keyword: {decoded.keyword_name or '<empty>'})"
    )
    converted = transform_value(payload.value, transform)
    new_data = encode_text_chunk(chunk.type, decoded.keyword, dump_json(converted))
    return create_chunk(chunk.type, new_data)


def rewrite_chunks(chunks: Iterable[Chunk], transform: TextTransform,
                   report: Optional[ConversionReportDTO] = None) -> List[Chunk]:
    """
    Rewrites the JSON payloads of text chunks and passes every other chunk
    through untouched. A text chunk that fails at any stage is kept as is.
    """
    if report is None:
        report = ConversionReportDTO()

    output = []
    for chunk in chunks:
        report.total_chunks += 1
        if not chunk.crc_is_valid():
            report.bad_crc_chunks += 1
        if not chunk.is_text():
            output.append(chunk)
            continue

        report.text_chunks += 1
        try:
            rewritten = _rewrite_text_chunk(chunk, transform)
        except Exception as e:
            conversion_service_log.warning(f"Keeping original {chunk.type_name} chunk #{report.total_chunks}: {e}")
            report.fallback_chunks += 1
            output.append(chunk)
            continue

        if rewritten is None:
            report.opaque_chunks += 1
            output.append(chunk)
        else:
            report.rewritten_chunks += 1
            output.append(rewritten)
    return output


def rewrite_png_with_report(png_data: bytes, transform: TextTransform) -> Tuple[bytes, ConversionReportDTO]:
    """
    Rewrites the text chunks of a PNG buffer.
    Raises InvalidPngSignatureError before reading any chunk if the signature is wrong.
    """
    if not is_png(png_data):
        raise InvalidPngSignatureError("Buffer is not a valid PNG file (signature mismatch).")

    scan = read_chunks(png_data)
    report = ConversionReportDTO(truncated=scan.truncated, trailing_bytes=scan.trailing_bytes)
    if scan.truncated:
        conversion_service_log.warning(
            f"Chunk stream is truncated after {len(scan.chunks)} chunks, dropping {scan.trailing_bytes} trailing bytes"
        )
    elif scan.trailing_bytes:
        conversion_service_log.debug(f"Dropping {scan.trailing_bytes} trailing bytes after the last chunk")

    chunks = rewrite_chunks(scan.chunks, transform, report)
    return assemble_png(chunks), report


def rewrite_png(png_data: bytes, transform: TextTransform) -> bytes:
    output, _ = rewrite_png_with_report(png_data, transform)
    return output

# --- JSON Documents ---

def convert_json_document(raw: bytes, transform: TextTransform) -> bytes:
    """Converts every string of a JSON document and re-serializes it with two-space indentation."""
    try:
        text = raw.decode('utf-8-sig') if isinstance(raw, bytes) else raw
        document = parse_json(text)
    except ValueError as e:
        raise InvalidJsonDocumentError(f"Invalid JSON document: {e}")

    converted = transform_value(document, transform)
    try:
        output = json.dumps(converted, ensure_ascii=False, indent=2, allow_nan=False)
    except ValueError as e:
        raise InvalidJsonDocumentError(f"JSON document holds a number out of range: {e}")
    return output.encode('utf-8')

# --- File Conversion ---

def get_output_name(file_name: str) -> str:
    return f"{CONVERTED_FILE_PREFIX}{os.path.basename(file_name)}"


def convert_file(file_name: str, content: bytes, transform: TextTransform) -> ConvertedFileDTO:
    """Converts a PNG card or a JSON document, chosen by file extension."""
    extension = os.path.splitext(file_name)[1].lower()
    conversion_service_log.info(f"Service: Converting file '{file_name}'")

    if extension == PNG_EXTENSION:
        output, report = rewrite_png_with_report(content, transform)
        conversion_service_log.info(
            f"Service: '{file_name}': {report.rewritten_chunks}/{report.text_chunks} text chunks rewritten, "
            f"{report.fallback_chunks} kept after errors"
        )
        return ConvertedFileDTO(
            file_name=file_name,
            output_name=get_output_name(file_name),
            mime_type=PNG_MIME_TYPE,
            content=output,
            report=report
        )

    if extension == JSON_EXTENSION:
        output = convert_json_document(content, transform)
        return ConvertedFileDTO(
            file_name=file_name,
            output_name=get_output_name(file_name),
            mime_type=JSON_MIME_TYPE,
            content=output
        )

    raise UnsupportedFileTypeError(f"Unsupported file type: '{file_name}'")


def convert_files(files: List[FileUploadDTO], mode: str) -> BatchConversionResultDTO:
    """
    Converts several files with one conversion mode. Every file is handled on
    its own; failures are collected in the result instead of being raised.
    """
    conversion_service_log.info(f"Service: Converting {len(files)} files (mode: {mode})")
    try:
        transform = get_text_transform(mode)
    except TextTransformError as e:
        conversion_service_log.error(f"Service: Cannot convert files: {e}")
        raise

    result = BatchConversionResultDTO(mode=mode)
    for upload in files:
        try:
            result.converted.append(convert_file(upload.file_name, upload.content, transform))
        except ConversionServiceError as e:
            conversion_service_log.error(f"Service: Skipping '{upload.file_name}': {e}")
            result.errors.append(FileConversionErrorDTO(file_name=upload.file_name, error=str(e)))
        except Exception as e:
            conversion_service_log.exception(f"Service: Unexpected error converting '{upload.file_name}': {e}")
            result.errors.append(FileConversionErrorDTO(file_name=upload.file_name, error=f"Unexpected error: {e}"))

    conversion_service_log.info(
        f"Service: Batch finished, {len(result.converted)} converted, {len(result.errors)} failed"
    )
    return result
