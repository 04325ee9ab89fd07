import base64
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from converter.constants import CONVERSION_MODES
from converter.config import DEFAULT_CONVERSION_MODE


def _check_mode(v: str) -> str:
    if v not in CONVERSION_MODES:
        raise ValueError(f"Unknown conversion mode: {v}")
    return v

# --- Report DTOs ---

class ConversionReportDTO(BaseModel):
    total_chunks: int = 0
    text_chunks: int = 0
    rewritten_chunks: int = 0
    opaque_chunks: int = 0
    fallback_chunks: int = 0
    bad_crc_chunks: int = 0
    truncated: bool = False
    trailing_bytes: int = 0

# --- File DTOs ---

class FileUploadDTO(BaseModel):
    file_name: str = Field(..., min_length=1, max_length=4096)
    content: bytes

class ConvertedFileDTO(BaseModel):
    file_name: str
    output_name: str
    mime_type: str
    content: bytes
    report: Optional[ConversionReportDTO] = None

    def to_json_dict(self) -> dict:
        """Dumps the DTO with its content as standard Base64."""
        data = self.model_dump(mode='json', exclude={'content'})
        data['content'] = base64.b64encode(self.content).decode('ascii')
        return data

class FileConversionErrorDTO(BaseModel):
    file_name: str
    error: str

class BatchConversionResultDTO(BaseModel):
    mode: str
    converted: List[ConvertedFileDTO] = Field(default_factory=list)
    errors: List[FileConversionErrorDTO] = Field(default_factory=list)

# --- Message DTOs ---

class MessageConversionRequestDTO(BaseModel):
    text: str
    mode: str = DEFAULT_CONVERSION_MODE

    @field_validator('mode')
    @classmethod
    def check_mode(cls, v: str) -> str:
        return _check_mode(v)

class MessageConversionResultDTO(BaseModel):
    mode: str
    original: str
    converted: str
    changed: bool
