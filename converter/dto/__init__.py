# This file marks the dto directory as a Python package.

from .conversion_dto import (
    ConversionReportDTO, FileUploadDTO, ConvertedFileDTO, FileConversionErrorDTO,
    BatchConversionResultDTO, MessageConversionRequestDTO, MessageConversionResultDTO
)

from .settings_dto import SettingsDTO, SettingsUpdateDTO

__all__ = [
    # Conversion DTOs
    'ConversionReportDTO', 'FileUploadDTO', 'ConvertedFileDTO', 'FileConversionErrorDTO',
    'BatchConversionResultDTO', 'MessageConversionRequestDTO', 'MessageConversionResultDTO',
    # Settings DTOs
    'SettingsDTO', 'SettingsUpdateDTO'
]
