from .settings import ConverterSettings, SETTINGS_ROW_ID

__all__ = [
    'ConverterSettings',
    'SETTINGS_ROW_ID',
]
