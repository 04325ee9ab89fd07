from sqlalchemy.exc import SQLAlchemyError

from converter.extensions import db
from converter.context import context
from converter.constants import CONVERSION_MODES
from converter.config import DEFAULT_CONVERSION_MODE
from converter.dao.settings_dao import SettingsDAO
from converter.dto.settings_dto import SettingsDTO, SettingsUpdateDTO
from converter.dto.conversion_dto import MessageConversionResultDTO
from converter.models.settings import ConverterSettings
from converter.services.text_transform_service import convert_message
from converter.utils.utils import create_logger

settings_service_log = create_logger(__name__, entity_name='SETTINGS_SERVICE', level=context.log_level)

class SettingsServiceError(Exception):
    """Custom exception for settings service errors."""
    pass

# --- Helper Functions ---

def _valid_mode_or_default(mode: str) -> str:
    return mode if mode in CONVERSION_MODES else DEFAULT_CONVERSION_MODE

def _map_settings_model_to_dto(settings: ConverterSettings) -> SettingsDTO:
    """Maps the settings model to a DTO, replacing unknown modes with the default one."""
    return SettingsDTO(
        ai_convert_enabled=bool(settings.ai_convert_enabled),
        ai_convert_mode=_valid_mode_or_default(settings.ai_convert_mode),
        file_convert_mode=_valid_mode_or_default(settings.file_convert_mode)
    )

def _get_or_create_settings() -> ConverterSettings:
    settings = SettingsDAO.get_settings()
    if settings is None:
        settings_service_log.info("Service: No settings stored yet, creating defaults")
        settings = SettingsDAO.create_settings()
        db.session.commit()
    return settings

# --- Settings Service Functions ---

def get_settings() -> SettingsDTO:
    """Returns the stored settings, creating the default row on first access."""
    try:
        return _map_settings_model_to_dto(_get_or_create_settings())
    except SQLAlchemyError as e:
        db.session.rollback()
        settings_service_log.error(f"Service: Error loading settings: {e}")
        raise SettingsServiceError(f"Could not load settings: {e}")

def update_settings(update_data: SettingsUpdateDTO) -> SettingsDTO:
    """Persists the provided settings fields."""
    update_dict = update_data.model_dump(exclude_none=True)
    settings_service_log.info(f"Service: Updating settings: {update_dict}")
    try:
        settings = _get_or_create_settings()
        SettingsDAO.update_settings_from_dict(settings, update_dict)
        db.session.commit()
        db.session.refresh(settings)
        return _map_settings_model_to_dto(settings)
    except SQLAlchemyError as e:
        db.session.rollback()
        settings_service_log.error(f"Service: Error updating settings: {e}")
        raise SettingsServiceError(f"Could not update settings: {e}")

def convert_ai_message(text: str) -> MessageConversionResultDTO:
    """
    Converts an AI response with the stored mode when AI conversion is enabled.
    Otherwise the text comes back unchanged.
    """
    settings = get_settings()
    if not settings.ai_convert_enabled:
        return MessageConversionResultDTO(
            mode=settings.ai_convert_mode, original=text, converted=text, changed=False
        )
    return convert_message(text, settings.ai_convert_mode)
