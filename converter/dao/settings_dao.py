from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from converter.extensions import db
from converter.models.settings import ConverterSettings, SETTINGS_ROW_ID
from converter.utils.utils import create_logger
from converter.context import context
from converter.config import DEFAULT_CONVERSION_MODE

settings_dao_log = create_logger(__name__, entity_name='SETTINGS_DAO', level=context.log_level)

class SettingsDAO:
    """Data Access Object for the converter settings row."""

    @staticmethod
    def _get_session(session: Optional[Session] = None) -> Session:
        """Gets the current session or the default one."""
        return session or db.session

    @staticmethod
    def get_settings(session: Optional[Session] = None) -> Optional[ConverterSettings]:
        """Fetches the settings row, if it exists."""
        settings_dao_log.debug("DAO: Fetching converter settings")
        current_session = SettingsDAO._get_session(session)
        stmt = select(ConverterSettings).where(ConverterSettings.id == SETTINGS_ROW_ID)
        return current_session.execute(stmt).scalar_one_or_none()

    @staticmethod
    def create_settings(session: Optional[Session] = None) -> ConverterSettings:
        """Adds a settings row with default values to the session (no commit)."""
        settings_dao_log.debug("DAO: Creating default converter settings")
        current_session = SettingsDAO._get_session(session)
        settings = ConverterSettings(
            id=SETTINGS_ROW_ID,
            ai_convert_enabled=False,
            ai_convert_mode=DEFAULT_CONVERSION_MODE,
            file_convert_mode=DEFAULT_CONVERSION_MODE
        )
        current_session.add(settings)
        current_session.flush()
        return settings

    @staticmethod
    def update_settings_from_dict(settings: ConverterSettings, data: dict) -> None:
        """Updates the settings instance from a dictionary (no commit)."""
        for key, value in data.items():
            if key == 'id' or not hasattr(settings, key):
                continue
            setattr(settings, key, value)
