from sqlalchemy.orm import Mapped, mapped_column

from converter.extensions import db
from converter.config import DEFAULT_CONVERSION_MODE

SETTINGS_ROW_ID = 1


class ConverterSettings(db.Model):
    """Single-row table holding the converter preferences."""
    __tablename__ = 'converter_settings'

    id: Mapped[int] = mapped_column(db.Integer, primary_key=True, default=SETTINGS_ROW_ID)
    ai_convert_enabled: Mapped[bool] = mapped_column(db.Boolean, nullable=False, default=False)
    ai_convert_mode: Mapped[str] = mapped_column(db.String(10), nullable=False, default=DEFAULT_CONVERSION_MODE)
    file_convert_mode: Mapped[str] = mapped_column(db.String(10), nullable=False, default=DEFAULT_CONVERSION_MODE)
