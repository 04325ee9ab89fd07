from typing import Any, Optional
from pydantic import BaseModel, field_validator, model_validator

from converter.constants import CONVERSION_MODES


class SettingsDTO(BaseModel):
    ai_convert_enabled: bool
    ai_convert_mode: str
    file_convert_mode: str

    model_config = {"from_attributes": True}

class SettingsUpdateDTO(BaseModel):
    ai_convert_enabled: Optional[bool] = None
    ai_convert_mode: Optional[str] = None
    file_convert_mode: Optional[str] = None

    @field_validator('ai_convert_mode', 'file_convert_mode')
    @classmethod
    def check_mode(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in CONVERSION_MODES:
            raise ValueError(f"Unknown conversion mode: {v}")
        return v

    @model_validator(mode='before')
    @classmethod
    def check_at_least_one_value(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if not data or all(v is None for v in data.values()):
                 raise ValueError("At least one field must be provided for update")
        return data
