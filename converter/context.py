import logging
from dataclasses import dataclass

from converter.config import DEFAULT_CONVERSION_MODE


@dataclass
class Context:
    default_mode: str = DEFAULT_CONVERSION_MODE
    
    log_level: int = logging.INFO
    
context = Context()
