import threading
from typing import Dict

from converter.context import context
from converter.constants import CONVERSION_MODES
from converter.dto.conversion_dto import MessageConversionResultDTO
from converter.utils.json_transform import TextTransform
from converter.utils.utils import create_logger

text_transform_log = create_logger(__name__, entity_name='TEXT_TRANSFORM', level=context.log_level)

_transforms: Dict[str, TextTransform] = {}
_transforms_lock = threading.Lock()


class TextTransformError(Exception):
    """Raised when a conversion mode cannot be turned into a text transform."""
    pass


def validate_mode(mode: str) -> str:
    """Returns the mode if it is a known OpenCC profile, raises otherwise."""
    if mode not in CONVERSION_MODES:
        raise TextTransformError(f"Unknown conversion mode '{mode}'. Expected one of: {', '.join(CONVERSION_MODES)}")
    return mode


def _build_opencc_transform(mode: str) -> TextTransform:
    try:
        import opencc
    except ImportError as e:
        raise TextTransformError(f"OpenCC is not available: {e}")

    try:
        converter = opencc.OpenCC(mode)
    except Exception as e:
        raise TextTransformError(f"Failed to load OpenCC profile '{mode}': {e}")
    return converter.convert


def get_text_transform(mode: str) -> TextTransform:
    """
    Returns the string transform for an OpenCC conversion mode.
    Converters are built once per mode and reused.
    """
    validate_mode(mode)
    with _transforms_lock:
        transform = _transforms.get(mode)
        if transform is None:
            text_transform_log.info(f"Loading OpenCC profile '{mode}'")
            transform = _build_opencc_transform(mode)
            _transforms[mode] = transform
    return transform


def register_text_transform(mode: str, transform: TextTransform) -> None:
    """Installs a transform for a mode, replacing the OpenCC converter."""
    validate_mode(mode)
    with _transforms_lock:
        _transforms[mode] = transform


def clear_text_transforms() -> None:
    with _transforms_lock:
        _transforms.clear()


def convert_message(text: str, mode: str) -> MessageConversionResultDTO:
    """Converts a single chat message with the given mode."""
    validate_mode(mode)
    if not text:
        return MessageConversionResultDTO(mode=mode, original=text, converted=text, changed=False)

    transform = get_text_transform(mode)
    converted = transform(text)
    changed = converted != text
    if changed:
        text_transform_log.debug(f"Converted message ({mode}), {len(text)} chars")
    return MessageConversionResultDTO(mode=mode, original=text, converted=converted, changed=changed)
