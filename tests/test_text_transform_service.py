import pytest

from converter.constants import CONVERSION_MODES
from converter.services.text_transform_service import (TextTransformError, validate_mode,
                                                       get_text_transform, register_text_transform,
                                                       clear_text_transforms, convert_message)


@pytest.fixture(autouse=True)
def clean_transforms():
    clear_text_transforms()
    yield
    clear_text_transforms()


def test_validate_mode():
    for mode in CONVERSION_MODES:
        assert validate_mode(mode) == mode
    with pytest.raises(TextTransformError):
        validate_mode('s2x')


def test_registered_transform_is_returned():
    register_text_transform('t2s', str.lower)
    assert get_text_transform('t2s') is str.lower


def test_register_rejects_unknown_mode():
    with pytest.raises(TextTransformError):
        register_text_transform('nope', str.lower)


def test_convert_message_reports_change():
    register_text_transform('s2tw', lambda s: s.replace('伺', '服'))
    result = convert_message('伺服器', 's2tw')
    assert result.converted == '服服器'
    assert result.original == '伺服器'
    assert result.changed

    result = convert_message('hello', 's2tw')
    assert result.converted == 'hello'
    assert not result.changed


def test_convert_message_empty_text():
    result = convert_message('', 's2twp')
    assert result.converted == ''
    assert not result.changed


def test_convert_message_unknown_mode():
    with pytest.raises(TextTransformError):
        convert_message('text', 'zz')


def test_opencc_profiles():
    pytest.importorskip('opencc')
    assert get_text_transform('s2t')('汉字') == '漢字'
    assert get_text_transform('t2s')('漢字') == '汉字'
    assert get_text_transform('s2twp')('软件') == '軟體'
    assert get_text_transform('s2t') is get_text_transform('s2t')
