import base64
import io
import json

import pytest
from converter.services.text_transform_service import register_text_transform, clear_text_transforms
from png_helpers import PNG_SIGNATURE, make_chunk, make_png


@pytest.fixture(autouse=True)
def upper_transform(app):
    register_text_transform('s2t', str.upper)
    yield
    clear_text_transforms()


def test_list_modes(test_client):
    response = test_client.get('/modes')
    assert response.status_code == 200
    assert response.get_json()['default'] == 's2twp'


def test_convert_single_png_returns_attachment(test_client):
    card = make_png(make_chunk(b'tEXt', b'chara\x00' + base64.b64encode(b'{"a":"b"}')))
    response = test_client.post('/convert', data={
        'mode': 's2t',
        'files': (io.BytesIO(card), 'card.png'),
    }, content_type='multipart/form-data')

    assert response.status_code == 200
    assert response.mimetype == 'image/png'
    assert 'converted-card.png' in response.headers['Content-Disposition']
    assert response.data.startswith(PNG_SIGNATURE)
    assert base64.b64encode(b'{"a":"B"}') in response.data


def test_convert_several_files_returns_summary(test_client):
    response = test_client.post('/convert', data={
        'mode': 's2t',
        'files': [
            (io.BytesIO(b'{"k":"v"}'), 'preset.json'),
            (io.BytesIO(b'plain'), 'notes.txt'),
        ],
    }, content_type='multipart/form-data')

    assert response.status_code == 200
    body = response.get_json()
    assert [f['output_name'] for f in body['files']] == ['converted-preset.json']
    assert json.loads(base64.b64decode(body['files'][0]['content'])) == {'k': 'V'}
    assert body['errors'][0]['file_name'] == 'notes.txt'


def test_convert_without_files(test_client):
    response = test_client.post('/convert', data={'mode': 's2t'}, content_type='multipart/form-data')
    assert response.status_code == 400


def test_convert_unknown_mode(test_client):
    response = test_client.post('/convert', data={
        'mode': 'bogus',
        'files': (io.BytesIO(b'[]'), 'a.json'),
    }, content_type='multipart/form-data')
    assert response.status_code == 400
    assert 'Unknown conversion mode' in response.get_json()['error']
