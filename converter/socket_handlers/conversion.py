import base64
import binascii
from pydantic import ValidationError

from converter.extensions import socketio, log
from converter.events import SocketIOEventType
from converter.constants import CONVERSION_MODES
from converter.context import context
from .common import socketio_unicast
from converter.services import conversion_service, settings_service
from converter.services.text_transform_service import TextTransformError, convert_message
from converter.services.settings_service import SettingsServiceError
from converter.dto.conversion_dto import FileUploadDTO, MessageConversionRequestDTO


@socketio.on(SocketIOEventType.MODE_LIST_REQUEST)
def handle_mode_list_request():
    """Handles request for the available conversion modes."""
    socketio_unicast(SocketIOEventType.MODE_LIST, {
        'modes': list(CONVERSION_MODES),
        'default': context.default_mode
    })


@socketio.on(SocketIOEventType.CONVERT_FILE_REQUEST)
def handle_convert_file_request(req_json):
    """Handles request to convert uploaded PNG cards and JSON documents."""
    try:
        mode = req_json.get('mode') or settings_service.get_settings().file_convert_mode
        uploads = [
            FileUploadDTO(
                file_name=item['file_name'],
                content=base64.b64decode(item['content'], validate=True)
            )
            for item in req_json['files']
        ]
        result = conversion_service.convert_files(uploads, mode)
        socketio_unicast(SocketIOEventType.CONVERT_FILE, {
            'message': 'success',
            'mode': result.mode,
            'files': [converted.to_json_dict() for converted in result.converted],
            'errors': [error.model_dump(mode='json') for error in result.errors]
        })
    except (TextTransformError, SettingsServiceError) as te:
        log.error(f"Error converting files: {te}")
        socketio_unicast(SocketIOEventType.CONVERT_FILE, {'error': str(te)})
    except (binascii.Error, ValueError) as ve:
        log.error(f"Invalid file payload in convert request: {ve}")
        socketio_unicast(SocketIOEventType.CONVERT_FILE, {'error': f"Invalid file payload: {ve}"})
    except KeyError as ke:
        log.error(f"Missing key in convert request: {ke}")
        socketio_unicast(SocketIOEventType.CONVERT_FILE, {'error': f"Missing required field: {ke}"})
    except Exception as e:
        log.exception(f"Unexpected error handling convert request: {e}")
        socketio_unicast(SocketIOEventType.CONVERT_FILE, {'error': "An unexpected server error occurred."})


@socketio.on(SocketIOEventType.CONVERT_MESSAGE_REQUEST)
def handle_convert_message_request(req_json):
    """Handles request to convert a single message with an explicit mode."""
    try:
        request_dto = MessageConversionRequestDTO(**req_json)
        result = convert_message(request_dto.text, request_dto.mode)
        socketio_unicast(SocketIOEventType.CONVERT_MESSAGE, {
            'message': 'success',
            **result.model_dump(mode='json')
        })
    except ValidationError as pve:
        log.error(f"DTO Validation error converting message: {pve}")
        error_summary = "; ".join([f"{err['loc'][0] if err['loc'] else 'base'}: {err['msg']}" for err in pve.errors()])
        socketio_unicast(SocketIOEventType.CONVERT_MESSAGE, {'error': f"Validation Error: {error_summary}"})
    except TextTransformError as te:
        log.error(f"Text transform error converting message: {te}")
        socketio_unicast(SocketIOEventType.CONVERT_MESSAGE, {'error': str(te)})
    except Exception as e:
        log.exception(f"Unexpected error handling message conversion: {e}")
        socketio_unicast(SocketIOEventType.CONVERT_MESSAGE, {'error': "An unexpected server error occurred."})


@socketio.on(SocketIOEventType.CONVERT_AI_MESSAGE_REQUEST)
def handle_convert_ai_message_request(req_json):
    """Handles a finished AI response; converts it if AI conversion is enabled."""
    try:
        result = settings_service.convert_ai_message(req_json['text'])
        socketio_unicast(SocketIOEventType.CONVERT_AI_MESSAGE, {
            'message': 'success',
            **result.model_dump(mode='json')
        })
    except (TextTransformError, SettingsServiceError) as e:
        log.error(f"Error converting AI message: {e}")
        socketio_unicast(SocketIOEventType.CONVERT_AI_MESSAGE, {'error': str(e)})
    except KeyError as ke:
        log.error(f"Missing key in AI message request: {ke}")
        socketio_unicast(SocketIOEventType.CONVERT_AI_MESSAGE, {'error': f"Missing required field: {ke}"})
    except Exception as e:
        log.exception(f"Unexpected error handling AI message conversion: {e}")
        socketio_unicast(SocketIOEventType.CONVERT_AI_MESSAGE, {'error': "An unexpected server error occurred."})
