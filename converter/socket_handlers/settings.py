from pydantic import ValidationError

from converter.extensions import socketio, log
from converter.events import SocketIOEventType
from .common import socketio_unicast
from converter.services import settings_service
from converter.services.settings_service import SettingsServiceError
from converter.dto.settings_dto import SettingsUpdateDTO

@socketio.on(SocketIOEventType.SETTINGS_REQUEST)
def handle_settings_request():
    """Handles request for the stored converter settings."""
    try:
        settings_dto = settings_service.get_settings()
        socketio_unicast(SocketIOEventType.SETTINGS, {
            'message': 'success',
            'settings': settings_dto.model_dump(mode='json'),
        })
    except SettingsServiceError as e:
        log.error(f"Error handling settings request: {e}")
        socketio_unicast(SocketIOEventType.SETTINGS, {'error': str(e)})
    except Exception as e:
        log.exception(f"Unexpected error handling settings request: {e}")
        socketio_unicast(SocketIOEventType.SETTINGS, {'error': f"An unexpected error occurred: {str(e)}"})


@socketio.on(SocketIOEventType.SETTINGS_SAVE_REQUEST)
def handle_settings_save_request(req_json):
    """Handles request to update the converter settings."""
    try:
        update_dto = SettingsUpdateDTO(**req_json)
        settings_dto = settings_service.update_settings(update_dto)
        socketio_unicast(SocketIOEventType.SETTINGS_SAVE, {
            'message': 'success',
            'settings': settings_dto.model_dump(mode='json'),
        })
    except ValidationError as pve:
         log.error(f"DTO Validation error saving settings: {pve}")
         error_summary = "; ".join([f"{err['loc'][0] if err['loc'] else 'base'}: {err['msg']}" for err in pve.errors()])
         socketio_unicast(SocketIOEventType.SETTINGS_SAVE, {'error': f"Validation Error: {error_summary}"})
    except SettingsServiceError as e:
         log.error(f"Service error saving settings: {e}")
         socketio_unicast(SocketIOEventType.SETTINGS_SAVE, {'error': str(e)})
    except Exception as e:
        log.exception(f"Unexpected error handling settings save request: {e}")
        socketio_unicast(SocketIOEventType.SETTINGS_SAVE, {'error': "An unexpected server error occurred."})
