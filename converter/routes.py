import io
from flask import Blueprint, jsonify, request, send_file

from converter.constants import CONVERSION_MODES
from converter.context import context
from converter.dto.conversion_dto import FileUploadDTO
from converter.extensions import log
from converter.services import conversion_service, settings_service
from converter.services.text_transform_service import TextTransformError
from converter.services.settings_service import SettingsServiceError

main_bp = Blueprint('main', __name__)


@main_bp.route('/modes')
def list_modes():
    return jsonify({'modes': list(CONVERSION_MODES), 'default': context.default_mode})

@main_bp.route('/convert', methods=['POST'])
def convert():
    """
    Converts the uploaded `files`. A single successful file is sent back as an
    attachment; otherwise a JSON summary with Base64 contents is returned.
    """
    uploads = [
        FileUploadDTO(file_name=storage.filename or 'upload', content=storage.read())
        for storage in request.files.getlist('files')
    ]
    if not uploads:
        return jsonify({'error': "No files uploaded."}), 400

    try:
        mode = request.form.get('mode') or settings_service.get_settings().file_convert_mode
        result = conversion_service.convert_files(uploads, mode)
    except (TextTransformError, SettingsServiceError) as e:
        log.error(f"Error on /convert: {e}")
        return jsonify({'error': str(e)}), 400

    if len(uploads) == 1 and len(result.converted) == 1:
        converted = result.converted[0]
        return send_file(
            io.BytesIO(converted.content),
            mimetype=converted.mime_type,
            as_attachment=True,
            download_name=converted.output_name
        )

    status = 200 if result.converted else 400
    return jsonify({
        'mode': result.mode,
        'files': [converted.to_json_dict() for converted in result.converted],
        'errors': [error.model_dump(mode='json') for error in result.errors]
    }), status
