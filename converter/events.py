class SocketIOEventType:
    # receivable events
    CONNECT = 'connect'
    PING = 'ping'
    ERROR = 'error'

    CONVERT_FILE_REQUEST = 'convert_file_request'
    CONVERT_MESSAGE_REQUEST = 'convert_message_request'
    CONVERT_AI_MESSAGE_REQUEST = 'convert_ai_message_request'
    MODE_LIST_REQUEST = 'mode_list_request'

    SETTINGS_REQUEST = 'settings_request'
    SETTINGS_SAVE_REQUEST = 'settings_save_request'


    # sendable events
    PONG = 'pong'

    CONVERT_FILE = 'convert_file'
    CONVERT_MESSAGE = 'convert_message'
    CONVERT_AI_MESSAGE = 'convert_ai_message'
    MODE_LIST = 'mode_list'

    SETTINGS = 'settings'
    SETTINGS_SAVE = 'settings_save'
