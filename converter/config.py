import os

DEFAULT_CONVERSION_MODE = 's2twp'


class FlaskConfig:
    SQLALCHEMY_ECHO = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv('CONVERTER_DATABASE_URI', 'sqlite:///converter.db')
    MAX_CONTENT_LENGTH = 64 * 1024 * 1024
    
class FlaskTestingConfig:
    TESTING = True
    SQLALCHEMY_ECHO = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
