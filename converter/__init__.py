import os
import logging
from flask import Flask
from converter.config import FlaskConfig
from converter.context import context
from converter.extensions import db, migrate, socketio, log

def create_app(config=FlaskConfig):
    app = Flask(__name__)
    app.config.from_object(config)
    db.init_app(app)
    migrate.init_app(app, db)
    socketio.init_app(app)
    
    app_log_level_str = os.getenv("APP_LOG_LEVEL", "INFO").upper()
    flask_log_level_str = os.getenv("FLASK_LOG_LEVEL", "WARNING").upper()
    log_level_map = logging.getLevelNamesMapping()
    
    context.log_level = log_level_map.get(app_log_level_str, logging.INFO)
    log.setLevel(log_level_map.get(flask_log_level_str, logging.WARNING))

    from . import models, socket_handlers
    socket_handlers.init_app(app)
    
    from .routes import main_bp
    app.register_blueprint(main_bp)
    
    return app
