import pytest
from converter import create_app
from converter.extensions import db
from converter.config import FlaskTestingConfig
            
@pytest.fixture(scope='session')
def app():
    flask_app = create_app(FlaskTestingConfig)
    
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()

@pytest.fixture(scope='session')
def test_client(app):
    return app.test_client()
