import os
import sys
from datetime import datetime, timezone

import pytest

# Ensure the backend root (containing the `dailyquiz` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from dailyquiz import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    QUIZ_START_HOUR = 20.0
    RANKING_START_HOUR = 20.5
    CORS_ORIGINS = ['http://localhost:5173']


LEARNING_TIME = datetime(2026, 10, 17, 9, 15, tzinfo=timezone.utc)
QUIZ_TIME = datetime(2026, 10, 17, 20, 10, tzinfo=timezone.utc)
RANKING_TIME = datetime(2026, 10, 17, 21, 0, tzinfo=timezone.utc)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import dailyquiz.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store(flask_app):
    from dailyquiz.store import RecordStore
    return RecordStore()


@pytest.fixture()
def seeded(flask_app):
    from dailyquiz.models import Word, Question
    db.session.add_all([
        Word(word='cat', content='A small domesticated feline.'),
        Word(word='dog', content='A domesticated canine.'),
        Question(word='cat', correct='gato', options='["gato", "perro"]'),
        Question(word='dog', correct='gato', options='["gato", "perro"]'),
    ])
    db.session.commit()


@pytest.fixture()
def freeze_time(monkeypatch):
    """Pin the clock the quiz routes read."""
    def _freeze(moment):
        monkeypatch.setattr('dailyquiz.api.quiz.utcnow', lambda: moment)
    return _freeze
