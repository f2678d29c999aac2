from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import json
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()

SEED_WORDS = [
    # word, learning content, accepted answer
    ('cat', 'A small domesticated feline.', 'gato'),
    ('dog', 'A domesticated canine.', 'perro'),
    ('house', 'A building for people to live in.', 'casa'),
    ('water', 'A clear liquid essential for life.', 'agua'),
    ('tree', 'A tall perennial plant with a trunk.', 'árbol'),
]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', []))

    from dailyquiz.main import main
    flask_app.register_blueprint(main)

    from dailyquiz.api.quiz import quiz
    # Mount quiz routes under /api to match the frontend client
    flask_app.register_blueprint(quiz, url_prefix='/api')

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from dailyquiz.models import Word, Question
        from dailyquiz.store import RecordStore
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            store = RecordStore()
            answers = [answer for _, _, answer in SEED_WORDS]
            for word, content, answer in SEED_WORDS:
                store.insert(Word, {'word': word, 'content': content})
                options = [answer] + [a for a in answers if a != answer][:3]
                store.insert(Question, {'word': word, 'correct': answer, 'options': json.dumps(sorted(options))})

            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
