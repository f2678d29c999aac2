from dailyquiz import db
import json


class UserRecord(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    # Column names follow the public API payload
    correct_count = db.Column('number_of_correct_ans', db.Integer, default=0, nullable=False)
    elapsed = db.Column('time', db.String(32), default='00:00:00', nullable=False)
    rank = db.Column(db.Integer, default=0, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'number_of_correct_ans': self.correct_count,
            'time': self.elapsed,
            'rank': self.rank,
        }


class Word(db.Model):
    __tablename__ = 'words'
    id = db.Column(db.Integer, primary_key=True)
    word = db.Column(db.String(128), unique=True, nullable=False, index=True)
    content = db.Column(db.Text, nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'word': self.word,
            'content': self.content,
        }


class Question(db.Model):
    __tablename__ = 'questions'
    id = db.Column(db.Integer, primary_key=True)
    word = db.Column(db.String(128), nullable=False, index=True)
    correct = db.Column(db.String(255), nullable=False)
    options = db.Column(db.Text, nullable=True)  # JSON-encoded list of choices

    def to_dict(self, include_answer=True):
        try:
            options = json.loads(self.options) if self.options else None
        except ValueError:
            options = None
        data = {
            'id': self.id,
            'word': self.word,
            'options': options,
        }
        if include_answer:
            data['correct'] = self.correct
        return data
