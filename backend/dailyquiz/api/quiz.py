from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from dailyquiz.errors import CollaboratorError, ValidationError
from dailyquiz.services.quiz import handle_read, handle_submit
from dailyquiz.store import RecordStore


quiz = Blueprint('quiz', __name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@quiz.route('/data/<string:email>', methods=['GET'])
def get_data(email):
    try:
        payload = handle_read(RecordStore(), email, utcnow(), current_app.config)
    except CollaboratorError as exc:
        current_app.logger.error(f"[data] email={email} failed: {exc.message}")
        return jsonify(exc.to_dict()), exc.status_code
    return jsonify(payload)


@quiz.route('/submit', methods=['POST'])
def submit():
    data = request.get_json(silent=True)
    try:
        payload = handle_submit(RecordStore(), data)
    except ValidationError as exc:
        return jsonify(exc.to_dict()), exc.status_code
    except CollaboratorError as exc:
        current_app.logger.error(f"[submit] failed: {exc.message}")
        return jsonify(exc.to_dict()), exc.status_code
    return jsonify(payload)
