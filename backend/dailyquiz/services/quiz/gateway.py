from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from flask import current_app

from dailyquiz.models import Question, Word
from .phase import Phase, current_phase
from .ranking import publish_ranks, reset_ranks
from .submission import apply_submission, parse_submission


def handle_read(store, email: str, now: datetime, config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return the content for the phase active at ``now``.

    Learning clears stale ranks before listing words, quiz lists the
    questions without their accepted answers, and ranking recomputes and
    persists the leaderboard.
    """
    config = config or {}
    window = current_phase(
        now,
        quiz_start=float(config.get('QUIZ_START_HOUR', 20.0)),
        ranking_start=float(config.get('RANKING_START_HOUR', 20.5)),
    )

    if window.phase is Phase.LEARNING:
        reset_ranks(store)
        words = store.select_all(Word, Word.id)
        return {
            'type': 'words',
            'data': [w.to_dict() for w in words],
            'message': window.label,
        }

    if window.phase is Phase.QUIZ:
        questions = store.select_all(Question, Question.id)
        return {
            'type': 'questions',
            'data': [q.to_dict(include_answer=False) for q in questions],
            'message': window.label,
        }

    leaderboard = publish_ranks(store)
    user = next((u for u in leaderboard if u['email'] == email), None)
    return {
        'type': 'rankings',
        'data': {
            'user': user,
            'leaderboard': leaderboard,
        },
        'message': window.label,
    }


def handle_submit(store, payload) -> Dict[str, Any]:
    """Validate, score and persist one quiz attempt."""
    request = parse_submission(payload)
    questions = [q.to_dict() for q in store.select_all(Question, Question.id)]

    result = store.merge_user(
        request.email,
        lambda existing: apply_submission(existing, request, questions),
    )
    current_app.logger.info(
        f"[submit] email={request.email} correct={result.correct_count}/{len(request.answers)} "
        f"time={result.interval} total_correct={result.record['number_of_correct_ans']}"
    )
    return {
        'success': True,
        'correctAnswers': result.correct_count,
        'totalQuestions': len(request.answers),
        'timeTaken': result.interval,
        'message': 'Answers submitted successfully',
    }
