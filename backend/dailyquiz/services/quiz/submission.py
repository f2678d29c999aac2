import math
from typing import Any, Dict, Iterable, Mapping, NamedTuple, Optional

from dailyquiz.errors import ValidationError
from .duration import format_duration, parse_duration


class SubmissionRequest(NamedTuple):
    email: str
    answers: Mapping[str, Any]
    times: Mapping[str, float]


class SubmissionResult(NamedTuple):
    record: Dict[str, Any]
    correct_count: int
    interval: str


def _to_ms(word, value) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid time for '{word}'")
    try:
        ms = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid time for '{word}'")
    if not math.isfinite(ms) or ms < 0:
        raise ValidationError(f"Invalid time for '{word}'")
    return ms


def parse_submission(payload) -> SubmissionRequest:
    """Build a SubmissionRequest from a decoded JSON body.

    Raises ValidationError when email, answers or time is missing or has the
    wrong shape. Empty answer/time objects are accepted. Only time entries
    for answered words are kept.
    """
    if not isinstance(payload, dict):
        payload = {}
    email = payload.get('email')
    answers = payload.get('answers')
    times = payload.get('time')
    if not email or answers is None or times is None:
        raise ValidationError('Missing required fields: email, answers, time')
    if not isinstance(email, str):
        raise ValidationError('email must be a string')
    if not isinstance(answers, dict) or not isinstance(times, dict):
        raise ValidationError('answers and time must be objects')
    # time entries without an answer are dropped unchecked
    normalized = {
        str(word): _to_ms(word, value)
        for word, value in times.items()
        if word in answers and value is not None
    }
    return SubmissionRequest(email=email, answers=answers, times=normalized)


def apply_submission(
    existing: Optional[Dict[str, Any]],
    request: SubmissionRequest,
    questions: Iterable[Dict[str, Any]],
) -> SubmissionResult:
    """Score one attempt and merge it into the user's cumulative record.

    Only words present in ``answers`` contribute time; a time entry without a
    matching answer is ignored. Answers for unknown words score nothing.
    """
    accepted = {}
    for q in questions:
        # first question wins for a repeated word
        accepted.setdefault(q['word'], q['correct'])

    correct_count = 0
    total_ms = 0.0
    for word, answer in request.answers.items():
        if word in accepted and accepted[word] == answer:
            correct_count += 1
        total_ms += request.times.get(word, 0)

    interval = format_duration(total_ms)

    if existing:
        record = dict(existing)
        record['number_of_correct_ans'] = int(existing.get('number_of_correct_ans') or 0) + correct_count
        record['time'] = format_duration(parse_duration(existing.get('time')) + total_ms)
    else:
        record = {
            'email': request.email,
            'number_of_correct_ans': correct_count,
            'time': interval,
            'rank': 0,
        }
    return SubmissionResult(record=record, correct_count=correct_count, interval=interval)
