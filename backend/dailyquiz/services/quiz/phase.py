from datetime import datetime, timezone
from enum import Enum
from typing import NamedTuple


class Phase(str, Enum):
    LEARNING = 'learning'
    QUIZ = 'quiz'
    RANKING = 'ranking'


class PhaseWindow(NamedTuple):
    phase: Phase
    label: str


def _hour_label(hour: float, minutes: bool = False) -> str:
    h, m = divmod(int(round(hour * 60)), 60)
    suffix = 'AM' if h % 24 < 12 else 'PM'
    h12 = h % 12 or 12
    return f"{h12}:{m:02d} {suffix}" if m or minutes else f"{h12} {suffix}"


def utc_hour(now: datetime) -> float:
    """Hour of day in UTC as a real number. Naive datetimes are taken as UTC."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.hour + now.minute / 60 + (now.second + now.microsecond / 1e6) / 3600


def current_phase(now: datetime, quiz_start: float = 20.0, ranking_start: float = 20.5) -> PhaseWindow:
    """Select the active phase for ``now``.

    Windows are half-open: ``[0, quiz_start)`` learning, ``[quiz_start,
    ranking_start)`` quiz, ``[ranking_start, 24)`` ranking.
    """
    if not 0 <= quiz_start <= ranking_start <= 24:
        raise ValueError(f"invalid phase boundaries quiz_start={quiz_start} ranking_start={ranking_start}")

    hour = utc_hour(now)
    if hour < quiz_start:
        return PhaseWindow(
            Phase.LEARNING,
            f"Words learning period (12 AM - {_hour_label(quiz_start)} UTC)",
        )
    if hour < ranking_start:
        # both ends in H:MM form once either boundary falls mid-hour
        show_minutes = bool(quiz_start % 1 or ranking_start % 1)
        return PhaseWindow(
            Phase.QUIZ,
            f"Quiz period ({_hour_label(quiz_start, show_minutes)} - {_hour_label(ranking_start, show_minutes)} UTC)",
        )
    return PhaseWindow(
        Phase.RANKING,
        f"Rankings period ({_hour_label(ranking_start)} - 12 AM UTC)",
    )
