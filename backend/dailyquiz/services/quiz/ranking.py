from typing import Any, Dict, Iterable, List

from flask import current_app

from dailyquiz.models import UserRecord
from .duration import parse_duration


def compute_ranks(users: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Order users for the leaderboard and assign 1-based ranks.

    Most correct answers first; ties go to the lower cumulative time. The
    sort is stable, so rows still tied keep their input order.
    """
    ordered = sorted(
        users,
        key=lambda u: (-int(u.get('number_of_correct_ans') or 0), parse_duration(u.get('time'))),
    )
    return [dict(user, rank=index + 1) for index, user in enumerate(ordered)]


def publish_ranks(store) -> List[Dict[str, Any]]:
    """Recompute the leaderboard and persist every user's rank in one batch."""
    users = [u.to_dict() for u in store.select_all(UserRecord, UserRecord.id)]
    ranked = compute_ranks(users)
    store.bulk_update_ranks(ranked)
    current_app.logger.info(f"[rank-publish] users={len(ranked)}")
    return ranked


def reset_ranks(store) -> int:
    """Clear ranks left over from a previous ranking window."""
    cleared = store.update_where(UserRecord, {'rank': 0}, UserRecord.rank != 0)
    if cleared:
        current_app.logger.info(f"[rank-reset] cleared={cleared}")
    return cleared
