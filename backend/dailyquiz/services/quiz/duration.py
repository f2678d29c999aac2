import math
import re

# Optional "N day(s)" prefix as rendered by PostgreSQL intervals, then H:M:S[.fff]
_DURATION_RE = re.compile(r'(?:(\d+)\s+days?\s+)?(\d+):(\d+):(\d+(?:\.\d*)?)')


def parse_duration(text) -> float:
    """Convert ``HH:MM:SS[.fff]`` (optionally ``N days HH:MM:SS``) to milliseconds.

    Missing or unparseable input counts as zero elapsed time.
    """
    if not text:
        return 0
    match = _DURATION_RE.search(str(text))
    if not match:
        return 0
    days, hours, minutes, seconds = match.groups()
    total_hours = int(days or 0) * 24 + int(hours)
    return (total_hours * 3600 + int(minutes) * 60 + float(seconds)) * 1000


def format_duration(ms) -> str:
    """Render milliseconds as ``HH:MM:SS``, dropping fractional seconds."""
    total_seconds = int(math.floor(max(ms, 0) / 1000))
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
