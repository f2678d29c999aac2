from .duration import format_duration, parse_duration
from .gateway import handle_read, handle_submit
from .phase import Phase, PhaseWindow, current_phase
from .ranking import compute_ranks, publish_ranks, reset_ranks
from .submission import SubmissionRequest, SubmissionResult, apply_submission

__all__ = [
    'Phase',
    'PhaseWindow',
    'SubmissionRequest',
    'SubmissionResult',
    'apply_submission',
    'compute_ranks',
    'current_phase',
    'format_duration',
    'handle_read',
    'handle_submit',
    'parse_duration',
    'publish_ranks',
    'reset_ranks',
]
