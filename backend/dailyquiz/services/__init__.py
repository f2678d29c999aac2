"""Quiz domain services: phases, durations, ranking and submissions.

This package contains pure(ish) domain logic that should be imported by
HTTP routes and CLI commands, keeping transport concerns separated from
the scoring rules.
"""
