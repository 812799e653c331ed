"""
Terminal build states reported by Travis CI.
"""

SUCCESS_STATES = frozenset({"passed"})
FAILURE_STATES = frozenset({"failed", "errored", "canceled"})
DONE_STATES = SUCCESS_STATES | FAILURE_STATES


def is_done(state: str) -> bool:
    """Whether no further transition can occur from this state."""
    return state in DONE_STATES


def is_success(state: str) -> bool:
    return state in SUCCESS_STATES
