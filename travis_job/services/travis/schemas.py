"""
Data schemas for Travis API v3 payloads.
"""

from dataclasses import dataclass, asdict
from typing import Any

from travis_job.core.exceptions import DecodeError


def trigger_payload(branch: str) -> dict[str, Any]:
    """Body of a build request for the given branch."""
    return {"request": {"branch": branch}}


@dataclass(frozen=True)
class BuildRecord:
    """A build created by Travis for a request."""

    id: str
    state: str
    previous_state: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "BuildRecord":
        """
        Build a record from one element of a request's ``builds`` list.

        Raises:
            DecodeError: If the element is not a build object
        """
        if not isinstance(data, dict):
            raise DecodeError("Travis API returned a malformed build")
        build_id = data.get("id")
        state = data.get("state")
        if build_id is None or not isinstance(state, str):
            raise DecodeError("Travis API build is missing id or state")
        return cls(
            id=str(build_id),
            state=state,
            previous_state=data.get("previous_state"),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)
