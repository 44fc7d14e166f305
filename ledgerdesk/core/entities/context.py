"""Explicit per-request user context."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserContext:
    """
    Identity of the user a request acts for.

    Passed into every store call and use case; nothing looks up a
    "current user" from ambient state.
    """

    user_id: str

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise ValueError("user_id must be a non-empty string")
