"""CurrentUser - the application's view of the authenticated caller.

Authentication itself lives outside this service; adapters translate the
authenticated principal into this type.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CurrentUser:
    """Immutable representation of the current authenticated user."""

    user_id: UUID
    email: str = ""

    def owns(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def __str__(self) -> str:
        return f"CurrentUser({self.email or self.user_id})"
