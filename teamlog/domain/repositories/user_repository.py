"""UserRepository protocol: user lookup contract."""

from typing import List, Optional, Protocol, runtime_checkable

from ...models.user import User
from ...models.value_objects import Role


@runtime_checkable
class UserRepository(Protocol):
    """Repository interface for User entity access."""

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Look up a user by ID.

        Returns:
            The User object, or None if not found.
        """
        ...

    async def list_by_role(self, role: Role) -> List[User]:
        """All users with the given role, in registration order."""
        ...

    async def find_team_manager(self, team_id: Optional[str]) -> Optional[User]:
        """The manager of *team_id*, or None."""
        ...
