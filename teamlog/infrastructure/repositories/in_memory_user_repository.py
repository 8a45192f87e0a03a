"""In-memory implementation of UserRepository."""

from typing import Dict, Iterable, List, Optional

from ...models.user import User
from ...models.value_objects import Role


class InMemoryUserRepository:
    """Concrete UserRepository backed by a dict keyed by user ID."""

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self._users: Dict[str, User] = {u.id: u for u in users or ()}

    def add(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Look up a user by ID."""
        return self._users.get(user_id)

    async def list_by_role(self, role: Role) -> List[User]:
        """All users with *role*, in registration order."""
        return [u for u in self._users.values() if u.role == role]

    async def find_team_manager(self, team_id: Optional[str]) -> Optional[User]:
        """First manager registered for *team_id*."""
        if team_id is None:
            return None
        for user in self._users.values():
            if user.role == Role.MANAGER and user.team_id == team_id:
                return user
        return None
