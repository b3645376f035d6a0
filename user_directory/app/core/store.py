"""
In‑memory storage for user records.

``UserStore`` owns the ordered list of records and the id counter.
It is deliberately free of validation and HTTP concerns; the service
layer decides what may be stored.  Each application instance creates
its own store, so nothing here is a process‑wide global.

All methods run under a single lock.  Id assignment (read the counter,
then increment it) is therefore atomic, and concurrent mutations of
the same record are applied one after another in arrival order: the
last write wins, and a rename that arrives after a removal finds
nothing to rename.
"""

import threading
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

SEED_NAMES = ("John Doe", "Jane Smith", "Bob Johnson")


@dataclass
class UserRecord:
    """A single user entry."""

    id: int
    name: str


class UserStore:
    """Ordered, lock‑protected collection of ``UserRecord`` objects.

    Records are kept in insertion order.  Ids start at 1 and are never
    reused, even after the record holding them has been removed.
    Methods return copies so that callers cannot mutate stored state
    behind the lock's back.
    """

    def __init__(self, seed_names: Iterable[str] = SEED_NAMES) -> None:
        self._lock = threading.Lock()
        self._seed_names = tuple(seed_names)
        self._users: List[UserRecord] = []
        self._next_id = 1
        self.reset()

    @property
    def next_id(self) -> int:
        """Id that the next ``add_user`` call will assign."""
        with self._lock:
            return self._next_id

    def reset(self) -> None:
        """Drop all records and reload the seed data."""
        with self._lock:
            self._users = [UserRecord(id=i, name=name) for i, name in enumerate(self._seed_names, start=1)]
            self._next_id = len(self._users) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_users(self) -> List[UserRecord]:
        with self._lock:
            return [replace(user) for user in self._users]

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        with self._lock:
            user = self._find(user_id)
            return replace(user) if user else None

    def add_user(self, name: str) -> UserRecord:
        """Append a record with the next id and return it."""
        with self._lock:
            user = UserRecord(id=self._next_id, name=name)
            self._next_id += 1
            self._users.append(user)
            return replace(user)

    def rename_user(self, user_id: int, name: str) -> Optional[Tuple[str, UserRecord]]:
        """Replace the name of a record in place.

        Returns ``(previous_name, updated_record)``, or ``None`` if no
        record has the given id.
        """
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None
            previous_name = user.name
            user.name = name
            return previous_name, replace(user)

    def remove_user(self, user_id: int) -> Optional[UserRecord]:
        """Remove a record and return it, or ``None`` if it does not exist."""
        with self._lock:
            for index, user in enumerate(self._users):
                if user.id == user_id:
                    return self._users.pop(index)
            return None

    def _find(self, user_id: int) -> Optional[UserRecord]:
        # Callers must hold the lock.
        for user in self._users:
            if user.id == user_id:
                return user
        return None
