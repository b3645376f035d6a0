"""
Business logic for users.

``UserService`` validates input, delegates storage to an injected
``UserStore`` and converts stored records into ``UserRead`` schemas.
Every operation is logged; failures are raised as ``ValidationError``
or ``NotFoundError`` and translated to HTTP responses by the
application's exception handlers.
"""

import logging
import re
from typing import List, Optional

from ..core.exceptions import NotFoundError, ValidationError
from ..core.store import UserStore
from ..schemas.user import UserDeleted, UserRead

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "User deleted successfully"
_ID_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def clean_name(name: Optional[str]) -> str:
    """Return the trimmed name or raise ``ValidationError`` if it is blank."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError()
    return name.strip()


def parse_user_id(raw_id) -> Optional[int]:
    """Parse a path id into an integer.

    The leading integer is used and anything after it is ignored, so
    ``"2abc"`` and ``"1.5"`` resolve to 2 and 1.  Ids without leading
    digits yield ``None``, which never matches a stored id.
    """
    if isinstance(raw_id, int):
        return raw_id
    match = _ID_PATTERN.match(str(raw_id))
    if match is None:
        return None
    return int(match.group(1))


class UserService:
    """User operations over an in‑memory store.

    Operates on the store it is constructed with, so each application
    (and each test) can use its own collection.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    async def list_users(self) -> List[UserRead]:
        users = [UserRead.model_validate(user) for user in self.store.list_users()]
        logger.info("GET /api/users - Returning all users (%d)", len(users))
        return users

    async def create_user(self, name: Optional[str]) -> UserRead:
        """Create a user with the next free id.

        The name is trimmed before it is stored.  Raises
        ``ValidationError`` when the name is missing or blank; in that
        case the collection and the id counter are left untouched.
        """
        try:
            cleaned = clean_name(name)
        except ValidationError:
            logger.warning("POST /api/users - Error: Missing name field")
            raise
        user = UserRead.model_validate(self.store.add_user(cleaned))
        logger.info("POST /api/users - Created user id=%d name=%r", user.id, user.name)
        return user

    async def update_user(self, raw_id, name: Optional[str]) -> UserRead:
        """Rename an existing user.

        The name is validated before the id is looked up, so a blank
        name is reported even for an unknown id.
        """
        try:
            cleaned = clean_name(name)
        except ValidationError:
            logger.warning("PUT /api/users/%s - Error: Missing name field", raw_id)
            raise
        user_id = parse_user_id(raw_id)
        renamed = self.store.rename_user(user_id, cleaned) if user_id is not None else None
        if renamed is None:
            logger.warning("PUT /api/users/%s - Error: User not found", raw_id)
            raise NotFoundError()
        previous_name, updated = renamed
        logger.info("PUT /api/users/%s - Updated user %d: %r -> %r", raw_id, updated.id, previous_name, updated.name)
        return UserRead.model_validate(updated)

    async def delete_user(self, raw_id) -> UserDeleted:
        """Remove a user and return it wrapped in a confirmation message."""
        user_id = parse_user_id(raw_id)
        removed = self.store.remove_user(user_id) if user_id is not None else None
        if removed is None:
            logger.warning("DELETE /api/users/%s - Error: User not found", raw_id)
            raise NotFoundError()
        logger.info("DELETE /api/users/%s - Deleted user id=%d name=%r", raw_id, removed.id, removed.name)
        return UserDeleted(message=DELETED_MESSAGE, user=UserRead.model_validate(removed))
