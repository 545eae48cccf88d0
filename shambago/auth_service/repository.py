"""
User record persistence over a local key-value store.

The store is any mutable string mapping: NiceGUI's persistent
``app.storage.general`` in the app, a plain ``dict`` in tests.
"""

from typing import MutableMapping, Optional

from pydantic import ValidationError

from shambago.auth_service.schemas import User
from shambago.common.logger import get_logger
from shambago.config import settings

logger = get_logger(__name__)

KeyValueStore = MutableMapping[str, str]


class UserRepository:
    """
    Reads, writes and deletes the single stored user record.
    """

    def __init__(self, store: KeyValueStore, key: Optional[str] = None):
        self.store = store
        self.key = key or settings.USER_STORAGE_KEY

    def load(self) -> Optional[User]:
        """
        Load the stored user record.

        Returns:
            Optional[User]: The record, or None if it is missing or
            cannot be decoded.
        """
        raw = self.store.get(self.key)
        if raw is None:
            logger.debug("No stored user record", extra={"key": self.key})
            return None

        try:
            return User.model_validate_json(raw)

        except (ValidationError, ValueError, TypeError):
            logger.warning(
                "Discarding unreadable user record",
                extra={"key": self.key},
            )
            return None

    def save(self, user: User) -> None:
        """
        Persist the user record, replacing any previous one.
        """
        self.store[self.key] = user.model_dump_json(by_alias=True)

        logger.debug("User record persisted", extra={"key": self.key})

    def delete(self) -> bool:
        """
        Delete the stored user record.

        Returns:
            bool: True if a record was removed.
        """
        removed = self.store.pop(self.key, None) is not None

        logger.debug(
            "User record deleted",
            extra={"key": self.key, "removed": removed},
        )
        return removed
