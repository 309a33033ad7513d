"""
Session persistence and the explicit session context.

The session is a single self-declared ``User`` kept in one named slot of
the store. ``SessionStore`` reads and writes that slot; ``SessionContext``
is the object handed to whatever needs the current user. It is loaded
once at startup and changes only through login, role toggle and logout.
There is no expiry and no server-side check of the claimed role.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from .db import Database
from .models import User, UserRole

logger = logging.getLogger(__name__)

SESSION_SLOT = "careerhub_session"


class SessionStore:
    """Reads and writes the serialized user in the session slot."""

    def __init__(self, db: Database, slot: str = SESSION_SLOT):
        self.db = db
        self.slot = slot

    def load(self) -> Optional[User]:
        raw = self.db.get_slot(self.slot)
        if not raw:
            return None
        try:
            return User.from_dict(json.loads(raw))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Ignoring unreadable session slot %s: %s", self.slot, exc)
            return None

    def save(self, user: User) -> None:
        self.db.set_slot(self.slot, json.dumps(user.to_dict()))

    def clear(self) -> None:
        self.db.delete_slot(self.slot)


class SessionContext:
    """The current user, if any, plus the store it is persisted in."""

    def __init__(self, store: SessionStore):
        self.store = store
        self.user: Optional[User] = store.load()

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def role(self) -> Optional[UserRole]:
        return self.user.role if self.user else None

    def login(self, user: User) -> User:
        self.user = user
        self.store.save(user)
        logger.info("Session started for %s as %s", user.email, user.role.value)
        return user

    def logout(self) -> None:
        if self.user is not None:
            logger.info("Session ended for %s", self.user.email)
        self.user = None
        self.store.clear()

    def toggle_role(self) -> Optional[User]:
        """Flip between ADMIN and EMPLOYEE. No-op without a session."""
        if self.user is None:
            return None
        new_role = UserRole.EMPLOYEE if self.user.role == UserRole.ADMIN else UserRole.ADMIN
        self.user = self.user.with_role(new_role)
        self.store.save(self.user)
        logger.info("Switched %s to %s view", self.user.email, new_role.value)
        return self.user
