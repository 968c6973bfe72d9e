"""Edit password hashing and verification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import bcrypt

from miniwiki.core.exceptions import PasswordHashError

if TYPE_CHECKING:
    from miniwiki.config import WikiConfig

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    try:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    except ValueError as exc:
        # bcrypt refuses passwords longer than 72 bytes
        raise PasswordHashError("Could not hash given password") from exc
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        logger.debug("Password check rejected by bcrypt", exc_info=True)
        return False


class AuthGate:
    """Single shared edit password check.

    ``verify`` only compares the candidate against the stored hash. An empty
    password is hashed too, so ``verify("")`` succeeds on a wiki configured
    without a password; callers must check ``is_editable()`` first.
    """

    def __init__(self, config: WikiConfig):
        self._pass_hash = config.pass_hash
        self._editable = config.editable

    def is_editable(self) -> bool:
        """Return True if a non-empty edit password was configured."""
        return self._editable

    def verify(self, candidate: str) -> bool:
        """Check a submitted password."""
        return verify_password(candidate, self._pass_hash)
