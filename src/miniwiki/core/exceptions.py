"""Exception types for MiniWiki.

``StorageError`` details (paths, OS error text) are logged server side and
never returned to clients; the HTTP layer answers with a fixed 500 message.
"""


class MiniWikiError(Exception):
    """Base class for MiniWiki errors."""


class StorageError(MiniWikiError):
    """A page file exists but could not be read, written or deleted."""


class InvalidPageName(MiniWikiError, ValueError):
    """A page name is malformed or would resolve outside the storage directory."""


class PasswordHashError(MiniWikiError):
    """The configured edit password could not be hashed."""
