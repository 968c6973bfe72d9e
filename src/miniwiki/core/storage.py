"""Storage abstraction for wiki pages."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from miniwiki.core.exceptions import InvalidPageName, StorageError
from miniwiki.core.paths import is_valid_page_name

logger = logging.getLogger(__name__)

PAGE_FILE_MODE = 0o640


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def read_page(self, name: str) -> tuple[str, bool]:
        """Read a page's source. Returns (content, exists).

        A missing page is ("", False). Other failures raise StorageError.
        """
        ...

    @abstractmethod
    async def write_page(self, name: str, content: str) -> None:
        """Write a page's source, creating or overwriting it."""
        ...

    @abstractmethod
    async def delete_page(self, name: str) -> bool:
        """Delete a page. Returns True if deleted, False if it did not exist."""
        ...

    @abstractmethod
    async def page_exists(self, name: str) -> bool:
        """Check if a page exists."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Pages are stored as plain Markdown files named ``<name>.md`` directly in
    ``base_path``. Nothing is cached; every call goes to the filesystem.
    """

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)

    def _get_path(self, name: str) -> Path:
        """Get the canonical path for a page, refusing anything outside base_path."""
        if not is_valid_page_name(name):
            raise InvalidPageName(f"Invalid page name: {name!r}")
        root = self.base_path.resolve()
        path = (root / f"{name}.md").resolve()
        if path.parent != root:
            raise InvalidPageName(f"Page path escapes storage directory: {name!r}")
        return path

    async def read_page(self, name: str) -> tuple[str, bool]:
        """Read a page's source."""
        path = self._get_path(name)
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return f.read(), True
        except FileNotFoundError:
            return "", False
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Could not read page {name!r} at {path}: {exc}") from exc

    async def write_page(self, name: str, content: str) -> None:
        """Write a page's source."""
        path = self._get_path(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PAGE_FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as exc:
            raise StorageError(f"Could not write page {name!r} at {path}: {exc}") from exc
        logger.debug("Wrote %d characters to %s", len(content), path)

    async def delete_page(self, name: str) -> bool:
        """Delete a page."""
        path = self._get_path(name)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Could not delete page {name!r} at {path}: {exc}") from exc
        return True

    async def page_exists(self, name: str) -> bool:
        """Check if a page exists."""
        return self._get_path(name).is_file()
