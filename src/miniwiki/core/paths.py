"""URL path classification for view and edit routes."""

import re

HOME_PAGE = "home"

PAGE_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_-]*")
VIEW_PATH_PATTERN = re.compile(r"^/([a-zA-Z0-9_-]*)$")
EDIT_PATH_PATTERN = re.compile(r"^/e/([a-zA-Z0-9_-]+)$")


def is_valid_page_name(name: str) -> bool:
    """Return True if name is a non-empty identifier usable as a filename stem."""
    return bool(name) and PAGE_NAME_PATTERN.fullmatch(name) is not None


def match_view_path(path: str) -> str | None:
    """Return the page name for a view path, or None if it is not valid.

    The site root maps to the home page.
    """
    # fullmatch, since "$" would also accept a trailing newline
    match = VIEW_PATH_PATTERN.fullmatch(path)
    if match is None:
        return None
    return match.group(1) or HOME_PAGE


def match_edit_path(path: str) -> str | None:
    """Return the page name for an ``/e/<name>`` path, or None if it is not valid."""
    match = EDIT_PATH_PATTERN.fullmatch(path)
    if match is None:
        return None
    return match.group(1)
