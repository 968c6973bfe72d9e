"""View and edit request flows.

The controller only sees a raw URL path, the submitted form fields and its
injected collaborators, and answers with a Starlette response. Storage and
rendering are passed in so the flows can be exercised with fakes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from starlette.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from miniwiki.core.exceptions import InvalidPageName, StorageError
from miniwiki.core.models import EditSubmission, PageView
from miniwiki.core.parser import parse_wiki_content
from miniwiki.core.paths import match_edit_path, match_view_path
from miniwiki.views import render_page

if TYPE_CHECKING:
    from miniwiki.config import WikiConfig
    from miniwiki.core.auth import AuthGate
    from miniwiki.core.storage import Storage

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_TEXT = "500 internal server error"
PAGE_NOT_FOUND_TEXT = "404 page not found"


def internal_server_error() -> Response:
    """Generic 500 response; never carries paths or error details."""
    return PlainTextResponse(INTERNAL_SERVER_ERROR_TEXT, status_code=500)


def redirect_to_root() -> Response:
    return RedirectResponse(url="/", status_code=301)


def view_url(name: str) -> str:
    return f"/{name}"


def edit_url(name: str) -> str:
    return f"/e/{name}"


class PageController:
    """Implements the view flow (``/<name>``) and the edit flow (``/e/<name>``)."""

    def __init__(
        self,
        config: WikiConfig,
        storage: Storage,
        auth: AuthGate,
        render_markdown: Callable[[str], str] = parse_wiki_content,
        render_view: Callable[[PageView], str] = render_page,
    ):
        self.config = config
        self.storage = storage
        self.auth = auth
        self.render_markdown = render_markdown
        self.render_view = render_view

    def _page_response(self, name: str, body: str, edit_mode: bool) -> Response:
        view = PageView(
            wiki_name=self.config.name,
            editable=self.auth.is_editable(),
            page_name=name,
            body=body,
            edit_mode=edit_mode,
        )
        return HTMLResponse(self.render_view(view))

    def _edit_target(self, path: str) -> str | Response:
        """Resolve an edit path to a page name, or to the redirect to send instead."""
        name = match_edit_path(path)
        if name is None:
            return redirect_to_root()
        if not self.auth.is_editable():
            # Editing is switched off entirely without a password
            return RedirectResponse(url=view_url(name), status_code=302)
        return name

    async def show_page(self, path: str) -> Response:
        """Render a page, or send the visitor to create it."""
        name = match_view_path(path)
        if name is None:
            return redirect_to_root()

        try:
            content, exists = await self.storage.read_page(name)
        except (StorageError, InvalidPageName):
            logger.exception("Failed to read page %s", name)
            return internal_server_error()

        if not exists:
            if self.auth.is_editable():
                return RedirectResponse(url=edit_url(name), status_code=302)
            # The edit route sends read-only wikis back here, so redirecting
            # there would loop; answer 404 instead
            return PlainTextResponse(PAGE_NOT_FOUND_TEXT, status_code=404)

        return self._page_response(name, self.render_markdown(content), edit_mode=False)

    async def edit_page(self, path: str) -> Response:
        """Show the edit form pre-filled with the page source."""
        target = self._edit_target(path)
        if isinstance(target, Response):
            return target
        name = target

        try:
            # A missing page gives an empty form; it is created on first save
            content, _ = await self.storage.read_page(name)
        except (StorageError, InvalidPageName):
            # Never offer an empty form for a page that exists but is unreadable,
            # saving it would overwrite the real content
            logger.exception("Failed to read page %s for editing", name)
            return internal_server_error()

        return self._page_response(name, content, edit_mode=True)

    async def submit_page(self, path: str, submission: EditSubmission) -> Response:
        """Save, delete or reject a submitted edit."""
        target = self._edit_target(path)
        if isinstance(target, Response):
            return target
        name = target

        if not self.auth.verify(submission.password):
            logger.warning("Rejected edit of page %s: wrong password", name)
            # Show the form again so the typed content is not lost
            return self._page_response(name, submission.body, edit_mode=True)

        if submission.body == "":
            try:
                deleted = await self.storage.delete_page(name)
            except (StorageError, InvalidPageName):
                logger.exception("Failed to delete page %s", name)
                return internal_server_error()
            if deleted:
                logger.info("Deleted page %s", name)
            else:
                logger.info("Page %s was already absent, nothing to delete", name)
            return redirect_to_root()

        try:
            await self.storage.write_page(name, submission.body)
        except (StorageError, InvalidPageName):
            logger.exception("Failed to save page %s", name)
            return internal_server_error()

        logger.info("Saved page %s", name)
        return RedirectResponse(url=view_url(name), status_code=302)
