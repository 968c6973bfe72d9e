"""Data models for MiniWiki."""

from pydantic import BaseModel, ConfigDict


class PageView(BaseModel):
    """Request-scoped input for rendering a page document.

    ``body`` is rendered HTML when viewing and raw Markdown when editing.
    """

    model_config = ConfigDict(frozen=True)

    wiki_name: str
    editable: bool
    page_name: str
    body: str
    edit_mode: bool = False


class EditSubmission(BaseModel):
    """Fields of a submitted edit form."""

    body: str = ""
    password: str = ""
