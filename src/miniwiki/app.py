"""MiniWiki FastAPI application factory."""

import logging
import sys

from fastapi import FastAPI, Form, Request
from fastapi.responses import Response

from miniwiki import __version__
from miniwiki.config import Settings, WikiConfig
from miniwiki.core.auth import AuthGate
from miniwiki.core.controller import PageController, internal_server_error
from miniwiki.core.exceptions import MiniWikiError
from miniwiki.core.models import EditSubmission
from miniwiki.core.storage import FileStorage

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure application logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_controller(request: Request) -> PageController:
    return request.app.state.controller


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the application.

    Hashes the edit password once; a password that cannot be hashed raises
    PasswordHashError and nothing is served.
    """
    if settings is None:
        settings = Settings()

    config = WikiConfig.from_settings(settings)
    storage = FileStorage(config.data_dir)
    auth = AuthGate(config)

    if not config.editable:
        logger.warning("No edit password was given, page editing is disabled")

    app = FastAPI(
        title=config.name,
        version=__version__,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.config = config
    app.state.controller = PageController(config, storage, auth)

    @app.exception_handler(MiniWikiError)
    async def wiki_error_handler(request: Request, exc: MiniWikiError) -> Response:
        logger.error(
            "%s in %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return internal_server_error()

    # Names are validated against the decoded request path by the controller,
    # the route parameters only serve for matching.
    @app.get("/e/{rest:path}")
    async def edit_page(request: Request, rest: str):
        """Edit page form."""
        return await get_controller(request).edit_page(request.scope["path"])

    @app.post("/e/{rest:path}")
    async def submit_page(
        request: Request,
        rest: str,
        body: str = Form(""),
        password: str = Form("", alias="pass"),
    ):
        """Save or delete a page."""
        submission = EditSubmission(body=body, password=password)
        return await get_controller(request).submit_page(request.scope["path"], submission)

    @app.get("/{rest:path}")
    async def show_page(request: Request, rest: str):
        """View a wiki page."""
        return await get_controller(request).show_page(request.scope["path"])

    return app
