"""Command line entry point."""

import logging

import uvicorn

from miniwiki.app import configure_logging, create_app
from miniwiki.config import Settings

logger = logging.getLogger(__name__)


def cli_entry() -> None:
    """Run the server.

    Settings come from command line flags, then MINIWIKI_* environment
    variables, then defaults. The app is built once, from these settings.
    """
    settings = Settings(_cli_parse_args=True)
    configure_logging(settings.debug)
    wiki_app = create_app(settings)
    logger.info("Listening on %s:%d", settings.host, settings.port)
    uvicorn.run(wiki_app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    cli_entry()
