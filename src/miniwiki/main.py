"""MiniWiki ASGI entry point: ``uvicorn miniwiki.main:app``.

Settings come from MINIWIKI_* environment variables and ``.env``.
"""

from miniwiki.app import create_app

app = create_app()
