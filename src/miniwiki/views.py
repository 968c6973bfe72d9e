"""HTML document rendering for page views."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from miniwiki.core.models import PageView

templates_path = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(templates_path))


def render_page(view: PageView) -> str:
    """Render a page view to a complete HTML document."""
    return templates.get_template("page.html").render(view=view)
