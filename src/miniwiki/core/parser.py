"""Markdown parser with wiki link support."""

import re
from xml.etree.ElementTree import Element

from markdown import Markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor, SimpleTagInlineProcessor


# Pattern for wiki links: [[Page]], [[Page|Label]], [[Page#frag]], [[#frag]]
WIKI_LINK_PATTERN = r"\[\[([^\]|#]*)(?:#([^\]|]*))?(?:\|([^\]]+))?\]\]"

# Pattern for strikethrough: ~~text~~
# Group 2 must contain the text (SimpleTagInlineProcessor expectation)
STRIKETHROUGH_PATTERN = r"(~~)(.*?)~~"


def resolve_wiki_link(target: str, fragment: str | None = None) -> str:
    """Resolve a wiki link target to a page URL.

    ``[[Page]]`` points at ``/Page``. A trailing ``.html`` on the target is
    dropped since pages are served without an extension.
    """
    dest = target.strip().replace(" ", "_").removesuffix(".html")
    url = f"/{dest}" if dest else ""
    if fragment:
        url += f"#{fragment.strip()}"
    return url


class StrikethroughExtension(Extension):
    """Markdown extension for ~~strikethrough~~ text."""

    def extendMarkdown(self, md: Markdown) -> None:
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del"),
            "strikethrough",
            50,
        )


class WikiLinkInlineProcessor(InlineProcessor):
    """Inline processor for wiki links."""

    def handleMatch(self, m: re.Match, data: str) -> tuple[Element | None, int, int]:
        """Convert wiki link match to HTML anchor element."""
        target = m.group(1).strip()
        fragment = m.group(2)
        label = m.group(3)

        if not target and not fragment:
            # [[]] or [[#]] is left as literal text
            return None, None, None

        if label:
            label = label.strip()
        else:
            label = target or fragment.strip()

        el = Element("a")
        el.text = label
        el.set("href", resolve_wiki_link(target, fragment))
        el.set("class", "wiki-link")
        return el, m.start(0), m.end(0)


class WikiLinkExtension(Extension):
    """Markdown extension for wiki links."""

    def extendMarkdown(self, md: Markdown) -> None:
        md.inlinePatterns.register(
            WikiLinkInlineProcessor(WIKI_LINK_PATTERN, md),
            "wiki_link",
            75,
        )


def create_parser() -> Markdown:
    """Create a Markdown parser with wiki link support.

    Raw HTML in the source is passed through unescaped.

    Returns:
        Configured Markdown parser instance.
    """
    return Markdown(
        extensions=[
            "fenced_code",
            "footnotes",
            "tables",
            "sane_lists",
            "toc",  # Heading ids
            "pymdownx.tasklist",
            "pymdownx.magiclink",  # Bare URL autolinks
            StrikethroughExtension(),
            WikiLinkExtension(),
        ]
    )


def parse_wiki_content(content: str) -> str:
    """Parse wiki content (Markdown + wiki links) to HTML.

    Args:
        content: Markdown content with wiki links.

    Returns:
        HTML string.
    """
    parser = create_parser()
    return parser.convert(content)
