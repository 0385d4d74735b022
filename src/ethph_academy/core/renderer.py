"""Tutorial rendering.

Tutorial bodies are Markdown files bundled with the package. Fenced code
blocks go through Pygments and get an optional title bar with a copy
button; the info string is ``<language> [title=<name>]``.
"""

import logging
from dataclasses import dataclass
from html import escape
from importlib.resources import files
from importlib.resources.abc import Traversable

import mistune
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from ethph_academy.core.catalog import Tutorial

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "solidity"
CODE_CSS_CLASS = "codehilite"


class CodeBlockFormatter:
    """Render read-only code samples as highlighted HTML."""

    def __init__(self, style: str = "monokai") -> None:
        self._style = style
        self._formatter = HtmlFormatter(style=style, cssclass=CODE_CSS_CLASS)
        self._numbered_formatter = HtmlFormatter(
            style=style,
            cssclass=CODE_CSS_CLASS,
            linenos="table",
        )

    @property
    def stylesheet(self) -> str:
        """CSS for highlighted code blocks."""
        return self._formatter.get_style_defs(f".{CODE_CSS_CLASS}")

    def render(
        self,
        code: str,
        language: str = DEFAULT_LANGUAGE,
        title: str | None = None,
        *,
        line_numbers: bool = True,
    ) -> str:
        """Render a code block.

        Args:
            code: Source text
            language: Pygments lexer alias; unknown names fall back to plain text
            title: Caption shown above the code together with a copy button
            line_numbers: Show a line number gutter

        Returns:
            HTML fragment
        """
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            logger.debug(f"No lexer for {language!r}, rendering as plain text")
            lexer = TextLexer()

        formatter = self._numbered_formatter if line_numbers else self._formatter
        body = highlight(code, lexer, formatter)

        header = ""
        if title:
            header = (
                '<div class="code-block__header">'
                f"<span>{escape(title)}</span>"
                '<button type="button" class="code-block__copy" aria-label="Copy code" '
                f'data-code="{escape(code, quote=True)}">Copy</button>'
                "</div>"
            )
        return (
            f'<div class="code-block" data-language="{escape(language, quote=True)}">'
            f"{header}{body}</div>"
        )


def _parse_info(info: str | None) -> tuple[str, str | None]:
    """Split a fence info string into language and optional title."""
    if not info or not info.strip():
        return DEFAULT_LANGUAGE, None
    language, _, rest = info.strip().partition(" ")
    title = None
    rest = rest.strip()
    if rest.startswith("title="):
        title = rest.removeprefix("title=").strip().strip('"') or None
    return language, title


class TutorialHTMLRenderer(mistune.HTMLRenderer):
    """Mistune HTML renderer that delegates fenced code to CodeBlockFormatter."""

    def __init__(self, code_blocks: CodeBlockFormatter) -> None:
        super().__init__(escape=True)
        self._code_blocks = code_blocks

    def block_code(self, code: str, info: str | None = None) -> str:
        language, title = _parse_info(info)
        return self._code_blocks.render(code.rstrip("\n"), language, title)


@dataclass
class RenderResult:
    """Rendered tutorial body."""

    tutorial: Tutorial
    html: str


class TutorialRenderer:
    """Render bundled tutorial Markdown to HTML.

    Content ships with the package and never changes while the server runs,
    so every rendered body is kept after the first request.
    """

    def __init__(
        self,
        code_blocks: CodeBlockFormatter | None = None,
        content_root: Traversable | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            code_blocks: Formatter for fenced code (default: monokai style)
            content_root: Directory holding ``tutorials/<slug>.md``
                          (default: bundled content)
        """
        self._code_blocks = code_blocks or CodeBlockFormatter()
        self._content_root = content_root or files("ethph_academy").joinpath("content")
        self._markdown = mistune.create_markdown(
            renderer=TutorialHTMLRenderer(self._code_blocks),
            plugins=["table", "strikethrough"],
        )
        self._rendered: dict[str, RenderResult] = {}

    @property
    def code_blocks(self) -> CodeBlockFormatter:
        return self._code_blocks

    def source_for(self, tutorial: Tutorial) -> Traversable:
        return self._content_root.joinpath("tutorials", f"{tutorial.slug}.md")

    def render(self, tutorial: Tutorial) -> RenderResult:
        """Render a tutorial body.

        Raises:
            FileNotFoundError: If the tutorial has no Markdown source
        """
        cached = self._rendered.get(tutorial.slug)
        if cached is not None:
            return cached

        source = self.source_for(tutorial)
        if not source.is_file():
            raise FileNotFoundError(f"Tutorial source not found: {tutorial.slug}.md")

        text = source.read_text(encoding="utf-8")
        logger.debug(f"Rendering tutorial {tutorial.slug} ({len(text)} characters)")
        html = self._markdown(text)
        result = RenderResult(tutorial=tutorial, html=str(html))
        self._rendered[tutorial.slug] = result
        return result

    def render_markdown(self, text: str) -> str:
        """Render an arbitrary Markdown snippet."""
        return str(self._markdown(text))
